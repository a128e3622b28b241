from __future__ import annotations

from datetime import date, timedelta

from ..common.datetime_utils import format_us_date
from ..core.constants import DAYS_PER_WEEK
from .model import DisplayDay

_WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def start_of_week(value: date) -> date:
    """Monday on or before ``value``."""
    # Sunday=0..Saturday=6
    weekday_index = (value.weekday() + 1) % 7
    if weekday_index == 0:
        return value - timedelta(days=6)
    return value - timedelta(days=weekday_index - 1)


def advance(week_start: date, weeks: int) -> date:
    return week_start + timedelta(days=DAYS_PER_WEEK * int(weeks))


def days(week_start: date) -> tuple[DisplayDay, ...]:
    out = []
    for i in range(DAYS_PER_WEEK):
        d = week_start + timedelta(days=i)
        out.append(DisplayDay(date=d, label=_WEEKDAY_LABELS[d.weekday()]))
    return tuple(out)


def contains(week_start: date, value: date) -> bool:
    return week_start <= value < week_start + timedelta(days=DAYS_PER_WEEK)


def week_caption(week_start: date) -> str:
    return f"Week of {format_us_date(week_start)}"
