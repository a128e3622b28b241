from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from ..common.datetime_utils import format_us_date
from ..common.time_labels import format_clock_display, parse_clock_string
from ..core.constants import ALL_EMPLOYEES
from ..core.enums import SortOrder
from ..core.exceptions import FormatError
from .model import ShiftRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScheduleListRow:
    shift_id: str
    employee_id: str
    date: str
    employee: str
    time_in: str
    time_out: str
    duration: str


def shift_duration_label(time_in: str, time_out: str) -> str:
    """Hours between two clock strings, wrapping past midnight: ``"4.00 hrs"``."""
    if not time_in or not time_out:
        return ""
    start_h, start_m = parse_clock_string(time_in)
    end_h, end_m = parse_clock_string(time_out)

    minutes = (end_h * 60 + end_m) - (start_h * 60 + start_m)
    if minutes <= 0:
        minutes += 24 * 60
    return f"{minutes / 60:.2f} hrs"


class ScheduleListService:
    """Use case: the flat "All Schedules" table under the week grid."""

    def group_by_employee(self, shifts: Iterable[ShiftRecord]) -> dict[str, list[ShiftRecord]]:
        groups: dict[str, list[ShiftRecord]] = {}
        for s in shifts:
            groups.setdefault(s.display_name, []).append(s)
        return groups

    def employee_names(self, shifts: Iterable[ShiftRecord]) -> list[str]:
        return list(self.group_by_employee(shifts).keys())

    def filter_and_sort(
        self,
        shifts: Sequence[ShiftRecord],
        *,
        search: str = "",
        employee: str = ALL_EMPLOYEES,
        sort: SortOrder = SortOrder.ASC,
    ) -> list[ShiftRecord]:
        items = list(shifts)
        if employee and employee != ALL_EMPLOYEES:
            items = [s for s in items if s.display_name == employee]

        q = (search or "").strip().lower()
        if q:
            items = [s for s in items if q in (s.employee_display_name or "").lower() or q in s.calendar_date.isoformat()]

        items.sort(key=lambda s: s.calendar_date, reverse=sort == SortOrder.DESC)
        return items

    def list_rows(
        self,
        shifts: Sequence[ShiftRecord],
        *,
        search: str = "",
        employee: str = ALL_EMPLOYEES,
        sort: SortOrder = SortOrder.ASC,
    ) -> list[ScheduleListRow]:
        return [self._to_row(s) for s in self.filter_and_sort(shifts, search=search, employee=employee, sort=sort)]

    def _to_row(self, s: ShiftRecord) -> ScheduleListRow:
        try:
            time_in = format_clock_display(s.start_time)
            time_out = format_clock_display(s.end_time)
            duration = shift_duration_label(s.start_time, s.end_time)
        except FormatError as ex:
            logger.warning("Shift %s has malformed times: %s", s.shift_id, ex)
            time_in, time_out, duration = s.start_time, s.end_time, ""

        return ScheduleListRow(
            shift_id=s.shift_id,
            employee_id=s.employee_id,
            date=format_us_date(s.calendar_date),
            employee=s.display_name,
            time_in=time_in,
            time_out=time_out,
            duration=duration,
        )
