from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from ..common.time_labels import hour_to_compact_label, hour_to_label, join_range_label, parse_clock_string
from ..core.constants import HOURS_PER_DAY
from ..core.enums import DisplayTimezone
from ..timezones.offsets import OffsetResolver
from .model import DisplayDay, DisplaySlot, ShiftRecord


def in_hour_range(hour: int, start: int, end: int) -> bool:
    """``start <= hour < end``; a range with ``end < start`` wraps past midnight."""
    if start <= end:
        return start <= hour < end
    return hour >= start or hour < end


@dataclass(frozen=True)
class ShiftPlacement:
    """A shift's hours and start date on the displayed timezone's clock.

    ``crosses_midnight`` is always judged on the facility-local hours.
    """

    display_date: date
    start_hour: int
    end_hour: int
    crosses_midnight: bool

    def intersects(self, day: date) -> bool:
        if self.display_date == day:
            return True
        return self.crosses_midnight and self.display_date + timedelta(days=1) == day


class ShiftCellMatcher:
    """Decides whether a stored shift occupies a (day, slot) cell of the grid.

    Shift times are facility-local and matched by whole hours. In remote
    time the hours move by the delta resolved for the shift's own date, and
    the start can land on another calendar day. The record's facility date
    is never changed.
    """

    def __init__(self, resolver: OffsetResolver):
        self._resolver = resolver

    def _delta(self, shift: ShiftRecord, timezone: DisplayTimezone) -> int:
        if timezone == DisplayTimezone.FACILITY:
            return 0
        return self._resolver.delta_or_default(shift.calendar_date)

    def place(self, shift: ShiftRecord, timezone: DisplayTimezone) -> ShiftPlacement:
        """Raises FormatError when the stored times are malformed."""
        start_h, _ = parse_clock_string(shift.start_time)
        end_h, _ = parse_clock_string(shift.end_time)
        delta = self._delta(shift, timezone)

        starts_at = datetime.combine(shift.calendar_date, time(start_h)) + timedelta(hours=delta)
        return ShiftPlacement(
            display_date=starts_at.date(),
            start_hour=(start_h + delta) % HOURS_PER_DAY,
            end_hour=(end_h + delta) % HOURS_PER_DAY,
            crosses_midnight=end_h <= start_h,
        )

    def span_label(self, shift: ShiftRecord, timezone: DisplayTimezone) -> str:
        """``"10 PM - 2 AM"`` in facility time, ``"12nn - 4pm"`` in remote time."""
        p = self.place(shift, timezone)
        fmt = hour_to_label if timezone == DisplayTimezone.FACILITY else hour_to_compact_label
        return join_range_label(fmt(p.start_hour), fmt(p.end_hour))

    def occupies_cell(
        self,
        shift: ShiftRecord,
        day: DisplayDay,
        slot: DisplaySlot,
        timezone: DisplayTimezone,
    ) -> bool:
        p = self.place(shift, timezone)
        if not p.intersects(day.date):
            return False

        return (
            in_hour_range(slot.start_hour, p.start_hour, p.end_hour)
            or in_hour_range(p.start_hour, slot.start_hour, slot.end_hour)
            or in_hour_range(p.end_hour, slot.start_hour, slot.end_hour)
        )
