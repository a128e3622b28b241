from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Iterable, Optional, Sequence

from ..core.enums import DisplayTimezone
from ..core.exceptions import FormatError
from ..timezones.offsets import OffsetResolver
from . import week
from .matcher import ShiftCellMatcher
from .model import DisplayDay, DisplaySlot, ShiftRecord, SlotRow, WeekGrid
from .slots import SlotCatalog, SlotLabelConverter

logger = logging.getLogger(__name__)


class ScheduleGridService:
    """Use case: render the weekly shift grid for the admin schedule page.

    Every call is a pure function of its arguments; nothing is cached between
    renders, so week navigation and timezone toggling can be re-run freely.
    """

    def __init__(
        self,
        resolver: OffsetResolver,
        *,
        catalog: Optional[SlotCatalog] = None,
        converter: Optional[SlotLabelConverter] = None,
        matcher: Optional[ShiftCellMatcher] = None,
    ):
        self._resolver = resolver
        self._catalog = catalog or SlotCatalog()
        self._converter = converter or SlotLabelConverter(resolver)
        self._matcher = matcher or ShiftCellMatcher(resolver)

    def get_week_days(self, reference_date: date) -> tuple[DisplayDay, ...]:
        return week.days(week.start_of_week(reference_date))

    def get_slot_rows(self, timezone: DisplayTimezone, reference_date: date) -> tuple[SlotRow, ...]:
        # Headers use the week-start offset for the whole week, even across a DST change.
        week_start = week.start_of_week(reference_date)
        return tuple(
            SlotRow(
                slot=self._converter.convert_slot(slot, week_start, timezone),
                label=self._converter.convert_label(slot.label, week_start, timezone),
            )
            for slot in self._catalog.generate_slots()
        )

    def find_cell_shift(
        self,
        shifts: Iterable[ShiftRecord],
        day: DisplayDay,
        slot: DisplaySlot,
        timezone: DisplayTimezone,
    ) -> Optional[ShiftRecord]:
        """First shift in record order that occupies the cell."""
        for shift in shifts:
            try:
                if self._matcher.occupies_cell(shift, day, slot, timezone):
                    return shift
            except FormatError as ex:
                logger.warning("Skipping shift %s in grid: %s", shift.shift_id, ex)
        return None

    def match_cell(
        self,
        shifts: Iterable[ShiftRecord],
        day: DisplayDay,
        slot: DisplaySlot,
        timezone: DisplayTimezone,
    ) -> Optional[str]:
        shift = self.find_cell_shift(shifts, day, slot, timezone)
        return shift.display_name if shift else None

    def next_week(self, reference_date: date) -> date:
        return week.advance(week.start_of_week(reference_date), 1)

    def previous_week(self, reference_date: date) -> date:
        return week.advance(week.start_of_week(reference_date), -1)

    def toggle_timezone(self, current: DisplayTimezone) -> DisplayTimezone:
        return current.other()

    def visible_shifts(self, shifts: Iterable[ShiftRecord], week_start: date) -> list[ShiftRecord]:
        """Shifts dated inside the week, plus one day either side for overnight rows."""
        lead_day = week_start - timedelta(days=1)
        tail_day = week.advance(week_start, 1)
        return [
            s
            for s in shifts
            if s.calendar_date in (lead_day, tail_day) or week.contains(week_start, s.calendar_date)
        ]

    def build_week(
        self,
        shifts: Sequence[ShiftRecord],
        reference_date: date,
        timezone: DisplayTimezone,
    ) -> WeekGrid:
        week_start = week.start_of_week(reference_date)
        days = self.get_week_days(week_start)
        rows = self.get_slot_rows(timezone, week_start)
        candidates = self.visible_shifts(shifts, week_start)

        matched = [
            [self.find_cell_shift(candidates, day, row.slot, timezone) for day in days]
            for row in rows
        ]
        cells = tuple(tuple(s.display_name if s else None for s in line) for line in matched)
        spans = tuple(
            tuple(self._matcher.span_label(s, timezone) if s else None for s in line)
            for line in matched
        )
        logger.debug(
            "Built %s grid for week %s from %d of %d shifts",
            timezone.value,
            week_start.isoformat(),
            len(candidates),
            len(shifts),
        )
        return WeekGrid(week_start=week_start, timezone=timezone, days=days, rows=rows, cells=cells, spans=spans)
