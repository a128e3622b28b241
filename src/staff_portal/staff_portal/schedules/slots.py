from __future__ import annotations

from datetime import date
from typing import Optional

from ..common.time_labels import (
    hour_to_compact_label,
    hour_to_label,
    join_range_label,
    parse_label_to_hour,
    split_range_label,
)
from ..core.constants import HOURS_PER_DAY, SLOT_COUNT, SLOT_LENGTH_HOURS, SLOT_START_HOUR
from ..core.enums import DisplayTimezone
from ..timezones.offsets import OffsetResolver
from .model import DisplaySlot


def shift_hour(hour: int, delta: int) -> int:
    return (hour + delta + HOURS_PER_DAY) % HOURS_PER_DAY


def _build_catalog() -> tuple[DisplaySlot, ...]:
    slots = []
    for i in range(SLOT_COUNT):
        start = (SLOT_START_HOUR + i * SLOT_LENGTH_HOURS) % HOURS_PER_DAY
        end = (start + SLOT_LENGTH_HOURS) % HOURS_PER_DAY
        slots.append(DisplaySlot(start_hour=start, end_hour=end, label=join_range_label(hour_to_label(start), hour_to_label(end))))
    return tuple(slots)


class SlotCatalog:
    """Fixed facility-time rows of the week grid, starting at 8 AM."""

    _SLOTS = _build_catalog()

    def generate_slots(self) -> tuple[DisplaySlot, ...]:
        return self._SLOTS

    def labels(self) -> list[str]:
        return [s.label for s in self._SLOTS]

    def find(self, label: str) -> Optional[DisplaySlot]:
        for s in self._SLOTS:
            if s.label == label:
                return s
        return None


class SlotLabelConverter:
    """Rewrites facility slot labels into remote-staff time."""

    def __init__(self, resolver: OffsetResolver):
        self._resolver = resolver

    def convert_label(self, facility_label: str, calendar_date: date, timezone: DisplayTimezone) -> str:
        if timezone == DisplayTimezone.FACILITY:
            return facility_label

        start_label, end_label = split_range_label(facility_label)
        delta = self._resolver.delta_or_default(calendar_date)
        start = shift_hour(parse_label_to_hour(start_label), delta)
        end = shift_hour(parse_label_to_hour(end_label), delta)
        return join_range_label(hour_to_compact_label(start), hour_to_compact_label(end))

    def convert_slot(self, slot: DisplaySlot, calendar_date: date, timezone: DisplayTimezone) -> DisplaySlot:
        """Same row with its hour boundaries moved into ``timezone``."""
        if timezone == DisplayTimezone.FACILITY:
            return slot

        delta = self._resolver.delta_or_default(calendar_date)
        return DisplaySlot(
            start_hour=shift_hour(slot.start_hour, delta),
            end_hour=shift_hour(slot.end_hour, delta),
            label=slot.label,
        )


def slot_clock_range(label: str) -> tuple[str, str]:
    """Quick entry: ``"8 AM - 11 AM" -> ("08:00", "11:00")``."""
    start_label, end_label = split_range_label(label)
    start = parse_label_to_hour(start_label)
    end = parse_label_to_hour(end_label)
    return f"{start:02d}:00", f"{end:02d}:00"
