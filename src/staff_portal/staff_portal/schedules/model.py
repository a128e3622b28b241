from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..core.constants import UNKNOWN_EMPLOYEE_NAME
from ..core.enums import DisplayTimezone


@dataclass(frozen=True)
class ShiftRecord:
    """Domain entity: one stored shift, read-only for the grid engine.

    ``calendar_date``, ``start_time`` and ``end_time`` are facility-local.
    An end time at or before the start time means the shift runs into the
    next facility calendar date.
    """

    shift_id: str
    employee_id: str
    calendar_date: date
    start_time: str
    end_time: str
    employee_display_name: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.employee_display_name or UNKNOWN_EMPLOYEE_NAME


@dataclass(frozen=True)
class DisplaySlot:
    """One grid row: hour boundaries in the timezone being displayed."""

    start_hour: int
    end_hour: int
    label: str


@dataclass(frozen=True)
class DisplayDay:
    date: date
    label: str


@dataclass(frozen=True)
class SlotRow:
    slot: DisplaySlot
    label: str


@dataclass(frozen=True)
class WeekGrid:
    """Read-model for the week view.

    ``cells[row][day]`` is a name or None; ``spans`` holds the matched
    shift's displayed time range at the same position.
    """

    week_start: date
    timezone: DisplayTimezone
    days: tuple[DisplayDay, ...]
    rows: tuple[SlotRow, ...]
    cells: tuple[tuple[Optional[str], ...], ...] = field(default_factory=tuple)
    spans: tuple[tuple[Optional[str], ...], ...] = field(default_factory=tuple)
