from __future__ import annotations

from enum import Enum


class DisplayTimezone(str, Enum):
    """Timezone the schedule grid is rendered in."""

    FACILITY = "CST"
    REMOTE = "PHT"

    @property
    def caption(self) -> str:
        return {
            DisplayTimezone.FACILITY: "Central Time (Illinois)",
            DisplayTimezone.REMOTE: "Philippine Time",
        }[self]

    def other(self) -> "DisplayTimezone":
        if self == DisplayTimezone.FACILITY:
            return DisplayTimezone.REMOTE
        return DisplayTimezone.FACILITY


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"
