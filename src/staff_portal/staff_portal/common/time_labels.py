"""Parsing and formatting of the human time labels used by the schedule grid.

Three notations are in play:

- slot labels, 12-hour with a meridiem marker: ``"8 AM"``, ``"11 PM"``
- compact labels for the remote timezone: ``"12mn"``, ``"3pm"``
- stored clock strings, 24-hour: ``"22:00"`` (``"22:00:00"`` from TIME columns)
"""

from __future__ import annotations

import re
from typing import Tuple

from ..core.exceptions import FormatError

_LABEL_RE = re.compile(r"^\s*(\d{1,2})\s+(AM|PM)\s*$", re.IGNORECASE)
_CLOCK_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})(?::(\d{2}))?\s*$")
_RANGE_SEP = " - "


def parse_label_to_hour(label: str) -> int:
    """Convert ``"<N> AM|PM"`` to a 24-hour value in [0, 23]."""
    m = _LABEL_RE.match(str(label or ""))
    if not m:
        raise FormatError(f"Invalid time label: {label!r}")

    hour = int(m.group(1))
    meridiem = m.group(2).upper()
    if not 1 <= hour <= 12:
        raise FormatError(f"Invalid time label: {label!r}")

    if meridiem == "AM":
        return 0 if hour == 12 else hour
    return hour if hour == 12 else hour + 12


def _require_hour(hour: int) -> int:
    if not isinstance(hour, int) or not 0 <= hour <= 23:
        raise FormatError(f"Hour out of range: {hour!r}")
    return hour


def hour_to_compact_label(hour: int) -> str:
    hour = _require_hour(hour)
    if hour == 0:
        return "12mn"
    if hour == 12:
        return "12nn"
    if hour < 12:
        return f"{hour}am"
    return f"{hour - 12}pm"


def hour_to_label(hour: int) -> str:
    """Inverse of :func:`parse_label_to_hour`: ``13 -> "1 PM"``."""
    hour = _require_hour(hour)
    meridiem = "AM" if hour < 12 else "PM"
    h12 = hour % 12 or 12
    return f"{h12} {meridiem}"


def parse_clock_string(value: str) -> Tuple[int, int]:
    m = _CLOCK_RE.match(str(value or ""))
    if not m:
        raise FormatError(f"Invalid clock string: {value!r}")

    hour, minute = int(m.group(1)), int(m.group(2))
    second = int(m.group(3) or 0)
    if hour > 23 or minute > 59 or second > 59:
        raise FormatError(f"Invalid clock string: {value!r}")
    return hour, minute


def split_range_label(label: str) -> Tuple[str, str]:
    """``"8 AM - 11 AM" -> ("8 AM", "11 AM")``."""
    parts = str(label or "").split(_RANGE_SEP)
    if len(parts) != 2:
        raise FormatError(f"Invalid range label: {label!r}")
    return parts[0].strip(), parts[1].strip()


def join_range_label(start: str, end: str) -> str:
    return f"{start}{_RANGE_SEP}{end}"


def format_clock_display(value: str) -> str:
    """``"22:00" -> "10:00 PM"``; empty input renders as an empty string."""
    if not value:
        return ""
    hour, minute = parse_clock_string(value)
    h12 = hour % 12 or 12
    meridiem = "AM" if hour < 12 else "PM"
    return f"{h12}:{minute:02d} {meridiem}"
