from __future__ import annotations

from datetime import date, datetime

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError) as ex:
        raise ValidationError(f"Invalid date: {value!r}") from ex


def format_us_date(value: date) -> str:
    """MM/DD/YYYY, as shown in the grid header and list view."""
    return value.strftime("%m/%d/%Y")
