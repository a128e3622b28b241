from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta

import pytest

from src.staff_portal.staff_portal.core.exceptions import TimezoneResolutionError
from src.staff_portal.staff_portal.timezones.offsets import OffsetResolver

# US Central daylight time window for 2024
DST_2024 = (date(2024, 3, 10), date(2024, 11, 3))


@dataclass
class FakeZoneProvider:
    """Chicago/Manila offsets without touching the system timezone database."""

    dst_window: tuple[date, date] = DST_2024
    broken_dates: set[date] = field(default_factory=set)
    today_value: date = date(2024, 1, 10)
    calls: list[tuple[str, datetime]] = field(default_factory=list)

    def utc_offset(self, tz_name: str, instant: datetime) -> timedelta:
        self.calls.append((tz_name, instant))
        if instant.date() in self.broken_dates:
            raise TimezoneResolutionError(f"no data for {instant.date()}")
        if tz_name == "Asia/Manila":
            return timedelta(hours=8)
        if tz_name == "America/Chicago":
            start, end = self.dst_window
            return timedelta(hours=-5 if start <= instant.date() < end else -6)
        raise TimezoneResolutionError(f"unknown zone {tz_name}")

    def today(self, tz_name: str) -> date:
        return self.today_value


@pytest.fixture
def zone_provider() -> FakeZoneProvider:
    return FakeZoneProvider()


@pytest.fixture
def resolver(zone_provider: FakeZoneProvider) -> OffsetResolver:
    return OffsetResolver(zone_provider)
