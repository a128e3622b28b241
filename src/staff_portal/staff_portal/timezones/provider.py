from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.exceptions import TimezoneResolutionError


class ClockAndZoneProvider(Protocol):
    """Narrow view of the platform clock and timezone database."""

    def utc_offset(self, tz_name: str, instant: datetime) -> timedelta:
        """UTC offset of ``tz_name`` at ``instant`` (naive = wall clock in that zone)."""

        raise NotImplementedError

    def today(self, tz_name: str) -> date:
        raise NotImplementedError


class ZoneInfoProvider(ClockAndZoneProvider):
    """Resolves offsets through the IANA database (``zoneinfo`` + ``tzdata``)."""

    def __init__(self):
        self._zones: dict[str, ZoneInfo] = {}

    def _zone(self, tz_name: str) -> ZoneInfo:
        zone = self._zones.get(tz_name)
        if zone is None:
            try:
                zone = ZoneInfo(tz_name)
            except (ZoneInfoNotFoundError, ValueError) as ex:
                raise TimezoneResolutionError(f"Unknown timezone: {tz_name!r}") from ex
            self._zones[tz_name] = zone
        return zone

    def utc_offset(self, tz_name: str, instant: datetime) -> timedelta:
        zone = self._zone(tz_name)
        if instant.tzinfo is None:
            aware = instant.replace(tzinfo=zone)
        else:
            aware = instant.astimezone(zone)

        offset = aware.utcoffset()
        if offset is None:
            raise TimezoneResolutionError(f"No UTC offset for {tz_name!r} at {instant.isoformat()}")
        return offset

    def today(self, tz_name: str) -> date:
        return datetime.now(tz=self._zone(tz_name)).date()
