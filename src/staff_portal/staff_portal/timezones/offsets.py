from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta, timezone

from ..core.constants import (
    DEFAULT_FACILITY_STANDARD_UTC_OFFSET_HOURS,
    DEFAULT_FACILITY_TIMEZONE,
    DEFAULT_REMOTE_TIMEZONE,
    DEFAULT_REMOTE_UTC_OFFSET_HOURS,
    OFFSET_PROBE_HOUR,
)
from ..core.exceptions import TimezoneResolutionError
from .provider import ClockAndZoneProvider

logger = logging.getLogger(__name__)


def _whole_hours(offset: timedelta) -> int:
    return int(offset.total_seconds() // 3600)


class OffsetResolver:
    """Hour delta between the remote-staff timezone and the facility timezone.

    The delta changes only when the facility enters or leaves DST, so it is
    resolved per calendar date and never cached across dates.
    """

    def __init__(
        self,
        provider: ClockAndZoneProvider,
        *,
        facility_tz: str = DEFAULT_FACILITY_TIMEZONE,
        remote_tz: str = DEFAULT_REMOTE_TIMEZONE,
        facility_standard_offset_hours: int = DEFAULT_FACILITY_STANDARD_UTC_OFFSET_HOURS,
        remote_offset_hours: int = DEFAULT_REMOTE_UTC_OFFSET_HOURS,
    ):
        self._provider = provider
        self._facility_tz = facility_tz
        self._remote_tz = remote_tz
        self._fallback_delta = int(remote_offset_hours) - int(facility_standard_offset_hours)

    @property
    def facility_tz(self) -> str:
        return self._facility_tz

    @property
    def remote_tz(self) -> str:
        return self._remote_tz

    @property
    def fallback_delta(self) -> int:
        return self._fallback_delta

    def resolve_delta_hours(self, calendar_date: date) -> int:
        probe = datetime.combine(calendar_date, time(OFFSET_PROBE_HOUR, 0))
        facility_offset = self._provider.utc_offset(self._facility_tz, probe)

        # Same physical instant, seen from the remote zone.
        instant_utc = (probe - facility_offset).replace(tzinfo=timezone.utc)
        remote_offset = self._provider.utc_offset(self._remote_tz, instant_utc)

        return _whole_hours(remote_offset) - _whole_hours(facility_offset)

    def delta_or_default(self, calendar_date: date) -> int:
        """Resolve the delta, falling back to the standard-time delta on failure."""
        try:
            return self.resolve_delta_hours(calendar_date)
        except TimezoneResolutionError as ex:
            logger.warning(
                "Timezone offset unavailable for %s (%s); using default delta %+d",
                calendar_date.isoformat(),
                ex,
                self._fallback_delta,
            )
            return self._fallback_delta
