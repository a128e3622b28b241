from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .core.constants import (
    DEFAULT_FACILITY_STANDARD_UTC_OFFSET_HOURS,
    DEFAULT_FACILITY_TIMEZONE,
    DEFAULT_REMOTE_TIMEZONE,
    DEFAULT_REMOTE_UTC_OFFSET_HOURS,
)
from .database.connection import DatabaseConnection
from .schedules.listing import ScheduleListService
from .schedules.mysql_schedule_repository import MySQLShiftRecordRepository
from .schedules.repository import ShiftRecordRepository
from .schedules.service import ScheduleGridService
from .schedules.slots import SlotCatalog
from .timezones.offsets import OffsetResolver
from .timezones.provider import ClockAndZoneProvider, ZoneInfoProvider


@dataclass(frozen=True)
class Container:
    schedules_repo: ShiftRecordRepository

    clock: ClockAndZoneProvider
    resolver: OffsetResolver
    slot_catalog: SlotCatalog

    schedule_grid_service: ScheduleGridService
    schedule_list_service: ScheduleListService


def build_container(
    *,
    settings: Any = None,
    db_config: Optional[dict] = None,
    schedules_repo: Optional[ShiftRecordRepository] = None,
    clock: Optional[ClockAndZoneProvider] = None,
) -> Container:
    if schedules_repo is None:
        if db_config is None:
            db_config = getattr(settings, "DB_CONFIG")
        schedules_repo = MySQLShiftRecordRepository(DatabaseConnection.from_settings(db_config))

    clock = clock or ZoneInfoProvider()
    resolver = OffsetResolver(
        clock,
        facility_tz=getattr(settings, "FACILITY_TIMEZONE", DEFAULT_FACILITY_TIMEZONE),
        remote_tz=getattr(settings, "REMOTE_TIMEZONE", DEFAULT_REMOTE_TIMEZONE),
        facility_standard_offset_hours=int(
            getattr(settings, "FACILITY_STANDARD_UTC_OFFSET_HOURS", DEFAULT_FACILITY_STANDARD_UTC_OFFSET_HOURS)
        ),
        remote_offset_hours=int(getattr(settings, "REMOTE_UTC_OFFSET_HOURS", DEFAULT_REMOTE_UTC_OFFSET_HOURS)),
    )
    slot_catalog = SlotCatalog()

    return Container(
        schedules_repo=schedules_repo,
        clock=clock,
        resolver=resolver,
        slot_catalog=slot_catalog,
        schedule_grid_service=ScheduleGridService(resolver, catalog=slot_catalog),
        schedule_list_service=ScheduleListService(),
    )
