from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

import mysql.connector

from ..core.exceptions import DataAccessError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, format_mysql_time
from .model import ShiftRecord
from .repository import ShiftRecordRepository

logger = logging.getLogger(__name__)


class MySQLShiftRecordRepository(ShiftRecordRepository):
    """Read-only access to the ``schedules`` table (writes belong to the admin forms)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_shifts(self) -> Sequence[ShiftRecord]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    SELECT sc.id, sc.employee_id, sc.date, sc.time_in, sc.time_out, p.full_name
                    FROM schedules sc
                    LEFT JOIN profiles p ON p.id = sc.employee_id
                    ORDER BY sc.date ASC, sc.time_in ASC
                    """
                )
                rows = fetchall(cur)
        except mysql.connector.Error as ex:
            logger.error("Loading schedules failed: %s", ex)
            raise DataAccessError("Could not load schedules") from ex

        return [self._to_record(r) for r in rows]

    @staticmethod
    def _to_record(r: dict[str, Any]) -> ShiftRecord:
        name: Optional[str] = r.get("full_name") or None
        return ShiftRecord(
            shift_id=str(r["id"]),
            employee_id=str(r["employee_id"]),
            calendar_date=r["date"],
            start_time=format_mysql_time(r["time_in"]),
            end_time=format_mysql_time(r["time_out"]),
            employee_display_name=name,
        )
