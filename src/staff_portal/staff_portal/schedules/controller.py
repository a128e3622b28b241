from __future__ import annotations

import logging
from dataclasses import asdict

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_us_date, parse_iso_date
from ..core.constants import ALL_EMPLOYEES
from ..core.enums import DisplayTimezone, SortOrder
from ..core.exceptions import DataAccessError, ValidationError
from ..container import Container
from . import week
from .model import WeekGrid
from .slots import slot_clock_range

logger = logging.getLogger(__name__)


def _grid_payload(grid: WeekGrid, *, previous_week: str, next_week: str) -> dict:
    return {
        "week_start": grid.week_start.isoformat(),
        "caption": week.week_caption(grid.week_start),
        "timezone": grid.timezone.value,
        "timezone_caption": grid.timezone.caption,
        "switch_to": grid.timezone.other().value,
        "previous_week": previous_week,
        "next_week": next_week,
        "days": [
            {"date": d.date.isoformat(), "label": d.label, "display_date": format_us_date(d.date)}
            for d in grid.days
        ],
        "rows": [
            {
                "label": row.label,
                "start_hour": row.slot.start_hour,
                "end_hour": row.slot.end_hour,
                "cells": list(cells),
                "spans": list(spans),
            }
            for row, cells, spans in zip(grid.rows, grid.cells, grid.spans)
        ],
    }


def register(app: Flask, container: Container) -> None:
    def _error(message: str, status: int):
        return jsonify({"error": message}), status

    @app.route("/admin/schedules/week", methods=["GET"], endpoint="schedules_week")
    def schedules_week():
        try:
            date_s = request.args.get("date")
            reference = parse_iso_date(date_s) if date_s else container.clock.today(container.resolver.facility_tz)
            timezone = DisplayTimezone(request.args.get("tz") or DisplayTimezone.FACILITY.value)
        except (ValidationError, ValueError) as e:
            return _error(str(e), 400)

        try:
            shifts = container.schedules_repo.list_shifts()
        except DataAccessError as e:
            logger.exception("Schedule grid load failed")
            return _error(str(e), 503)

        svc = container.schedule_grid_service
        grid = svc.build_week(shifts, reference, timezone)
        return jsonify(
            _grid_payload(
                grid,
                previous_week=svc.previous_week(reference).isoformat(),
                next_week=svc.next_week(reference).isoformat(),
            )
        )

    @app.route("/admin/schedules/list", methods=["GET"], endpoint="schedules_list")
    def schedules_list():
        try:
            sort = SortOrder(request.args.get("sort") or SortOrder.ASC.value)
        except ValueError as e:
            return _error(str(e), 400)

        try:
            shifts = container.schedules_repo.list_shifts()
        except DataAccessError as e:
            logger.exception("Schedule list load failed")
            return _error(str(e), 503)

        svc = container.schedule_list_service
        rows = svc.list_rows(
            shifts,
            search=request.args.get("search") or "",
            employee=request.args.get("employee") or ALL_EMPLOYEES,
            sort=sort,
        )
        return jsonify(
            {
                "employees": svc.employee_names(shifts),
                "rows": [asdict(row) for row in rows],
            }
        )

    @app.route("/admin/schedules/slots", methods=["GET"], endpoint="schedules_slots")
    def schedules_slots():
        out = []
        for slot in container.slot_catalog.generate_slots():
            time_in, time_out = slot_clock_range(slot.label)
            out.append({"label": slot.label, "time_in": time_in, "time_out": time_out})
        return jsonify({"slots": out})
