from __future__ import annotations

from datetime import date

import pytest

from src.staff_portal.staff_portal.container import build_container
from src.staff_portal.staff_portal.core.exceptions import DataAccessError
from src.staff_portal.staff_portal.main import create_app
from src.staff_portal.staff_portal.schedules.model import ShiftRecord


class InMemoryShiftRecords:
    def __init__(self, shifts=None, error=None):
        self._shifts = list(shifts or [])
        self._error = error
        self.calls = 0

    def list_shifts(self):
        self.calls += 1
        if self._error:
            raise self._error
        return list(self._shifts)


SHIFTS = [
    ShiftRecord("1", "u-1", date(2024, 1, 10), "22:00", "02:00", "Ana"),
    ShiftRecord("2", "u-2", date(2024, 1, 9), "08:00", "11:00", None),
]


@pytest.fixture
def make_client(monkeypatch, zone_provider):
    monkeypatch.setenv("APP_ENV", "testing")

    def _make(repo):
        container = build_container(schedules_repo=repo, clock=zone_provider)
        return create_app(container=container).test_client()

    return _make


def test_week_grid_in_facility_time(make_client):
    client = make_client(InMemoryShiftRecords(SHIFTS))
    resp = client.get("/admin/schedules/week?date=2024-01-10")
    assert resp.status_code == 200

    body = resp.get_json()
    assert body["week_start"] == "2024-01-08"
    assert body["caption"] == "Week of 01/08/2024"
    assert body["timezone"] == "CST"
    assert body["timezone_caption"] == "Central Time (Illinois)"
    assert body["switch_to"] == "PHT"
    assert body["previous_week"] == "2024-01-01"
    assert body["next_week"] == "2024-01-15"
    assert [d["label"] for d in body["days"]] == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

    rows = {r["label"]: r["cells"] for r in body["rows"]}
    spans = {r["label"]: r["spans"] for r in body["rows"]}
    assert rows["8 AM - 11 AM"][1] == "Unknown"
    assert rows["11 PM - 2 AM"][2] == "Ana"
    assert rows["2 AM - 5 AM"][3] == "Ana"
    assert rows["2 AM - 5 AM"][2] == "Ana"
    assert rows["5 AM - 8 AM"][2] is None
    assert spans["11 PM - 2 AM"][2] == "10 PM - 2 AM"
    assert spans["5 AM - 8 AM"][2] is None


def test_week_grid_in_remote_time(make_client):
    client = make_client(InMemoryShiftRecords(SHIFTS))
    body = client.get("/admin/schedules/week?date=2024-01-10&tz=PHT").get_json()

    assert body["timezone_caption"] == "Philippine Time"
    rows = {r["label"]: r for r in body["rows"]}
    assert (rows["1pm - 4pm"]["start_hour"], rows["1pm - 4pm"]["end_hour"]) == (13, 16)
    assert rows["1pm - 4pm"]["cells"][3] == "Ana"
    assert rows["1pm - 4pm"]["cells"][2] is None
    assert rows["1pm - 4pm"]["spans"][3] == "12nn - 4pm"


def test_week_defaults_to_facility_today(make_client, zone_provider):
    zone_provider.today_value = date(2024, 1, 12)
    body = make_client(InMemoryShiftRecords(SHIFTS)).get("/admin/schedules/week").get_json()
    assert body["week_start"] == "2024-01-08"


@pytest.mark.parametrize("query", ["date=2024-13-01", "date=yesterday", "tz=UTC"])
def test_week_rejects_bad_parameters(make_client, query):
    resp = make_client(InMemoryShiftRecords(SHIFTS)).get(f"/admin/schedules/week?{query}")
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_load_failure_is_reported_not_raised(make_client):
    repo = InMemoryShiftRecords(error=DataAccessError("Could not load schedules"))
    resp = make_client(repo).get("/admin/schedules/week?date=2024-01-10")
    assert resp.status_code == 503
    assert resp.get_json() == {"error": "Could not load schedules"}


def test_list_view(make_client):
    client = make_client(InMemoryShiftRecords(SHIFTS))
    body = client.get("/admin/schedules/list?sort=desc").get_json()

    assert body["employees"] == ["Ana", "Unknown"]
    assert [r["shift_id"] for r in body["rows"]] == ["1", "2"]
    assert body["rows"][0]["time_in"] == "10:00 PM"
    assert body["rows"][0]["duration"] == "4.00 hrs"

    filtered = client.get("/admin/schedules/list?employee=Unknown").get_json()
    assert [r["shift_id"] for r in filtered["rows"]] == ["2"]

    assert client.get("/admin/schedules/list?sort=sideways").status_code == 400


def test_slot_presets(make_client):
    body = make_client(InMemoryShiftRecords()).get("/admin/schedules/slots").get_json()
    assert len(body["slots"]) == 8
    assert body["slots"][5] == {"label": "11 PM - 2 AM", "time_in": "23:00", "time_out": "02:00"}
