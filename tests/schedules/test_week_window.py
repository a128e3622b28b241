from datetime import date, timedelta

from src.staff_portal.staff_portal.schedules import week


def test_start_of_week_wednesday():
    assert week.start_of_week(date(2024, 1, 10)) == date(2024, 1, 8)


def test_start_of_week_sunday_steps_back_six_days():
    assert week.start_of_week(date(2024, 1, 14)) == date(2024, 1, 8)


def test_start_of_week_monday_is_itself():
    assert week.start_of_week(date(2024, 1, 8)) == date(2024, 1, 8)


def test_start_of_week_is_idempotent_and_monday():
    d = date(2023, 12, 25)
    for i in range(60):
        start = week.start_of_week(d + timedelta(days=i))
        assert start.weekday() == 0
        assert week.start_of_week(start) == start


def test_advance_round_trip():
    w = date(2024, 1, 8)
    assert week.advance(w, 1) == date(2024, 1, 15)
    assert week.advance(week.advance(w, 1), -1) == w
    assert week.advance(w, -1) == date(2024, 1, 1)


def test_days_monday_through_sunday():
    days = week.days(date(2024, 1, 8))
    assert [d.label for d in days] == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    assert days[0].date == date(2024, 1, 8)
    assert days[-1].date == date(2024, 1, 14)


def test_days_across_month_and_dst_boundary():
    days = week.days(date(2024, 3, 4))
    assert days[-1].date == date(2024, 3, 10)


def test_contains_and_caption():
    w = date(2024, 1, 8)
    assert week.contains(w, date(2024, 1, 8))
    assert week.contains(w, date(2024, 1, 14))
    assert not week.contains(w, date(2024, 1, 15))
    assert not week.contains(w, date(2024, 1, 7))
    assert week.week_caption(w) == "Week of 01/08/2024"
