import pytest

from src.staff_portal.staff_portal.common.time_labels import (
    format_clock_display,
    hour_to_compact_label,
    hour_to_label,
    parse_clock_string,
    parse_label_to_hour,
    split_range_label,
)
from src.staff_portal.staff_portal.core.exceptions import FormatError, ValidationError


def test_parse_label_midnight_and_noon():
    assert parse_label_to_hour("12 AM") == 0
    assert parse_label_to_hour("12 PM") == 12
    assert parse_label_to_hour("8 AM") == 8
    assert parse_label_to_hour("11 PM") == 23


def test_parse_label_is_total_on_all_24_labels():
    labels = [f"{h} AM" for h in [12] + list(range(1, 12))] + [f"{h} PM" for h in [12] + list(range(1, 12))]
    hours = [parse_label_to_hour(label) for label in labels]
    assert hours == list(range(24))
    assert [hour_to_label(h) for h in hours] == labels


@pytest.mark.parametrize("bad", ["8", "AM", "eight AM", "13 PM", "0 AM", "", "8 XM"])
def test_parse_label_rejects_malformed(bad):
    with pytest.raises(FormatError):
        parse_label_to_hour(bad)


def test_format_error_is_a_validation_error():
    with pytest.raises(ValidationError):
        parse_label_to_hour("noon")


def test_compact_labels():
    assert hour_to_compact_label(0) == "12mn"
    assert hour_to_compact_label(12) == "12nn"
    assert hour_to_compact_label(9) == "9am"
    assert hour_to_compact_label(16) == "4pm"
    with pytest.raises(FormatError):
        hour_to_compact_label(24)


def test_parse_clock_string():
    assert parse_clock_string("22:00") == (22, 0)
    assert parse_clock_string("09:30") == (9, 30)
    assert parse_clock_string("09:30:00") == (9, 30)
    for bad in ["9am", "25:00", "10:75", "", "10-00"]:
        with pytest.raises(FormatError):
            parse_clock_string(bad)


def test_split_range_and_display():
    assert split_range_label("11 PM - 2 AM") == ("11 PM", "2 AM")
    with pytest.raises(FormatError):
        split_range_label("11 PM to 2 AM")

    assert format_clock_display("22:00") == "10:00 PM"
    assert format_clock_display("00:15") == "12:15 AM"
    assert format_clock_display("") == ""
