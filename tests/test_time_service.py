from datetime import date

import pytest

from timesheet.core.errors import ValidationError
from timesheet.services.time_service import (
    compute_net_hours,
    derive_hours,
    expected_hours_for_date,
    format_time,
    parse_break_minutes,
    parse_time_to_minutes,
)

ROSTER = {
    "mo_hours": 8,
    "di_hours": 7.5,
    "mi_hours": 6,
    "do_hours": 5,
    "fr_hours": 4,
}


def test_parse_time_to_minutes():
    assert parse_time_to_minutes("00:00") == 0
    assert parse_time_to_minutes("08:30") == 510
    assert parse_time_to_minutes("23:59") == 1439


def test_parse_time_ignores_seconds():
    assert parse_time_to_minutes("08:00:00") == 480


@pytest.mark.parametrize("value", ["0800", "", "ab:cd", "8:", "07:75", "24:00", "-1:30"])
def test_parse_time_rejects_malformed(value):
    with pytest.raises(ValueError):
        parse_time_to_minutes(value)


def test_format_time_pads():
    assert format_time("8:5") == "08:05"
    assert format_time("17:30:00") == "17:30"
    assert format_time(None) is None


@pytest.mark.parametrize("start,end,expected", [
    ("08:00", "16:30", 8.5),
    ("00:00", "00:01", 1 / 60),
    ("09:15", "12:45", 3.5),
    ("06:00", "23:59", 1079 / 60),
])
def test_compute_net_hours(start, end, expected):
    result = compute_net_hours(start, end)
    assert result > 0
    assert result == expected


@pytest.mark.parametrize("value,expected", [
    (None, 0),
    ("", 0),
    ("abc", 0),
    (30, 30),
    ("45", 45),
    ("15min", 15),
    (30.7, 30),
    (True, 0),
])
def test_parse_break_minutes(value, expected):
    assert parse_break_minutes(value) == expected


def test_derive_hours_subtracts_break():
    assert derive_hours("08:00", "17:00", 30) == (8.5, 0.5)
    assert derive_hours("08:00", "17:00", None) == (9.0, 0.0)


@pytest.mark.parametrize("start,end", [
    ("08:00", "08:00"),
    ("17:00", "08:00"),
    ("23:59", "00:00"),
])
def test_derive_hours_rejects_start_not_before_end(start, end):
    with pytest.raises(ValidationError) as exc_info:
        derive_hours(start, end, 0)
    assert exc_info.value.status_code == 400
    assert "Arbeitsbeginn" in exc_info.value.message


def test_derive_hours_rejects_malformed_time():
    with pytest.raises(ValidationError):
        derive_hours("acht", "17:00", 0)


def test_derive_hours_allows_negative_net_hours():
    net_hours, break_hours = derive_hours("08:00", "09:00", 90)
    assert net_hours == -0.5
    assert break_hours == 1.5


@pytest.mark.parametrize("day,field", [
    (date(2024, 6, 3), "mo_hours"),
    (date(2024, 6, 4), "di_hours"),
    (date(2024, 6, 5), "mi_hours"),
    (date(2024, 6, 6), "do_hours"),
    (date(2024, 6, 7), "fr_hours"),
])
def test_expected_hours_uses_weekday_column(day, field):
    assert expected_hours_for_date(ROSTER, day) == ROSTER[field]


@pytest.mark.parametrize("day", [date(2024, 6, 8), date(2024, 6, 9), "2024-06-08"])
def test_expected_hours_zero_on_weekends(day):
    roster = {field: 10 for field in ROSTER}
    assert expected_hours_for_date(roster, day) == 0


def test_expected_hours_accepts_iso_string():
    assert expected_hours_for_date(ROSTER, "2024-06-05") == 6


def test_expected_hours_without_roster():
    assert expected_hours_for_date(None, date(2024, 6, 3)) == 0
    assert expected_hours_for_date({"mo_hours": None}, date(2024, 6, 3)) == 0


@pytest.mark.parametrize("break_time", ["9" * 400, 10 ** 400, "9" * 5000])
def test_derive_hours_rejects_unrepresentable_break(break_time):
    with pytest.raises(ValidationError) as exc_info:
        derive_hours("08:00", "17:00", break_time)
    assert exc_info.value.status_code == 400
