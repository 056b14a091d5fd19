import pytest

from timesheet.services.csv_service import CSV_HEADER, format_fixed, generate_work_hours_csv

HEADER_LINE = "Name,Datum,Arbeitsbeginn,Arbeitsende,Pause (Minuten),SollArbeitszeit,IstArbeitszeit,Differenz,Bemerkung"


def make_row(**overrides):
    row = {
        "id": 1,
        "name": "Anna",
        "date": "2024-06-03",
        "startTime": "08:00",
        "endTime": "17:00",
        "break_time": 0.5,
        "comment": None,
        "hours": 8.5,
        "mo_hours": 8,
        "di_hours": 8,
        "mi_hours": 8,
        "do_hours": 8,
        "fr_hours": 6,
    }
    row.update(overrides)
    return row


def test_empty_input_has_no_header():
    assert generate_work_hours_csv([]) == ""


def test_header_line():
    assert ",".join(CSV_HEADER) == HEADER_LINE
    assert generate_work_hours_csv([make_row()]).split("\n")[0] == HEADER_LINE


def test_single_row():
    csv_text = generate_work_hours_csv([make_row()])
    assert csv_text == HEADER_LINE + "\n" + "Anna,03.06.2024,08:00,17:00,30,8.00,8.50,0.50,"


def test_break_minutes_rounded():
    csv_text = generate_work_hours_csv([make_row(break_time=0.25)])
    assert csv_text.split("\n")[1].split(",")[4] == "15"


def test_missing_break_is_zero():
    csv_text = generate_work_hours_csv([make_row(break_time=None)])
    assert csv_text.split("\n")[1].split(",")[4] == "0"


def test_friday_uses_friday_target():
    csv_text = generate_work_hours_csv([make_row(date="2024-06-07", hours=7.25)])
    assert csv_text.split("\n")[1] == "Anna,07.06.2024,08:00,17:00,30,6.00,7.25,1.25,"


def test_weekend_and_unmatched_roster_have_no_target():
    rows = [
        make_row(date="2024-06-08"),
        make_row(name="Gast", mo_hours=None, di_hours=None, mi_hours=None, do_hours=None, fr_hours=None),
    ]
    lines = generate_work_hours_csv(rows).split("\n")
    assert lines[1] == "Anna,08.06.2024,08:00,17:00,30,0.00,8.50,8.50,"
    assert lines[2] == "Gast,03.06.2024,08:00,17:00,30,0.00,8.50,8.50,"


def test_negative_variance():
    csv_text = generate_work_hours_csv([make_row(hours=6.0, comment="Arzttermin")])
    assert csv_text.split("\n")[1] == "Anna,03.06.2024,08:00,17:00,30,8.00,6.00,-2.00,Arzttermin"


def test_rows_joined_without_trailing_newline():
    csv_text = generate_work_hours_csv([make_row(), make_row(date="2024-06-04")])
    assert not csv_text.endswith("\n")
    assert len(csv_text.split("\n")) == 3


def test_comment_with_comma_is_quoted():
    csv_text = generate_work_hours_csv([make_row(comment="Stau, A3")])
    assert csv_text.split("\n")[1].endswith(',"Stau, A3"')


@pytest.mark.parametrize("value,places,expected", [
    (0.125, 2, "0.13"),
    (-0.125, 2, "-0.13"),
    (2.5, 0, "3"),
    (30.000000000000004, 0, "30"),
    (8, 2, "8.00"),
    (-0.0, 2, "0.00"),
])
def test_format_fixed(value, places, expected):
    assert format_fixed(value, places) == expected
