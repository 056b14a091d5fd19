from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List
import csv
import io

from timesheet.services.time_service import expected_hours_for_date

CSV_HEADER = [
    "Name",
    "Datum",
    "Arbeitsbeginn",
    "Arbeitsende",
    "Pause (Minuten)",
    "SollArbeitszeit",
    "IstArbeitszeit",
    "Differenz",
    "Bemerkung",
]

def format_fixed(value: float, places: int) -> str:
    """Round half away from zero on the exact value, e.g. 0.125 -> '0.13'"""
    quantum = Decimal(1).scaleb(-places)
    if value == 0:
        value = 0  # no '-0.00'
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))

def format_german_date(value) -> str:
    if not value:
        return ""
    if isinstance(value, str):
        value = datetime.strptime(value[:10], "%Y-%m-%d").date()
    return value.strftime("%d.%m.%Y")

def generate_work_hours_csv(rows: List[Dict]) -> str:
    """
    Render joined work hours / roster rows as the admin CSV export

    Each row carries the work_hours columns (startTime/endTime as HH:MM,
    break_time in hours) plus the employee's weekday target columns, which
    are None when no roster entry matched.
    """
    if not rows:
        return ""

    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")

    writer.writerow(CSV_HEADER)

    for row in rows:
        actual = row.get("hours") or 0
        expected = expected_hours_for_date(row, row["date"]) if row.get("date") else 0
        writer.writerow([
            row.get("name"),
            format_german_date(row.get("date")),
            row.get("startTime") or "",
            row.get("endTime") or "",
            format_fixed((row.get("break_time") or 0) * 60, 0),
            format_fixed(expected, 2),
            format_fixed(actual, 2),
            format_fixed(actual - expected, 2),
            row.get("comment") or "",
        ])

    return output.getvalue()[:-1]
