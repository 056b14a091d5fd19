import logging
import sqlite3
from typing import Dict, List, Optional

from timesheet.core.database import normalize_name, row_to_dict
from timesheet.models.work_hours import WorkHoursEntry
from timesheet.services.time_service import format_time

logger = logging.getLogger(__name__)

ENTRY_COLUMNS = '''
    id,
    name,
    date,
    hours,
    break_time,
    comment,
    starttime AS "startTime",
    endtime AS "endTime"
'''

def entry_from_row(row: sqlite3.Row) -> WorkHoursEntry:
    data = row_to_dict(row)
    data["startTime"] = format_time(data["startTime"])
    data["endTime"] = format_time(data["endTime"])
    return WorkHoursEntry(**data)

def fetch_entries(conn: sqlite3.Connection, name: Optional[str] = None) -> List[WorkHoursEntry]:
    """All entries ordered by date, optionally only those of one person"""
    cursor = conn.cursor()
    if name is None:
        cursor.execute(f"SELECT {ENTRY_COLUMNS} FROM work_hours ORDER BY date ASC, id ASC")
    else:
        cursor.execute(f'''
            SELECT {ENTRY_COLUMNS}
            FROM work_hours
            WHERE name_key(name) = ?
            ORDER BY date ASC, id ASC
        ''', (normalize_name(name),))
    return [entry_from_row(row) for row in cursor.fetchall()]

def find_entry(conn: sqlite3.Connection, name: str, date: str) -> Optional[WorkHoursEntry]:
    cursor = conn.cursor()
    cursor.execute(f'''
        SELECT {ENTRY_COLUMNS}
        FROM work_hours
        WHERE name_key(name) = ? AND date = ?
        ORDER BY id ASC
        LIMIT 1
    ''', (normalize_name(name), date))
    row = cursor.fetchone()
    return entry_from_row(row) if row else None

def fetch_export_rows(conn: sqlite3.Connection) -> List[Dict]:
    """Work hours joined with the matching roster row (None columns if unmatched)"""
    cursor = conn.cursor()
    cursor.execute('''
        SELECT
            w.id,
            w.name,
            w.date,
            w.starttime AS "startTime",
            w.endtime AS "endTime",
            w.break_time,
            w.comment,
            w.hours,
            e.mo_hours,
            e.di_hours,
            e.mi_hours,
            e.do_hours,
            e.fr_hours
        FROM work_hours w
        LEFT JOIN employees e ON name_key(w.name) = name_key(e.name)
        ORDER BY w.date ASC, w.id ASC
    ''')
    rows = []
    for row in cursor.fetchall():
        data = row_to_dict(row)
        data["startTime"] = format_time(data["startTime"])
        data["endTime"] = format_time(data["endTime"])
        rows.append(data)
    return rows
