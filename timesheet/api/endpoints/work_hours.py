import logging
from datetime import date
from typing import List, Optional

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from timesheet.core.database import get_db
from timesheet.core.errors import AuthorizationError, NotFoundError, ValidationError
from timesheet.core.security import check_admin_password
from timesheet.models.work_hours import BulkDeleteRequest, WorkHoursEntry, WorkHoursInput
from timesheet.services.time_service import derive_hours, format_time
from timesheet.services.work_hours_service import fetch_entries, find_entry

router = APIRouter()
logger = logging.getLogger(__name__)

@router.post("/log-hours", response_class=PlainTextResponse)
async def log_hours(entry: WorkHoursInput):
    """Record one day for one person; a second entry for the same day is rejected"""
    net_hours, break_hours = derive_hours(entry.startTime, entry.endTime, entry.breakTime)

    # Check and insert are separate statements: two concurrent requests for
    # the same name and day can both pass the check.
    with get_db("Fehler beim Überprüfen der Daten.") as conn:
        if find_entry(conn, entry.name, entry.date.isoformat()):
            raise ValidationError("Eintrag für diesen Tag existiert bereits.")

    with get_db("Fehler beim Speichern der Daten.") as conn:
        cursor = conn.cursor()
        cursor.execute('''
            INSERT INTO work_hours (name, date, hours, break_time, comment, starttime, endtime)
            VALUES (?, ?, ?, ?, ?, ?, ?)
        ''', (
            entry.name,
            entry.date.isoformat(),
            net_hours,
            break_hours,
            entry.comment,
            format_time(entry.startTime),
            format_time(entry.endTime),
        ))
        conn.commit()

    logger.info(f"Logged {net_hours:.2f}h for {entry.name} on {entry.date.isoformat()}")
    return "Daten erfolgreich gespeichert."

@router.get("/get-all-hours", response_model=List[WorkHoursEntry])
async def get_all_hours(name: Optional[str] = None):
    """All entries of one person, oldest first"""
    if not name:
        raise ValidationError("Name ist erforderlich.")

    with get_db("Fehler beim Abrufen der Daten.") as conn:
        return fetch_entries(conn, name)

@router.get("/get-hours", response_model=WorkHoursEntry)
async def get_hours(name: Optional[str] = None, date: Optional[date] = None):
    """Entry of one person on one day"""
    if not name or date is None:
        raise ValidationError("Name und Datum sind erforderlich.")

    with get_db("Fehler beim Abrufen der Daten.") as conn:
        entry = find_entry(conn, name, date.isoformat())

    if entry is None:
        raise NotFoundError("Keine Daten gefunden.")
    return entry

@router.delete("/delete-hours", response_class=PlainTextResponse)
async def delete_all_hours(request: BulkDeleteRequest = BulkDeleteRequest()):
    """Wipe the whole work_hours table (password and explicit confirmation required)"""
    confirmed = request.confirmDelete is True or request.confirmDelete == "true"
    if not (check_admin_password(request.password) and confirmed):
        logger.warning("Bulk delete of work hours refused")
        raise AuthorizationError(
            "Löschen abgebrochen. Passwort erforderlich oder Bestätigung fehlt.",
            status_code=401,
        )

    with get_db("Fehler beim Löschen der Daten.") as conn:
        cursor = conn.cursor()
        cursor.execute("DELETE FROM work_hours")
        deleted_count = cursor.rowcount
        conn.commit()

    logger.info(f"Bulk deleted {deleted_count} work hours entries")
    return "Daten erfolgreich gelöscht."
