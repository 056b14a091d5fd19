import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import PlainTextResponse
from timesheet.core.database import get_db
from timesheet.core.errors import AuthorizationError, NotFoundError
from timesheet.core.security import AdminSession, check_admin_password, require_admin
from timesheet.models.work_hours import AdminLogin, WorkHoursEntry, WorkHoursUpdate
from timesheet.services.csv_service import generate_work_hours_csv
from timesheet.services.time_service import derive_hours, format_time
from timesheet.services.work_hours_service import fetch_entries, fetch_export_rows

router = APIRouter()
logger = logging.getLogger(__name__)

@router.post("/admin-login", response_class=PlainTextResponse)
async def admin_login(request: Request, login: AdminLogin = AdminLogin()):
    """Switch the caller's session to admin"""
    if not check_admin_password(login.password):
        logger.warning(f"Failed admin login from {request.client.host if request.client else 'unknown client'}")
        raise AuthorizationError("Ungültiges Passwort.", status_code=401)

    AdminSession.from_request(request).grant()
    logger.info("Admin logged in")
    return "Admin angemeldet."

@router.get("/admin-work-hours", response_model=List[WorkHoursEntry], dependencies=[Depends(require_admin)])
async def get_admin_work_hours():
    """Every entry of every person, oldest first"""
    with get_db("Error fetching work hours.") as conn:
        return fetch_entries(conn)

@router.get("/admin-download-csv", dependencies=[Depends(require_admin)])
async def download_csv():
    """CSV export with target hours and variance per day"""
    with get_db("Error fetching work hours.") as conn:
        rows = fetch_export_rows(conn)

    logger.info(f"Exporting {len(rows)} work hours entries as CSV")
    return Response(
        content=generate_work_hours_csv(rows),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="arbeitszeiten.csv"'}
    )

@router.put("/api/admin/update-hours", response_class=PlainTextResponse, dependencies=[Depends(require_admin)])
async def update_hours(entry: WorkHoursUpdate):
    """Overwrite an entry; hours and break are derived again from the times"""
    net_hours, break_hours = derive_hours(entry.startTime, entry.endTime, entry.breakTime)

    with get_db("Error updating working hours.") as conn:
        cursor = conn.cursor()
        cursor.execute('''
            UPDATE work_hours
            SET name = ?,
                date = ?,
                hours = ?,
                break_time = ?,
                comment = ?,
                starttime = ?,
                endtime = ?
            WHERE id = ?
        ''', (
            entry.name,
            entry.date.isoformat(),
            net_hours,
            break_hours,
            entry.comment,
            format_time(entry.startTime),
            format_time(entry.endTime),
            entry.id,
        ))
        updated = cursor.rowcount
        conn.commit()

    if not updated:
        raise NotFoundError(f"Working hours entry {entry.id} not found.")

    logger.info(f"Admin updated work hours entry {entry.id} ({entry.name}, {entry.date.isoformat()})")
    return "Working hours updated successfully."

@router.delete("/api/admin/delete-hours/{entry_id}", response_class=PlainTextResponse, dependencies=[Depends(require_admin)])
async def delete_hours(entry_id: int):
    with get_db("Error deleting working hours.") as conn:
        cursor = conn.cursor()
        cursor.execute("DELETE FROM work_hours WHERE id = ?", (entry_id,))
        deleted = cursor.rowcount
        conn.commit()

    if not deleted:
        raise NotFoundError(f"Working hours entry {entry_id} not found.")

    logger.info(f"Admin deleted work hours entry {entry_id}")
    return "Working hours deleted successfully."
