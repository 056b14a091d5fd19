import logging
from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from timesheet.core.database import get_db, row_to_dict
from timesheet.core.errors import NotFoundError, ValidationError
from timesheet.core.security import require_admin
from timesheet.models.employees import Employee, EmployeeInput, EmployeeName
from timesheet.services.time_service import WEEKDAY_FIELDS

router = APIRouter()
logger = logging.getLogger(__name__)

def roster_values(employee: EmployeeInput) -> List[float]:
    """Weekday target hours in column order; missing values become 0"""
    if not employee.name:
        raise ValidationError("Name ist erforderlich.")
    return [getattr(employee, field) or 0 for field in WEEKDAY_FIELDS]

@router.get("/admin/employees", response_model=List[Employee], dependencies=[Depends(require_admin)])
async def list_employees():
    """Full roster"""
    with get_db("Fehler beim Abrufen der Mitarbeiter.") as conn:
        cursor = conn.cursor()
        cursor.execute("SELECT * FROM employees ORDER BY id")
        return [Employee(**row_to_dict(row)) for row in cursor.fetchall()]

@router.post("/admin/employees", response_model=Employee, dependencies=[Depends(require_admin)])
async def create_employee(employee: EmployeeInput):
    hours = roster_values(employee)

    with get_db("Fehler beim Hinzufügen des Mitarbeiters.") as conn:
        cursor = conn.cursor()
        cursor.execute('''
            INSERT INTO employees (name, mo_hours, di_hours, mi_hours, do_hours, fr_hours)
            VALUES (?, ?, ?, ?, ?, ?)
        ''', [employee.name, *hours])
        employee_id = cursor.lastrowid
        conn.commit()

    logger.info(f"Added employee {employee.name} ({employee_id}) to roster")
    return Employee(id=employee_id, name=employee.name, **dict(zip(WEEKDAY_FIELDS, hours)))

@router.put("/admin/employees/{employee_id}", response_class=PlainTextResponse, dependencies=[Depends(require_admin)])
async def update_employee(employee_id: int, employee: EmployeeInput):
    hours = roster_values(employee)

    with get_db("Fehler beim Aktualisieren des Mitarbeiters.") as conn:
        cursor = conn.cursor()
        cursor.execute('''
            UPDATE employees
            SET name = ?,
                mo_hours = ?,
                di_hours = ?,
                mi_hours = ?,
                do_hours = ?,
                fr_hours = ?
            WHERE id = ?
        ''', [employee.name, *hours, employee_id])
        updated = cursor.rowcount
        conn.commit()

    if not updated:
        raise NotFoundError("Mitarbeiter nicht gefunden.")

    logger.info(f"Updated roster entry {employee_id} ({employee.name})")
    return "Mitarbeiter erfolgreich aktualisiert."

@router.delete("/admin/employees/{employee_id}", response_class=PlainTextResponse, dependencies=[Depends(require_admin)])
async def delete_employee(employee_id: int):
    # Work hours are matched by name and stay untouched
    with get_db("Fehler beim Löschen des Mitarbeiters.") as conn:
        cursor = conn.cursor()
        cursor.execute("DELETE FROM employees WHERE id = ?", (employee_id,))
        deleted = cursor.rowcount
        conn.commit()

    if not deleted:
        raise NotFoundError("Mitarbeiter nicht gefunden.")

    logger.info(f"Deleted roster entry {employee_id}")
    return "Mitarbeiter erfolgreich gelöscht."

@router.get("/employees", response_model=List[EmployeeName])
async def list_employee_names():
    """Names for selection lists, no target hours"""
    with get_db("Fehler beim Abrufen der Mitarbeiter.") as conn:
        cursor = conn.cursor()
        cursor.execute("SELECT id, name FROM employees ORDER BY id")
        return [EmployeeName(id=row['id'], name=row['name']) for row in cursor.fetchall()]
