from pydantic import BaseModel
from typing import Optional

class EmployeeInput(BaseModel):
    """Roster entry as sent by the admin UI; missing weekday hours count as 0"""
    name: Optional[str] = None
    mo_hours: Optional[float] = None
    di_hours: Optional[float] = None
    mi_hours: Optional[float] = None
    do_hours: Optional[float] = None
    fr_hours: Optional[float] = None

class Employee(BaseModel):
    id: int
    name: str
    mo_hours: Optional[float] = None
    di_hours: Optional[float] = None
    mi_hours: Optional[float] = None
    do_hours: Optional[float] = None
    fr_hours: Optional[float] = None

class EmployeeName(BaseModel):
    id: int
    name: str
