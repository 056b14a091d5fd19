from pydantic import BaseModel
import datetime
from typing import Any, Optional

class WorkHoursInput(BaseModel):
    """Body of the log endpoint; times as HH:MM, breakTime in minutes"""
    name: str
    date: datetime.date
    startTime: str
    endTime: str
    comment: Optional[str] = None
    breakTime: Any = None  # raw JSON value, see parse_break_minutes

class WorkHoursUpdate(WorkHoursInput):
    """Full overwrite of an existing entry"""
    id: int

class WorkHoursEntry(BaseModel):
    id: int
    name: str
    date: datetime.date
    hours: Optional[float] = None
    break_time: Optional[float] = None  # hours
    comment: Optional[str] = None
    startTime: Optional[str] = None
    endTime: Optional[str] = None

class BulkDeleteRequest(BaseModel):
    password: Optional[str] = None
    confirmDelete: Any = None  # only true or "true" confirm

class AdminLogin(BaseModel):
    password: Optional[str] = None
