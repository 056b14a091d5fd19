import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse
from timesheet.core.config import ServerConfig
from timesheet.core.database import get_db
from timesheet.core.errors import StoreError

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get("/", response_class=PlainTextResponse)
async def root():
    """Liveness text"""
    return f"{ServerConfig.APP_NAME} läuft!"

@router.get("/health")
async def health_check():
    """Health check including the store round-trip"""
    try:
        with get_db("Health check failed.") as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT 1")
            cursor.execute("SELECT COUNT(*) FROM work_hours")
            entry_count = cursor.fetchone()[0]
            cursor.execute("SELECT COUNT(*) FROM employees")
            employee_count = cursor.fetchone()[0]

            return {
                "status": "healthy",
                "database": "connected",
                "version": ServerConfig.APP_VERSION,
                "work_hours_entries": entry_count,
                "employees": employee_count,
            }
    except StoreError:
        raise HTTPException(status_code=503, detail="Service unavailable")
