import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)


class TimesheetError(Exception):
    """Base error carrying the HTTP status and the message shown to the client"""
    status_code = 500

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(TimesheetError):
    """Bad time ordering, malformed input, missing field or duplicate entry"""
    status_code = 400


class AuthorizationError(TimesheetError):
    """Missing admin session (403) or wrong password (401)"""
    status_code = 403


class NotFoundError(TimesheetError):
    status_code = 404


class StoreError(TimesheetError):
    """Store failure; the message is generic, details are only logged"""
    status_code = 500


async def timesheet_error_handler(request: Request, exc: TimesheetError):
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    fields = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        if location:
            fields.append(".".join(location))
    logger.info(f"Rejected request to {request.url.path}: {exc.errors()}")
    message = "Ungültige Eingabe"
    if fields:
        message += f": {', '.join(fields)}"
    return PlainTextResponse(message + ".", status_code=400)


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(TimesheetError, timesheet_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
