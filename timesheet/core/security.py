import hmac
import logging
from fastapi import Request
from timesheet.core.config import ServerConfig
from timesheet.core.errors import AuthorizationError

logger = logging.getLogger(__name__)

class AdminSession:
    """Admin state of one client session (anonymous -> admin, no way back)"""

    SESSION_KEY = "is_admin"

    def __init__(self, session: dict):
        self._session = session

    @classmethod
    def from_request(cls, request: Request) -> "AdminSession":
        return cls(request.session)

    @property
    def is_admin(self) -> bool:
        return bool(self._session.get(self.SESSION_KEY, False))

    def grant(self):
        self._session[self.SESSION_KEY] = True

def check_admin_password(password) -> bool:
    """Compare against the shared admin password"""
    if not isinstance(password, str):
        return False
    return hmac.compare_digest(password.encode("utf-8"), ServerConfig.ADMIN_PASSWORD.encode("utf-8"))

async def require_admin(request: Request) -> AdminSession:
    """Dependency guarding admin routes"""
    admin_session = AdminSession.from_request(request)
    if not admin_session.is_admin:
        logger.warning(f"Admin endpoint {request.url.path} refused for {request.client.host if request.client else 'unknown client'}")
        raise AuthorizationError("Access denied. Admin privileges required.")
    return admin_session
