"""
Logout Use Case

Destroys the session a client presents.
"""

from typing import Optional

from backoffice.app.services.auth_service import AuthService
from backoffice.libs.result import Error, Result, Return
from .dtos import LogoutResponse


class LogoutUseCase:
    """
    Use case for admin logout.

    Business Rules:
    - Idempotent: logging out an unknown or already destroyed session succeeds
    - Calling without any token is a caller error
    """

    def __init__(self, auth_service: AuthService):
        self.auth_service = auth_service

    async def execute(self, session_token: Optional[str]) -> Result[LogoutResponse]:
        if not session_token:
            return Return.err(
                Error("MISSING_SESSION_TOKEN", "No session token provided")
            )

        await self.auth_service.invalidate_session(session_token)

        return Return.ok(LogoutResponse(success=True, message="Logout successful"))
