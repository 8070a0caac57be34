"""
Login Use Case

Exchanges a username and password for a session token.
"""

import logging

from backoffice.app.services.auth_service import AuthService
from backoffice.libs.result import Error, Result, Return
from .dtos import LoginCommand, LoginResponse, SessionToken

logger = logging.getLogger(__name__)

# Sessions opened by the login form last seven days
LOGIN_SESSION_TTL_HOURS = 24 * 7


class LoginUseCase:
    """
    Use case for admin login and session issuance.

    Business Rules:
    - Unknown user, inactive account and wrong password are one outcome
    - A new session is opened per login; earlier sessions stay valid
    - Client IP and user agent are recorded on the session
    - Updates account.last_login_at
    """

    def __init__(self, auth_service: AuthService, session_ttl_hours: float = LOGIN_SESSION_TTL_HOURS):
        self.auth_service = auth_service
        self.session_ttl_hours = session_ttl_hours

    async def execute(self, command: LoginCommand) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            command: LoginCommand with credentials and client metadata

        Returns:
            Result with LoginResponse containing the session token, or
            Error(INVALID_CREDENTIALS)
        """
        account = await self.auth_service.authenticate(command.username, command.password)
        if account is None:
            logger.warning(f"Failed admin login for username {command.username!r}")
            return Return.err(
                Error("INVALID_CREDENTIALS", "Invalid username or password")
            )

        session = await self.auth_service.create_session(
            account.id,
            account.api_key,
            ttl_hours=self.session_ttl_hours,
            ip_address=command.ip_address,
            user_agent=command.user_agent,
        )
        logger.info(f"Admin {account.id} logged in, session {session.id}")

        return Return.ok(
            LoginResponse(
                success=True,
                message="Login successful",
                account=account.model_dump(exclude={"api_key"}),
                session=SessionToken(
                    token=session.session_token,
                    expires_at=session.expires_at,
                ),
            )
        )
