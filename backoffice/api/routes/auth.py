from typing import Optional

from fastapi import APIRouter, Depends, Header, Request, status
from pydantic import BaseModel, Field

from backoffice.api.error import raise_for_error
from backoffice.api.utils.admin_auth import SESSION_TOKEN_HEADER, get_current_admin
from backoffice.app.services.auth_service import AuthService
from backoffice.app.services.dtos import AccountView, AdminPrincipal, SessionInfo
from backoffice.app.use_cases.auth import (
    LoginCommand,
    LoginResponse,
    LoginUseCase,
    LogoutResponse,
    LogoutUseCase,
)
from backoffice.depends import get_auth_service
from backoffice.domain.entities import CredentialKind

router = APIRouter(prefix="/auth", tags=["Authentication"])


def client_ip(request: Request) -> Optional[str]:
    """First X-Forwarded-For hop, then X-Real-IP, then the socket peer"""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip
    return request.client.host if request.client else None


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    Validates incoming login request.
    """

    username: str = Field(..., min_length=1, description="Admin username")
    password: str = Field(..., min_length=1, description="Admin password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    body: LoginRequest,
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Admin Login

    Exchanges username and password for a seven-day session token.
    The client sends the token back in the X-Session-Token header.

    Raises:
        - 401 Unauthorized: Invalid username or password (one message for every cause)
        - 500 Internal Server Error: Server error
    """
    command = LoginCommand(
        username=body.username,
        password=body.password,
        ip_address=client_ip(request),
        user_agent=request.headers.get("user-agent"),
    )

    use_case = LoginUseCase(auth_service, session_ttl_hours=request.app.state.config.LOGIN_SESSION_TTL_HOURS)
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(
    x_session_token: Optional[str] = Header(None, alias=SESSION_TOKEN_HEADER),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Admin Logout

    Destroys the session named by X-Session-Token. Succeeds for unknown
    or already destroyed sessions.

    Raises:
        - 400 Bad Request: No session token provided
        - 500 Internal Server Error: Server error
    """
    use_case = LogoutUseCase(auth_service)
    result = await use_case.execute(x_session_token)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ValidateResponse(BaseModel):
    """Credential check response"""

    valid: bool
    credential: CredentialKind
    account: AccountView
    session: Optional[SessionInfo] = None


@router.post("/validate", status_code=status.HTTP_200_OK, response_model=ValidateResponse)
async def validate(principal: AdminPrincipal = Depends(get_current_admin)):
    """
    Validate Credentials

    Confirms the session token or admin API key on the request and
    returns the admin it belongs to.

    Raises:
        - 401 Unauthorized: Missing, invalid or expired credential
    """
    return ValidateResponse(
        valid=True,
        credential=principal.credential,
        account=principal.account,
        session=principal.session,
    )
