"""
Admin Authentication Guards

Every protected route depends on get_current_admin, the single place that
decides which credential a request is authenticated with.

Headers:
    X-Session-Token: session token returned by POST /auth/login
    X-Admin-Key: long-lived API key of an admin account

Precedence: a session token, when present, alone decides the outcome.
The API key is only consulted when no session token was sent, so a
rejected session is never rescued by a valid key.
"""

from typing import Optional

from fastapi import Depends, Header, status

from backoffice.api.error import ClientError
from backoffice.app.services.auth_service import AuthService
from backoffice.app.services.dtos import AdminPrincipal
from backoffice.app.use_cases.accounts.permissions import can_manage_accounts
from backoffice.depends import get_auth_service
from backoffice.domain.entities import CredentialKind
from backoffice.libs.result import Error

SESSION_TOKEN_HEADER = "X-Session-Token"
ADMIN_KEY_HEADER = "X-Admin-Key"


async def resolve_admin(
    auth_service: AuthService,
    session_token: Optional[str],
    api_key: Optional[str],
) -> Optional[AdminPrincipal]:
    """
    Validate whichever credential the request carries.

    Returns None when the chosen credential does not validate.
    """
    if session_token:
        validation = await auth_service.validate_session(session_token)
        if validation is None:
            return None
        return AdminPrincipal(
            account=validation.account,
            credential=CredentialKind.session,
            session=validation.session,
        )

    if api_key:
        account = await auth_service.validate_api_key(api_key)
        if account is None:
            return None
        return AdminPrincipal(account=account, credential=CredentialKind.api_key)

    return None


async def get_current_admin(
    x_session_token: Optional[str] = Header(None, alias=SESSION_TOKEN_HEADER),
    x_admin_key: Optional[str] = Header(None, alias=ADMIN_KEY_HEADER),
    auth_service: AuthService = Depends(get_auth_service),
) -> AdminPrincipal:
    """
    Authenticate an admin request.

    Raises:
        ClientError: 401 if no credential was sent or it does not validate
    """
    if not x_session_token and not x_admin_key:
        raise ClientError(
            Error("UNAUTHORIZED", "Session token or admin API key required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    principal = await resolve_admin(auth_service, x_session_token, x_admin_key)
    if principal is None:
        raise ClientError(
            Error("INVALID_CREDENTIALS", "Invalid or expired credentials"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return principal


async def require_super_admin(
    principal: AdminPrincipal = Depends(get_current_admin),
) -> AdminPrincipal:
    if not can_manage_accounts(principal.account.role):
        raise ClientError(
            Error("FORBIDDEN", "Super admin role required"),
            status_code=status.HTTP_403_FORBIDDEN,
        )
    return principal
