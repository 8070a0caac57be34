from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from backoffice.api.error import raise_for_error
from backoffice.api.utils.admin_auth import get_current_admin, require_super_admin
from backoffice.app.services.auth_service import AuthService
from backoffice.app.services.dtos import AccountView, AccountWithApiKey, AdminPrincipal
from backoffice.app.use_cases.accounts import (
    AccountSessionsUseCase,
    CreateAccountCommand,
    CreateAccountUseCase,
    DeactivateAccountResponse,
    DeactivateAccountUseCase,
    GetAccountUseCase,
    PruneSessionsResponse,
    RevokeSessionsResponse,
    SessionListResponse,
    UpdateAccountCommand,
    UpdateAccountUseCase,
)
from backoffice.depends import get_auth_service
from backoffice.domain.entities import AdminRole

router = APIRouter(prefix="/admin", tags=["Admin Accounts"])


class CreateAccountRequest(BaseModel):
    """Create account HTTP request payload"""

    username: str = Field(..., min_length=1, max_length=100, description="Unique username")
    email: EmailStr = Field(..., description="Unique email address")
    password: str = Field(..., min_length=8, description="Password (min 8 chars)")
    role: AdminRole = Field(AdminRole.admin, description="admin or super_admin")


@router.post(
    "/accounts",
    status_code=status.HTTP_201_CREATED,
    response_model=AccountWithApiKey,
)
async def create_account(
    request: CreateAccountRequest,
    principal: AdminPrincipal = Depends(require_super_admin),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Create Admin Account

    Provisions a new administrator. The response carries the account's
    API key; it is not shown again by any other endpoint.

    Raises:
        - 401 Unauthorized: Missing or invalid credential
        - 403 Forbidden: Requester is not a super admin
        - 409 Conflict: Username or email already in use
    """
    command = CreateAccountCommand(
        username=request.username,
        email=request.email,
        password=request.password,
        role=request.role,
    )
    result = await CreateAccountUseCase(auth_service).execute(command, principal.account)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/accounts/{account_id}",
    status_code=status.HTTP_200_OK,
    response_model=AccountView,
)
async def get_account(
    account_id: UUID,
    principal: AdminPrincipal = Depends(get_current_admin),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Get Admin Account

    Raises:
        - 403 Forbidden: Another admin's account and requester is not a super admin
        - 404 Not Found: ACCOUNT_NOT_FOUND
    """
    result = await GetAccountUseCase(auth_service).execute(account_id, principal.account)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class UpdateAccountRequest(BaseModel):
    """Partial update payload; omitted fields are left unchanged"""

    username: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=8)
    role: Optional[AdminRole] = None


@router.patch(
    "/accounts/{account_id}",
    status_code=status.HTTP_200_OK,
    response_model=AccountView,
)
async def update_account(
    account_id: UUID,
    request: UpdateAccountRequest,
    principal: AdminPrincipal = Depends(get_current_admin),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Update Admin Account

    Admins can edit their own username, email and password; super admins
    can edit any account and change roles.

    Raises:
        - 403 Forbidden: Not allowed to edit this account or change roles
        - 404 Not Found: ACCOUNT_NOT_FOUND
        - 409 Conflict: Username or email already in use
    """
    command = UpdateAccountCommand(**request.model_dump(exclude_unset=True))
    result = await UpdateAccountUseCase(auth_service).execute(
        account_id, command, principal.account
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/accounts/{account_id}/deactivate",
    status_code=status.HTTP_200_OK,
    response_model=DeactivateAccountResponse,
)
async def deactivate_account(
    account_id: UUID,
    principal: AdminPrincipal = Depends(require_super_admin),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Deactivate Admin Account

    Disables the account and deletes all its sessions in one transaction.
    Its API key stops working immediately.

    Raises:
        - 403 Forbidden: Requester is not a super admin
        - 404 Not Found: ACCOUNT_NOT_FOUND
    """
    result = await DeactivateAccountUseCase(auth_service).execute(
        account_id, principal.account
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/accounts/{account_id}/sessions",
    status_code=status.HTTP_200_OK,
    response_model=SessionListResponse,
)
async def list_sessions(
    account_id: UUID,
    principal: AdminPrincipal = Depends(get_current_admin),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    List Active Sessions

    Unexpired sessions of an account, most recently used first.
    Session tokens are never included.
    """
    result = await AccountSessionsUseCase(auth_service).list_sessions(
        account_id, principal.account
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/accounts/{account_id}/sessions/revoke-all",
    status_code=status.HTTP_200_OK,
    response_model=RevokeSessionsResponse,
)
async def revoke_all_sessions(
    account_id: UUID,
    principal: AdminPrincipal = Depends(get_current_admin),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Revoke All Sessions

    Logs an account out everywhere. Its API key keeps working.

    Raises:
        - 403 Forbidden: Another admin's account and requester is not a super admin
        - 404 Not Found: ACCOUNT_NOT_FOUND
    """
    result = await AccountSessionsUseCase(auth_service).revoke_all_sessions(
        account_id, principal.account
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/sessions/prune",
    status_code=status.HTTP_200_OK,
    response_model=PruneSessionsResponse,
)
async def prune_sessions(
    principal: AdminPrincipal = Depends(require_super_admin),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Prune Expired Sessions

    Deletes every expired session and reports how many were removed.
    """
    result = await AccountSessionsUseCase(auth_service).prune_expired(principal.account)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
