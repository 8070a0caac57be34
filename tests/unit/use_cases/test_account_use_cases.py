from datetime import datetime
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from backoffice.app.services.dtos import AccountView, AccountWithApiKey
from backoffice.app.services.errors import ConflictError
from backoffice.app.use_cases.accounts import (
    AccountSessionsUseCase,
    CreateAccountCommand,
    CreateAccountUseCase,
    DeactivateAccountUseCase,
    GetAccountUseCase,
    UpdateAccountCommand,
    UpdateAccountUseCase,
)
from backoffice.app.use_cases.accounts.permissions import (
    can_access_account,
    can_manage_accounts,
)
from backoffice.domain.entities import AccountStatus, AdminRole

NOW = datetime(2026, 1, 1, 12, 0, 0)


def make_view(role=AdminRole.admin, account_id=None, **overrides):
    fields = dict(
        id=str(account_id or uuid4()),
        username="alice",
        email="alice@x.com",
        role=role,
        status=AccountStatus.active,
        is_active=True,
        created_at=NOW,
        updated_at=NOW,
    )
    fields.update(overrides)
    return AccountView(**fields)


@pytest.fixture
def mock_auth_service():
    service = MagicMock()
    service.create_account = AsyncMock()
    service.get_account_with_api_key = AsyncMock()
    service.get_by_id = AsyncMock(return_value=None)
    service.update_account = AsyncMock(return_value=None)
    service.deactivate = AsyncMock(return_value=True)
    service.list_sessions = AsyncMock(return_value=[])
    service.invalidate_all_sessions = AsyncMock(return_value=0)
    service.prune_expired = AsyncMock(return_value=0)
    return service


@pytest.fixture
def super_admin():
    return make_view(role=AdminRole.super_admin, username="root", email="root@x.com")


@pytest.fixture
def admin():
    return make_view()


# ---------------------------------------------------------------------------
# Permissions
# ---------------------------------------------------------------------------


def test_can_manage_accounts_covers_every_role():
    assert can_manage_accounts(AdminRole.super_admin) is True
    assert can_manage_accounts(AdminRole.admin) is False


def test_can_manage_accounts_rejects_unknown_role():
    with pytest.raises(ValueError):
        can_manage_accounts("owner")


def test_can_access_account(admin, super_admin):
    assert can_access_account(admin, admin.id)
    assert not can_access_account(admin, uuid4())
    assert can_access_account(super_admin, uuid4())


# ---------------------------------------------------------------------------
# Create
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_create_account_returns_api_key_once(mock_auth_service, super_admin):
    created = make_view(username="bob", email="bob@x.com")
    mock_auth_service.create_account.return_value = created
    mock_auth_service.get_account_with_api_key.return_value = AccountWithApiKey(
        **created.model_dump(), api_key="osprey-new"
    )

    command = CreateAccountCommand(username="bob", email="bob@x.com", password="BobPass123!")
    result = await CreateAccountUseCase(mock_auth_service).execute(command, super_admin)

    assert result.is_ok()
    assert result.value.api_key == "osprey-new"
    mock_auth_service.create_account.assert_awaited_once_with(
        "bob", "bob@x.com", "BobPass123!", AdminRole.admin
    )


@pytest.mark.asyncio
async def test_create_account_requires_super_admin(mock_auth_service, admin):
    command = CreateAccountCommand(username="bob", email="bob@x.com", password="BobPass123!")
    result = await CreateAccountUseCase(mock_auth_service).execute(command, admin)

    assert result.is_err()
    assert result.error.code == "FORBIDDEN"
    mock_auth_service.create_account.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_account_conflict(mock_auth_service, super_admin):
    mock_auth_service.create_account.side_effect = ConflictError("taken")

    command = CreateAccountCommand(username="bob", email="bob@x.com", password="BobPass123!")
    result = await CreateAccountUseCase(mock_auth_service).execute(command, super_admin)

    assert result.is_err()
    assert result.error.code == "ACCOUNT_EXISTS"


@pytest.mark.asyncio
async def test_create_account_invalid_input(mock_auth_service, super_admin):
    mock_auth_service.create_account.side_effect = ValueError("username must not be blank")

    command = CreateAccountCommand(username=" ", email="bob@x.com", password="BobPass123!")
    result = await CreateAccountUseCase(mock_auth_service).execute(command, super_admin)

    assert result.error.code == "INVALID_INPUT"


# ---------------------------------------------------------------------------
# Get / update / deactivate
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_admin_cannot_read_other_account(mock_auth_service, admin):
    result = await GetAccountUseCase(mock_auth_service).execute(uuid4(), admin)

    assert result.error.code == "FORBIDDEN"
    mock_auth_service.get_by_id.assert_not_awaited()


@pytest.mark.asyncio
async def test_get_missing_account(mock_auth_service, super_admin):
    result = await GetAccountUseCase(mock_auth_service).execute(uuid4(), super_admin)
    assert result.error.code == "ACCOUNT_NOT_FOUND"


@pytest.mark.asyncio
async def test_admin_updates_own_profile(mock_auth_service, admin):
    updated = make_view(account_id=admin.id, email="new@x.com")
    mock_auth_service.update_account.return_value = updated

    result = await UpdateAccountUseCase(mock_auth_service).execute(
        admin.id, UpdateAccountCommand(email="new@x.com"), admin
    )

    assert result.is_ok()
    assert result.value.email == "new@x.com"
    mock_auth_service.update_account.assert_awaited_once_with(
        admin.id, username=None, email="new@x.com", password=None, role=None
    )


@pytest.mark.asyncio
async def test_admin_cannot_change_own_role(mock_auth_service, admin):
    result = await UpdateAccountUseCase(mock_auth_service).execute(
        admin.id, UpdateAccountCommand(role=AdminRole.super_admin), admin
    )

    assert result.error.code == "FORBIDDEN"
    mock_auth_service.update_account.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_conflict(mock_auth_service, super_admin):
    mock_auth_service.update_account.side_effect = ConflictError("taken")

    result = await UpdateAccountUseCase(mock_auth_service).execute(
        uuid4(), UpdateAccountCommand(username="bob"), super_admin
    )

    assert result.error.code == "ACCOUNT_EXISTS"


@pytest.mark.asyncio
async def test_update_missing_account(mock_auth_service, super_admin):
    result = await UpdateAccountUseCase(mock_auth_service).execute(
        uuid4(), UpdateAccountCommand(username="bob"), super_admin
    )

    assert result.error.code == "ACCOUNT_NOT_FOUND"


@pytest.mark.asyncio
async def test_deactivate_requires_super_admin(mock_auth_service, admin):
    result = await DeactivateAccountUseCase(mock_auth_service).execute(uuid4(), admin)

    assert result.error.code == "FORBIDDEN"
    mock_auth_service.deactivate.assert_not_awaited()


@pytest.mark.asyncio
async def test_deactivate_unknown_account(mock_auth_service, super_admin):
    mock_auth_service.deactivate.return_value = False

    result = await DeactivateAccountUseCase(mock_auth_service).execute(uuid4(), super_admin)

    assert result.error.code == "ACCOUNT_NOT_FOUND"


# ---------------------------------------------------------------------------
# Sessions
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_revoke_own_sessions(mock_auth_service, admin):
    mock_auth_service.get_by_id.return_value = admin
    mock_auth_service.invalidate_all_sessions.return_value = 3

    result = await AccountSessionsUseCase(mock_auth_service).revoke_all_sessions(admin.id, admin)

    assert result.value.revoked_count == 3
    assert result.value.message == "Successfully revoked 3 session(s)"


@pytest.mark.asyncio
async def test_admin_cannot_list_other_sessions(mock_auth_service, admin):
    result = await AccountSessionsUseCase(mock_auth_service).list_sessions(uuid4(), admin)

    assert result.error.code == "FORBIDDEN"
    mock_auth_service.list_sessions.assert_not_awaited()


@pytest.mark.asyncio
async def test_prune_requires_super_admin(mock_auth_service, admin, super_admin):
    mock_auth_service.prune_expired.return_value = 4
    use_case = AccountSessionsUseCase(mock_auth_service)

    assert (await use_case.prune_expired(admin)).error.code == "FORBIDDEN"

    result = await use_case.prune_expired(super_admin)
    assert result.value.removed_count == 4
    mock_auth_service.prune_expired.assert_awaited_once()
