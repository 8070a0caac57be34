import pytest
from unittest.mock import AsyncMock, MagicMock

from backoffice.app.services.auth_service import AuthService
from backoffice.app.services.password_hasher import PasswordHasher


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with both repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.accounts = MagicMock()
    uow.accounts.get_by_id = AsyncMock(return_value=None)
    uow.accounts.get_active_by_username = AsyncMock(return_value=None)
    uow.accounts.get_active_by_api_key = AsyncMock(return_value=None)
    uow.accounts.find_conflicting = AsyncMock(return_value=None)
    uow.accounts.create = AsyncMock(side_effect=lambda account: account)
    uow.accounts.update = AsyncMock(side_effect=lambda account: account)
    uow.accounts.set_active = AsyncMock(return_value=True)

    uow.sessions = MagicMock()
    uow.sessions.create = AsyncMock(side_effect=lambda session: session)
    uow.sessions.touch_valid = AsyncMock(return_value=None)
    uow.sessions.get_active_by_account_id = AsyncMock(return_value=[])
    uow.sessions.delete_by_token = AsyncMock(return_value=0)
    uow.sessions.delete_by_account_id = AsyncMock(return_value=0)
    uow.sessions.delete_expired = AsyncMock(return_value=0)
    return uow


@pytest.fixture
def hasher():
    # Minimum bcrypt cost keeps the suite fast
    return PasswordHasher(rounds=4)


@pytest.fixture
def auth_service(mock_uow, hasher):
    return AuthService(mock_uow, hasher=hasher)
