"""
Account Management Use Cases

Provisioning, profile updates, deactivation and session management.
"""

from .create_account_use_case import CreateAccountUseCase
from .get_account_use_case import GetAccountUseCase
from .update_account_use_case import UpdateAccountUseCase
from .deactivate_account_use_case import DeactivateAccountUseCase
from .account_sessions_use_case import AccountSessionsUseCase
from .dtos import (
    CreateAccountCommand,
    UpdateAccountCommand,
    DeactivateAccountResponse,
    SessionListResponse,
    RevokeSessionsResponse,
    PruneSessionsResponse,
)

__all__ = [
    # Use Cases
    "CreateAccountUseCase",
    "GetAccountUseCase",
    "UpdateAccountUseCase",
    "DeactivateAccountUseCase",
    "AccountSessionsUseCase",
    # DTOs - Commands
    "CreateAccountCommand",
    "UpdateAccountCommand",
    # DTOs - Responses
    "DeactivateAccountResponse",
    "SessionListResponse",
    "RevokeSessionsResponse",
    "PruneSessionsResponse",
]
