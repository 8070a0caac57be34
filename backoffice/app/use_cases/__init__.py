"""
Use Cases

- auth/: login and logout
- accounts/: account and session management
"""

from .auth import LoginUseCase, LogoutUseCase
from .accounts import (
    AccountSessionsUseCase,
    CreateAccountUseCase,
    DeactivateAccountUseCase,
    GetAccountUseCase,
    UpdateAccountUseCase,
)

__all__ = [
    # Auth
    "LoginUseCase",
    "LogoutUseCase",
    # Accounts
    "CreateAccountUseCase",
    "GetAccountUseCase",
    "UpdateAccountUseCase",
    "DeactivateAccountUseCase",
    "AccountSessionsUseCase",
]
