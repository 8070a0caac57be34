"""
Back-office Domain Entities

All domain entities organized by model.
"""

from .enums import AccountStatus, AdminRole, CredentialKind, SessionStatus
from .account import AdminAccount
from .session import AdminSession

__all__ = [
    # Enums
    "AdminRole",
    "AccountStatus",
    "SessionStatus",
    "CredentialKind",
    # Entities
    "AdminAccount",
    "AdminSession",
]
