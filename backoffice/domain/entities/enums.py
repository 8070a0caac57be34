"""
Back-office Domain Enums

Closed sets of states used across domain entities.
"""

from enum import Enum


class AdminRole(str, Enum):
    """Administrator role"""

    admin = "admin"
    super_admin = "super_admin"


class AccountStatus(str, Enum):
    """Administrator account status, derived from the is_active flag"""

    active = "active"
    inactive = "inactive"


class SessionStatus(str, Enum):
    """Session status at a given instant"""

    active = "active"
    expired = "expired"


class CredentialKind(str, Enum):
    """Credential a request was authenticated with"""

    session = "session"
    api_key = "api_key"
