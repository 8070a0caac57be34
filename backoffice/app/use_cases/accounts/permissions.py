"""
Role checks for account management.

Every AdminRole is handled explicitly; an unknown role is a programming
error, never a silent deny or allow.
"""

from uuid import UUID

from backoffice.app.services.dtos import AccountView
from backoffice.domain.entities import AdminRole


def can_manage_accounts(role: AdminRole) -> bool:
    """Provision, deactivate, change roles, prune sessions"""
    if role is AdminRole.super_admin:
        return True
    if role is AdminRole.admin:
        return False
    raise ValueError(f"Unhandled admin role: {role!r}")


def can_access_account(requester: AccountView, account_id: UUID) -> bool:
    """View or edit own profile, or anyone's as an account manager"""
    return str(account_id) == requester.id or can_manage_accounts(requester.role)
