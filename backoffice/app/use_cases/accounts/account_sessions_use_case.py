"""
Account Sessions Use Case

Lists and revokes the sessions of an admin account.
"""

from uuid import UUID

from backoffice.app.services.auth_service import AuthService
from backoffice.app.services.dtos import AccountView
from backoffice.libs.result import Error, Result, Return
from .dtos import PruneSessionsResponse, RevokeSessionsResponse, SessionListResponse
from .permissions import can_access_account, can_manage_accounts


class AccountSessionsUseCase:
    """
    Use case for session management.

    Business Rules:
    - Admins can list and revoke their own sessions
    - Super admins can list and revoke anyone's sessions
    - Only super admins can prune expired sessions on demand
    """

    def __init__(self, auth_service: AuthService):
        self.auth_service = auth_service

    async def list_sessions(
        self, account_id: UUID, requester: AccountView
    ) -> Result[SessionListResponse]:
        if not can_access_account(requester, account_id):
            return Return.err(
                Error("FORBIDDEN", "Cannot view another admin's sessions")
            )

        account = await self.auth_service.get_by_id(account_id)
        if account is None:
            return Return.err(Error("ACCOUNT_NOT_FOUND", "Account not found"))

        sessions = await self.auth_service.list_sessions(account_id)
        return Return.ok(SessionListResponse(account_id=account.id, sessions=sessions))

    async def revoke_all_sessions(
        self, account_id: UUID, requester: AccountView
    ) -> Result[RevokeSessionsResponse]:
        if not can_access_account(requester, account_id):
            return Return.err(
                Error("FORBIDDEN", "Only super admins can revoke other admins' sessions")
            )

        account = await self.auth_service.get_by_id(account_id)
        if account is None:
            return Return.err(Error("ACCOUNT_NOT_FOUND", "Account not found"))

        count = await self.auth_service.invalidate_all_sessions(account_id)
        return Return.ok(
            RevokeSessionsResponse(
                message=f"Successfully revoked {count} session(s)",
                revoked_count=count,
            )
        )

    async def prune_expired(self, requester: AccountView) -> Result[PruneSessionsResponse]:
        if not can_manage_accounts(requester.role):
            return Return.err(Error("FORBIDDEN", "Only super admins can prune sessions"))

        count = await self.auth_service.prune_expired()
        return Return.ok(
            PruneSessionsResponse(
                message=f"Removed {count} expired session(s)",
                removed_count=count,
            )
        )
