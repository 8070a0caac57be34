from uuid import UUID

from backoffice.app.services.auth_service import AuthService
from backoffice.app.services.dtos import AccountView
from backoffice.libs.result import Error, Result, Return
from .dtos import DeactivateAccountResponse
from .permissions import can_manage_accounts


class DeactivateAccountUseCase:
    """
    Use case for deactivating an admin account.

    Business Rules:
    - Requester must be a super_admin
    - The account flag flips and all its sessions are deleted in one transaction
    - The API key stops validating immediately
    """

    def __init__(self, auth_service: AuthService):
        self.auth_service = auth_service

    async def execute(
        self, account_id: UUID, requester: AccountView
    ) -> Result[DeactivateAccountResponse]:
        if not can_manage_accounts(requester.role):
            return Return.err(
                Error("FORBIDDEN", "Only super admins can deactivate accounts")
            )

        found = await self.auth_service.deactivate(account_id)
        if not found:
            return Return.err(Error("ACCOUNT_NOT_FOUND", "Account not found"))

        return Return.ok(
            DeactivateAccountResponse(
                message="Account deactivated", account_id=str(account_id)
            )
        )
