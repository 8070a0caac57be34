from uuid import UUID

from backoffice.app.services.auth_service import AuthService
from backoffice.app.services.dtos import AccountView
from backoffice.libs.result import Error, Result, Return
from .permissions import can_access_account


class GetAccountUseCase:
    """Fetch one account; admins may read their own, super admins any"""

    def __init__(self, auth_service: AuthService):
        self.auth_service = auth_service

    async def execute(self, account_id: UUID, requester: AccountView) -> Result[AccountView]:
        if not can_access_account(requester, account_id):
            return Return.err(Error("FORBIDDEN", "Cannot access another admin's account"))

        account = await self.auth_service.get_by_id(account_id)
        if account is None:
            return Return.err(Error("ACCOUNT_NOT_FOUND", "Account not found"))

        return Return.ok(account)
