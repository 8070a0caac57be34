"""
Update Account Use Case

Partial profile update for an admin account.
"""

from uuid import UUID

from backoffice.app.services.auth_service import AuthService
from backoffice.app.services.dtos import AccountView
from backoffice.app.services.errors import ConflictError
from backoffice.libs.result import Error, Result, Return
from .dtos import UpdateAccountCommand
from .permissions import can_access_account, can_manage_accounts


class UpdateAccountUseCase:
    """
    Use case for updating an admin account.

    Business Rules:
    - Admins may update their own username, email and password
    - Only super admins may update other accounts or change any role
    - A new password is re-hashed; existing sessions are left alone
    """

    def __init__(self, auth_service: AuthService):
        self.auth_service = auth_service

    async def execute(
        self, account_id: UUID, command: UpdateAccountCommand, requester: AccountView
    ) -> Result[AccountView]:
        if not can_access_account(requester, account_id):
            return Return.err(Error("FORBIDDEN", "Cannot modify another admin's account"))

        if command.role is not None and not can_manage_accounts(requester.role):
            return Return.err(Error("FORBIDDEN", "Only super admins can change roles"))

        try:
            account = await self.auth_service.update_account(
                account_id,
                username=command.username,
                email=command.email,
                password=command.password,
                role=command.role,
            )
        except ConflictError as e:
            return Return.err(Error("ACCOUNT_EXISTS", str(e)))
        except ValueError as e:
            return Return.err(Error("INVALID_INPUT", str(e)))

        if account is None:
            return Return.err(Error("ACCOUNT_NOT_FOUND", "Account not found"))

        return Return.ok(account)
