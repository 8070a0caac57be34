"""
Create Account Use Case

Provisions a new administrator. Only account managers may call it.
"""

from backoffice.app.services.auth_service import AuthService
from backoffice.app.services.dtos import AccountView, AccountWithApiKey
from backoffice.app.services.errors import ConflictError
from backoffice.libs.result import Error, Result, Return
from .dtos import CreateAccountCommand
from .permissions import can_manage_accounts


class CreateAccountUseCase:
    """
    Use case for provisioning an admin account.

    Business Rules:
    - Requester must be a super_admin
    - Username and email must be unused
    - The new API key is returned once, to the provisioning admin
    """

    def __init__(self, auth_service: AuthService):
        self.auth_service = auth_service

    async def execute(
        self, command: CreateAccountCommand, requester: AccountView
    ) -> Result[AccountWithApiKey]:
        if not can_manage_accounts(requester.role):
            return Return.err(
                Error("FORBIDDEN", "Only super admins can create accounts")
            )

        try:
            account = await self.auth_service.create_account(
                command.username, command.email, command.password, command.role
            )
        except ConflictError as e:
            return Return.err(Error("ACCOUNT_EXISTS", str(e)))
        except ValueError as e:
            return Return.err(Error("INVALID_INPUT", str(e)))

        return Return.ok(await self.auth_service.get_account_with_api_key(account.id))
