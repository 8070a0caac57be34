from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from backoffice.domain.entities import AdminAccount


class IAccountRepository(ABC):
    """Admin account repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, account_id: UUID) -> Optional[AdminAccount]:
        """Get account by ID, active or not"""
        pass

    @abstractmethod
    async def get_active_by_username(self, username: str) -> Optional[AdminAccount]:
        """Get an active account by exact username"""
        pass

    @abstractmethod
    async def get_active_by_api_key(self, api_key: str) -> Optional[AdminAccount]:
        """Get an active account by API key"""
        pass

    @abstractmethod
    async def find_conflicting(
        self,
        username: Optional[str],
        email: Optional[str],
        exclude_id: Optional[UUID] = None,
    ) -> Optional[AdminAccount]:
        """Find another account already using the username or email"""
        pass

    @abstractmethod
    async def create(self, account: AdminAccount) -> AdminAccount:
        """Create a new account"""
        pass

    @abstractmethod
    async def update(self, account: AdminAccount) -> AdminAccount:
        """Update existing account"""
        pass

    @abstractmethod
    async def set_active(self, account_id: UUID, is_active: bool, now: datetime) -> bool:
        """Flip the active flag. Returns True if the account exists."""
        pass
