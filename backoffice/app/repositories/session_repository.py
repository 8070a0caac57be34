from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from backoffice.domain.entities import AdminSession


class ISessionRepository(ABC):
    """Admin session repository interface - application layer"""

    @abstractmethod
    async def create(self, session: AdminSession) -> AdminSession:
        """Create a new session"""
        pass

    @abstractmethod
    async def touch_valid(self, session_token: str, now: datetime) -> Optional[AdminSession]:
        """
        Refresh last_accessed_at of a usable session in a single statement.

        Only matches when the token exists, the session has not expired and
        the owning account is active. Returns the refreshed session or None.
        """
        pass

    @abstractmethod
    async def get_active_by_account_id(
        self, account_id: UUID, now: datetime
    ) -> List[AdminSession]:
        """Get unexpired sessions for an account, most recently used first"""
        pass

    @abstractmethod
    async def delete_by_token(self, session_token: str) -> int:
        """Delete one session by token. Returns count deleted (0 or 1)."""
        pass

    @abstractmethod
    async def delete_by_account_id(self, account_id: UUID) -> int:
        """Delete all sessions of an account. Returns count deleted."""
        pass

    @abstractmethod
    async def delete_expired(self, now: datetime) -> int:
        """Delete all sessions whose expiry has passed. Returns count deleted."""
        pass
