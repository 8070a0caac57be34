from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from backoffice.app.repositories.session_repository import ISessionRepository
from backoffice.domain.entities import AdminAccount, AdminSession


class SessionRepository(ISessionRepository):
    """Admin session repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, session_obj: AdminSession) -> AdminSession:
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def touch_valid(self, session_token: str, now: datetime) -> Optional[AdminSession]:
        """
        Validate and refresh in one UPDATE ... RETURNING.

        The expiry and account-active checks live in the WHERE clause, so a
        session that stops being usable is never refreshed. Concurrent
        refreshes of the same session are last-write-wins.
        """
        active_accounts = select(AdminAccount.id).where(AdminAccount.is_active == True)
        stmt = (
            update(AdminSession)
            .where(
                AdminSession.session_token == session_token,
                AdminSession.expires_at > now,
                AdminSession.account_id.in_(active_accounts),
            )
            .values(last_accessed_at=now)
            .returning(AdminSession)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        return result.scalars().one_or_none()

    async def get_active_by_account_id(
        self, account_id: UUID, now: datetime
    ) -> List[AdminSession]:
        stmt = (
            select(AdminSession)
            .where(AdminSession.account_id == account_id, AdminSession.expires_at > now)
            .order_by(AdminSession.last_accessed_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def delete_by_token(self, session_token: str) -> int:
        stmt = delete(AdminSession).where(AdminSession.session_token == session_token)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete_by_account_id(self, account_id: UUID) -> int:
        stmt = delete(AdminSession).where(AdminSession.account_id == account_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete_expired(self, now: datetime) -> int:
        stmt = delete(AdminSession).where(AdminSession.expires_at <= now)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
