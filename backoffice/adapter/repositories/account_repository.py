from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import or_
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from backoffice.app.repositories.account_repository import IAccountRepository
from backoffice.domain.entities import AdminAccount


class AccountRepository(IAccountRepository):
    """Admin account repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, account_id: UUID) -> Optional[AdminAccount]:
        stmt = (
            select(AdminAccount)
            .where(AdminAccount.id == account_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_active_by_username(self, username: str) -> Optional[AdminAccount]:
        stmt = select(AdminAccount).where(
            AdminAccount.username == username, AdminAccount.is_active == True
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_active_by_api_key(self, api_key: str) -> Optional[AdminAccount]:
        stmt = select(AdminAccount).where(
            AdminAccount.api_key == api_key, AdminAccount.is_active == True
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def find_conflicting(
        self,
        username: Optional[str],
        email: Optional[str],
        exclude_id: Optional[UUID] = None,
    ) -> Optional[AdminAccount]:
        clauses = []
        if username is not None:
            clauses.append(AdminAccount.username == username)
        if email is not None:
            clauses.append(AdminAccount.email == email)
        if not clauses:
            return None

        stmt = select(AdminAccount).where(or_(*clauses))
        if exclude_id is not None:
            stmt = stmt.where(AdminAccount.id != exclude_id)
        result = await self.session.exec(stmt.limit(1))
        return result.first()

    async def create(self, account: AdminAccount) -> AdminAccount:
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account

    async def update(self, account: AdminAccount) -> AdminAccount:
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account

    async def set_active(self, account_id: UUID, is_active: bool, now: datetime) -> bool:
        stmt = (
            update(AdminAccount)
            .where(AdminAccount.id == account_id)
            .values(is_active=is_active, updated_at=now)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
