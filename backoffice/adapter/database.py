"""
Database handle

Owns the async engine and session factory for the credential store.
Constructed and opened by the host application (see api.app lifespan),
then passed to whatever needs a unit of work. There is no module-level pool.
"""

import logging
from typing import Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

# Register table metadata before create_all
from backoffice.domain import entities  # noqa: F401

logger = logging.getLogger(__name__)


class DatabaseNotConnectedError(RuntimeError):
    pass


class Database:
    def __init__(self, uri: str, echo: bool = False):
        self.uri = uri
        self.echo = echo
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[sessionmaker] = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise DatabaseNotConnectedError("Database.connect() has not been called")
        return self._engine

    @property
    def is_connected(self) -> bool:
        return self._engine is not None

    def connect(self) -> None:
        if self._engine is not None:
            return
        self._engine = create_async_engine(self.uri, echo=self.echo, future=True)
        self._session_factory = sessionmaker(
            self._engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )
        logger.info("Database engine created")

    async def dispose(self) -> None:
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Database engine disposed")

    async def create_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    def session(self) -> AsyncSession:
        if self._session_factory is None:
            raise DatabaseNotConnectedError("Database.connect() has not been called")
        return self._session_factory()

    async def ping(self) -> bool:
        """True when a trivial query round-trips, False otherwise"""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"Database ping failed: {e}")
            return False
