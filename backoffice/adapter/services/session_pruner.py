"""
Session Pruner

Background worker that periodically deletes expired admin sessions.
Expired sessions are already rejected at validation time; pruning only
keeps the table small.
"""

import asyncio
import logging
from typing import Optional

from backoffice.adapter.database import Database
from backoffice.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from backoffice.app.services.auth_service import AuthService

logger = logging.getLogger(__name__)

DEFAULT_PRUNE_INTERVAL_SECONDS = 3600


class SessionPruner:
    """
    Runs AuthService.prune_expired on a fixed interval.

    Failures are logged and the loop keeps going; the next tick retries.
    """

    def __init__(self, database: Database, interval_seconds: float = DEFAULT_PRUNE_INTERVAL_SECONDS):
        self.database = database
        self.interval_seconds = interval_seconds
        self._running = False
        self._task: Optional[asyncio.Task] = None

    @property
    def is_running(self) -> bool:
        return self._running

    async def start(self):
        """Start the pruner."""
        if self._running:
            return

        self._running = True
        self._task = asyncio.create_task(self._run())
        logger.info(f"SessionPruner started, interval {self.interval_seconds}s")

    async def stop(self):
        """Stop the pruner."""
        self._running = False
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
        logger.info("SessionPruner stopped")

    async def _run(self):
        while self._running:
            await asyncio.sleep(self.interval_seconds)
            try:
                await self.prune_once()
            except asyncio.CancelledError:
                break
            except Exception as e:
                logger.error(f"SessionPruner error: {e}", exc_info=True)

    async def prune_once(self) -> int:
        """Delete expired sessions now. Returns count removed."""
        async with self.database.session() as session:
            auth_service = AuthService(SqlAlchemyUnitOfWork(session))
            return await auth_service.prune_expired()
