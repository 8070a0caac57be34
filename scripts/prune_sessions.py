"""Delete expired admin sessions once, e.g. from cron.

Usage:
  python scripts/prune_sessions.py
"""

import asyncio

from config import ApplicationConfig
from backoffice.adapter.database import Database
from backoffice.adapter.services.session_pruner import SessionPruner


async def run() -> int:
    database = Database(ApplicationConfig.DB_URI, echo=ApplicationConfig.DB_ECHO)
    database.connect()
    try:
        return await SessionPruner(database).prune_once()
    finally:
        await database.dispose()


def main() -> None:
    removed = asyncio.run(run())
    print(f"Removed {removed} expired session(s)")


if __name__ == "__main__":
    main()
