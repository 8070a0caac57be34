"""Create the admin_users and admin_sessions tables.

Usage:
  python scripts/init_db.py
"""

import asyncio

from config import ApplicationConfig
from backoffice.adapter.database import Database


async def run() -> None:
    database = Database(ApplicationConfig.DB_URI, echo=ApplicationConfig.DB_ECHO)
    database.connect()
    try:
        await database.create_all()
    finally:
        await database.dispose()


def main() -> None:
    asyncio.run(run())
    print(f"DB initialized: {ApplicationConfig.DB_URI}")


if __name__ == "__main__":
    main()
