"""Provision an admin account and print its API key.

Usage:
  python scripts/create_admin.py --username alice --email alice@example.com \
      --password '...' --role super_admin

The API key is printed once; store it somewhere safe.
"""

import argparse
import asyncio
import sys

from config import ApplicationConfig
from backoffice.adapter.database import Database
from backoffice.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from backoffice.app.services.auth_service import AuthService
from backoffice.app.services.credential_issuer import CredentialIssuer
from backoffice.app.services.errors import ConflictError
from backoffice.app.services.password_hasher import PasswordHasher
from backoffice.domain.entities import AdminRole


async def run(args: argparse.Namespace):
    database = Database(ApplicationConfig.DB_URI, echo=ApplicationConfig.DB_ECHO)
    database.connect()
    try:
        await database.create_all()
        async with database.session() as session:
            auth_service = AuthService(
                SqlAlchemyUnitOfWork(session),
                hasher=PasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS),
                issuer=CredentialIssuer(api_key_prefix=ApplicationConfig.API_KEY_PREFIX),
            )
            account = await auth_service.create_account(
                args.username, args.email, args.password, AdminRole(args.role)
            )
            return await auth_service.get_account_with_api_key(account.id)
    finally:
        await database.dispose()


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--username", required=True)
    ap.add_argument("--email", required=True)
    ap.add_argument("--password", required=True)
    ap.add_argument(
        "--role", choices=[r.value for r in AdminRole], default=AdminRole.admin.value
    )
    args = ap.parse_args()

    try:
        account = asyncio.run(run(args))
    except (ConflictError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print("Created admin account:")
    print(f"  id:       {account.id}")
    print(f"  username: {account.username}")
    print(f"  role:     {account.role.value}")
    print(f"  api_key:  {account.api_key}")


if __name__ == "__main__":
    main()
