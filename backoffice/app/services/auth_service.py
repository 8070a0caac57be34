"""
Auth Service

Dual-mode admin authentication: long-lived API keys and short-lived
session tokens, plus the account lifecycle around them.

Validation failures (unknown user, wrong password, inactive account,
missing or expired session) are returned as None so that guards can answer
401 uniformly. Store failures propagate untouched; nothing here retries.
"""

import logging
from datetime import datetime, timedelta
from typing import Callable, List, Optional, Union
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from backoffice.app.services.credential_issuer import CredentialIssuer
from backoffice.app.services.dtos import (
    AccountView,
    AccountWithApiKey,
    IssuedSession,
    SessionInfo,
    SessionValidation,
)
from backoffice.app.services.errors import ConflictError
from backoffice.app.services.password_hasher import PasswordHasher
from backoffice.app.services.unit_of_work import UnitOfWork
from backoffice.domain.base import utcnow
from backoffice.domain.entities import AdminAccount, AdminRole, AdminSession

logger = logging.getLogger(__name__)

DEFAULT_SESSION_TTL_HOURS = 24
MAX_SESSION_TTL_HOURS = 24 * 7

CONFLICT_MESSAGE = "Account with this username or email already exists"


class AuthService:
    """
    Orchestrates credentials for back-office administrators.

    Business Rules:
    - Usernames and emails are unique and compared exactly (after trimming)
    - Password hashes never leave this class
    - A session is usable only while now < expires_at and its account is active
    - Deactivation and session revocation commit together or not at all
    - Concurrent sessions per account are allowed
    """

    def __init__(
        self,
        uow: UnitOfWork,
        hasher: Optional[PasswordHasher] = None,
        issuer: Optional[CredentialIssuer] = None,
        clock: Callable[[], datetime] = utcnow,
        default_ttl_hours: float = DEFAULT_SESSION_TTL_HOURS,
        max_ttl_hours: float = MAX_SESSION_TTL_HOURS,
    ):
        self.uow = uow
        self.hasher = hasher or PasswordHasher()
        self.issuer = issuer or CredentialIssuer()
        self.clock = clock
        self.default_ttl_hours = default_ttl_hours
        self.max_ttl_hours = max_ttl_hours

    # ------------------------------------------------------------------
    # Accounts
    # ------------------------------------------------------------------

    async def create_account(
        self,
        username: str,
        email: str,
        password: str,
        role: AdminRole = AdminRole.admin,
    ) -> AccountView:
        """
        Provision a new administrator.

        Raises:
            ConflictError: username or email already taken
            ValueError: blank username or email
        """
        username = _clean("username", username)
        email = _clean("email", email)
        role = AdminRole(role)

        # Hash outside the transaction, bcrypt is slow
        password_hash = self.hasher.hash(password)

        async with self.uow:
            existing = await self.uow.accounts.find_conflicting(username, email)
            if existing is not None:
                raise ConflictError(CONFLICT_MESSAGE)

            now = self.clock()
            account = AdminAccount(
                username=username,
                email=email,
                password_hash=password_hash,
                api_key=self.issuer.new_api_key(),
                role=role,
                is_active=True,
                created_at=now,
                updated_at=now,
            )
            try:
                account = await self.uow.accounts.create(account)
                await self.uow.commit()
            except IntegrityError as e:
                # Lost a race with a concurrent insert
                raise ConflictError(CONFLICT_MESSAGE) from e

            logger.info(f"Created admin account {account.id} with role {account.role.value}")
            return AccountView.from_entity(account)

    async def authenticate(self, username: str, password: str) -> Optional[AccountWithApiKey]:
        """
        Check a username/password pair.

        Returns the account including its API key, or None when the account
        is absent, inactive or the password is wrong.
        """
        async with self.uow:
            account = await self.uow.accounts.get_active_by_username((username or "").strip())

            if account is None:
                self.hasher.verify_dummy(password)
                return None

            if not self.hasher.verify(password, account.password_hash):
                return None

            now = self.clock()
            account.last_login_at = now
            account.updated_at = now
            account = await self.uow.accounts.update(account)
            await self.uow.commit()
            return AccountWithApiKey.from_entity(account)

    async def get_by_id(self, account_id: UUID) -> Optional[AccountView]:
        account_id = _as_uuid(account_id)
        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            return AccountView.from_entity(account) if account else None

    async def get_account_with_api_key(self, account_id: UUID) -> Optional[AccountWithApiKey]:
        account_id = _as_uuid(account_id)
        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            return AccountWithApiKey.from_entity(account) if account else None

    async def update_account(
        self,
        account_id: UUID,
        username: Optional[str] = None,
        email: Optional[str] = None,
        password: Optional[str] = None,
        role: Optional[AdminRole] = None,
    ) -> Optional[AccountView]:
        """
        Partial update: only arguments that are not None are written.

        With nothing to change this is a plain fetch. Returns None when the
        account does not exist.

        Raises:
            ConflictError: new username or email belongs to another account
        """
        account_id = _as_uuid(account_id)
        if username is not None:
            username = _clean("username", username)
        if email is not None:
            email = _clean("email", email)
        if role is not None:
            role = AdminRole(role)

        if username is None and email is None and password is None and role is None:
            return await self.get_by_id(account_id)

        password_hash = self.hasher.hash(password) if password is not None else None

        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return None

            if username is not None or email is not None:
                existing = await self.uow.accounts.find_conflicting(
                    username, email, exclude_id=account.id
                )
                if existing is not None:
                    raise ConflictError(CONFLICT_MESSAGE)

            if username is not None:
                account.username = username
            if email is not None:
                account.email = email
            if password_hash is not None:
                account.password_hash = password_hash
            if role is not None:
                account.role = role
            account.updated_at = self.clock()

            try:
                account = await self.uow.accounts.update(account)
                await self.uow.commit()
            except IntegrityError as e:
                raise ConflictError(CONFLICT_MESSAGE) from e

            logger.info(f"Updated admin account {account.id}")
            return AccountView.from_entity(account)

    async def deactivate(self, account_id: UUID) -> bool:
        """
        Deactivate an account and delete all of its sessions atomically.

        Returns False when the account does not exist.
        """
        account_id = _as_uuid(account_id)
        async with self.uow:
            found = await self.uow.accounts.set_active(account_id, False, self.clock())
            if not found:
                return False
            revoked = await self.uow.sessions.delete_by_account_id(account_id)
            await self.uow.commit()

        logger.info(f"Deactivated admin account {account_id}, revoked {revoked} session(s)")
        return True

    # ------------------------------------------------------------------
    # Sessions
    # ------------------------------------------------------------------

    async def create_session(
        self,
        account_id: UUID,
        api_key: str,
        ttl_hours: Optional[float] = None,
        ip_address: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> IssuedSession:
        """
        Open a new session for an account.

        The returned IssuedSession is the only place the raw token is
        ever handed out.

        Raises:
            ValueError: ttl_hours outside (0, max_ttl_hours]
        """
        account_id = _as_uuid(account_id)
        ttl = self.default_ttl_hours if ttl_hours is None else ttl_hours
        if not 0 < ttl <= self.max_ttl_hours:
            raise ValueError(
                f"ttl_hours must be greater than 0 and at most {self.max_ttl_hours}"
            )

        now = self.clock()
        session = AdminSession(
            account_id=account_id,
            session_token=self.issuer.new_session_token(),
            api_key=api_key,
            created_at=now,
            last_accessed_at=now,
            expires_at=now + timedelta(hours=ttl),
            ip_address=ip_address,
            user_agent=user_agent,
        )

        async with self.uow:
            session = await self.uow.sessions.create(session)
            await self.uow.commit()
            return IssuedSession.from_entity(session, now)

    async def validate_session(self, session_token: Optional[str]) -> Optional[SessionValidation]:
        """
        Resolve a session token to its account, refreshing last access.

        Returns None for a missing, unknown or expired token, or when the
        owning account is inactive.
        """
        if not session_token:
            return None

        now = self.clock()
        async with self.uow:
            session = await self.uow.sessions.touch_valid(session_token, now)
            if session is None:
                return None

            account = await self.uow.accounts.get_by_id(session.account_id)
            if account is None or not account.is_active:
                return None

            await self.uow.commit()
            return SessionValidation(
                account=AccountView.from_entity(account),
                session=SessionInfo.from_entity(session, now),
            )

    async def validate_api_key(self, api_key: Optional[str]) -> Optional[AccountView]:
        """Resolve an API key to its active account. Sessions are not touched."""
        if not api_key:
            return None

        async with self.uow:
            account = await self.uow.accounts.get_active_by_api_key(api_key)
            return AccountView.from_entity(account) if account else None

    async def invalidate_session(self, session_token: str) -> None:
        """Delete one session. Unknown tokens are ignored."""
        if not session_token:
            return

        async with self.uow:
            await self.uow.sessions.delete_by_token(session_token)
            await self.uow.commit()

    async def invalidate_all_sessions(self, account_id: UUID) -> int:
        """Delete every session of an account. Returns count removed."""
        account_id = _as_uuid(account_id)
        async with self.uow:
            count = await self.uow.sessions.delete_by_account_id(account_id)
            await self.uow.commit()

        logger.info(f"Revoked {count} session(s) for admin account {account_id}")
        return count

    async def list_sessions(self, account_id: UUID) -> List[SessionInfo]:
        """Unexpired sessions of an account, most recently used first"""
        account_id = _as_uuid(account_id)
        now = self.clock()
        async with self.uow:
            sessions = await self.uow.sessions.get_active_by_account_id(account_id, now)
            return [SessionInfo.from_entity(s, now) for s in sessions]

    async def prune_expired(self) -> int:
        """Delete every expired session. Returns count removed."""
        async with self.uow:
            count = await self.uow.sessions.delete_expired(self.clock())
            await self.uow.commit()

        if count:
            logger.info(f"Pruned {count} expired session(s)")
        return count


def _as_uuid(value: Union[UUID, str]) -> UUID:
    return value if isinstance(value, UUID) else UUID(str(value))


def _clean(field: str, value: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValueError(f"{field} must not be blank")
    return value
