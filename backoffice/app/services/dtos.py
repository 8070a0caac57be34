"""
Auth Service DTOs (Data Transfer Objects)

Views of accounts and sessions handed out by the auth service.
None of them carries a password hash. Only AccountWithApiKey carries the
API key and only IssuedSession carries the raw session token.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from backoffice.domain.entities import (
    AccountStatus,
    AdminAccount,
    AdminRole,
    AdminSession,
    CredentialKind,
    SessionStatus,
)


class AccountView(BaseModel):
    """Administrator account without secrets"""

    id: str
    username: str
    email: str
    role: AdminRole
    status: AccountStatus
    is_active: bool
    created_at: datetime
    updated_at: datetime
    last_login_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, account: AdminAccount) -> "AccountView":
        return cls(
            id=str(account.id),
            username=account.username,
            email=account.email,
            role=account.role,
            status=account.status,
            is_active=account.is_active,
            created_at=account.created_at,
            updated_at=account.updated_at,
            last_login_at=account.last_login_at,
        )


class AccountWithApiKey(AccountView):
    """Account view plus its long-lived API key"""

    api_key: str

    @classmethod
    def from_entity(cls, account: AdminAccount) -> "AccountWithApiKey":
        view = AccountView.from_entity(account)
        return cls(**view.model_dump(), api_key=account.api_key)


class SessionInfo(BaseModel):
    """Session metadata without the token"""

    id: str
    account_id: str
    status: SessionStatus
    created_at: datetime
    last_accessed_at: datetime
    expires_at: datetime
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None

    @classmethod
    def from_entity(cls, session: AdminSession, now: datetime) -> "SessionInfo":
        return cls(
            id=str(session.id),
            account_id=str(session.account_id),
            status=session.status_at(now),
            created_at=session.created_at,
            last_accessed_at=session.last_accessed_at,
            expires_at=session.expires_at,
            ip_address=session.ip_address,
            user_agent=session.user_agent,
        )


class IssuedSession(SessionInfo):
    """Freshly created session, the only view that exposes the token"""

    session_token: str
    api_key: str

    @classmethod
    def from_entity(cls, session: AdminSession, now: datetime) -> "IssuedSession":
        info = SessionInfo.from_entity(session, now)
        return cls(
            **info.model_dump(),
            session_token=session.session_token,
            api_key=session.api_key,
        )


class SessionValidation(BaseModel):
    """Outcome of a successful session validation"""

    account: AccountView
    session: SessionInfo


class AdminPrincipal(BaseModel):
    """Authenticated caller as seen by route guards"""

    account: AccountView
    credential: CredentialKind
    session: Optional[SessionInfo] = None
