"""
Admin Session Entity

Short-lived browser sessions opened by a username/password login.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from backoffice.domain.base import utcnow
from .enums import SessionStatus


class AdminSession(SQLModel, table=True):
    """
    AdminSession entity - a session token issued at login.

    Business Rules:
    - Token is random and unrelated to the account's API key
    - Valid only while now < expires_at and the owning account is active
    - Validation refreshes last_accessed_at
    - An account may hold many concurrent sessions
    """

    __tablename__ = "admin_sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    account_id: UUID = Field(foreign_key="admin_users.id", nullable=False, index=True)
    session_token: str = Field(unique=True, index=True, max_length=128)
    api_key: str = Field(max_length=128)  # Account API key at issue time

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    last_accessed_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))

    # Client metadata captured at login
    ip_address: Optional[str] = Field(default=None, max_length=64)
    user_agent: Optional[str] = Field(default=None, max_length=512)

    __table_args__ = (Index("idx_admin_session_expires_at", "expires_at"),)

    def status_at(self, now: datetime) -> SessionStatus:
        return SessionStatus.active if now < self.expires_at else SessionStatus.expired
