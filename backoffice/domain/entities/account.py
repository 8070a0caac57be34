"""
Admin Account Entity

Represents an administrator who can sign in to the back office.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from backoffice.domain.base import utcnow
from .enums import AccountStatus, AdminRole


class AdminAccount(SQLModel, table=True):
    """
    AdminAccount entity - an administrator of the back office.

    Business Rules:
    - Username, email and API key are unique across all accounts
    - Usernames and emails are compared case-sensitively
    - Password stored as bcrypt hash (cost factor 12)
    - Deletion is modelled as deactivation (is_active=False)
    """

    __tablename__ = "admin_users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=100)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars
    api_key: str = Field(unique=True, index=True, max_length=128)

    role: AdminRole = Field(default=AdminRole.admin)
    is_active: bool = Field(default=True)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_admin_user_active", "is_active"),)

    @property
    def status(self) -> AccountStatus:
        return AccountStatus.active if self.is_active else AccountStatus.inactive
