"""
Account Management Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional

from pydantic import BaseModel

from backoffice.app.services.dtos import SessionInfo
from backoffice.domain.entities import AdminRole


class CreateAccountCommand(BaseModel):
    """Provisioning intent for a new administrator"""

    username: str
    email: str
    password: str
    role: AdminRole = AdminRole.admin


class UpdateAccountCommand(BaseModel):
    """Partial update; fields left as None are not touched"""

    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[AdminRole] = None


class DeactivateAccountResponse(BaseModel):
    message: str
    account_id: str


class SessionListResponse(BaseModel):
    account_id: str
    sessions: List[SessionInfo]


class RevokeSessionsResponse(BaseModel):
    message: str
    revoked_count: int


class PruneSessionsResponse(BaseModel):
    message: str
    removed_count: int
