"""
Authentication Use Case DTOs (Data Transfer Objects)

Command and Response classes for the login/logout flows.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from backoffice.app.services.dtos import AccountView


# ============================================================================
# Command DTOs
# ============================================================================


class LoginCommand(BaseModel):
    """Login intent plus the client metadata captured with the session"""

    username: str
    password: str
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class SessionToken(BaseModel):
    """Session token handed to the client at login"""

    token: str
    expires_at: datetime


class LoginResponse(BaseModel):
    """Response for admin login use case"""

    success: bool
    message: str
    account: AccountView
    session: SessionToken


class LogoutResponse(BaseModel):
    """Response for admin logout use case"""

    success: bool
    message: str
