"""
Authentication Use Cases

Login and logout flows for back-office administrators.
"""

from .login_use_case import LOGIN_SESSION_TTL_HOURS, LoginUseCase
from .logout_use_case import LogoutUseCase
from .dtos import LoginCommand, LoginResponse, LogoutResponse, SessionToken

__all__ = [
    # Use Cases
    "LoginUseCase",
    "LogoutUseCase",
    # DTOs - Commands
    "LoginCommand",
    # DTOs - Responses
    "LoginResponse",
    "LogoutResponse",
    "SessionToken",
    # Constants
    "LOGIN_SESSION_TTL_HOURS",
]
