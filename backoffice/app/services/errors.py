class AuthServiceError(Exception):
    """Base class for errors raised by the auth service"""


class ConflictError(AuthServiceError):
    """Username, email or API key already belongs to another account"""
