import secrets
import time
from uuid import uuid4

DEFAULT_API_KEY_PREFIX = "osprey"


class CredentialIssuer:
    """Mints long-lived API keys and short-lived session tokens"""

    def __init__(self, api_key_prefix: str = DEFAULT_API_KEY_PREFIX):
        self.api_key_prefix = api_key_prefix

    def new_api_key(self) -> str:
        # prefix-uuid4-epoch_millis; the database unique constraint is the final guard
        return f"{self.api_key_prefix}-{uuid4()}-{int(time.time() * 1000)}"

    def new_session_token(self) -> str:
        return secrets.token_urlsafe(32)
