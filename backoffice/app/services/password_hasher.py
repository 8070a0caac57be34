"""
Password hashing using bcrypt.

Passwords are reduced with SHA-256 and base64-encoded before bcrypt sees
them, so every input (including the empty string and inputs beyond bcrypt's
72-byte limit) hashes to a distinct, verifiable value.

Example:
    >>> hasher = PasswordHasher()
    >>> hashed = hasher.hash("my_password")
    >>> hasher.verify("my_password", hashed)
    True
"""

import base64
import hashlib

import bcrypt

# bcrypt work factor; raise as hardware gets faster
DEFAULT_ROUNDS = 12


class PasswordHasher:
    """
    Salted, slow one-way password hashing.

    hash() embeds a random salt, so hashing the same password twice gives
    different outputs that both verify. verify() never raises: a malformed
    or empty stored hash simply does not match.
    """

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self._rounds = rounds
        self._dummy_hash: str | None = None

    @staticmethod
    def _prepare(password: str) -> bytes:
        digest = hashlib.sha256(password.encode("utf-8")).digest()
        return base64.b64encode(digest)

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(self._prepare(password), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        if not password_hash:
            return False
        try:
            return bcrypt.checkpw(self._prepare(password), password_hash.encode("utf-8"))
        except (ValueError, TypeError):
            return False

    def verify_dummy(self, password: str) -> None:
        """
        Spend the same time as a real verification and discard the outcome.

        Called when the account lookup misses so that an unknown username
        and a wrong password take comparable time.
        """
        if self._dummy_hash is None:
            self._dummy_hash = self.hash("dummy_password")
        self.verify(password, self._dummy_hash)
