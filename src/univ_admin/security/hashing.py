"""Security – bcrypt-backed PasswordHasher."""
from __future__ import annotations

import bcrypt

from univ_admin.kernel.security import PasswordHasher

__all__ = ["BcryptPasswordHasher"]

# bcrypt input is capped at 72 bytes.
_MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_MAX_PASSWORD_BYTES]


class BcryptPasswordHasher(PasswordHasher):
    """Hashes passwords with bcrypt; the salt and cost live inside the hash."""

    def __init__(self, rounds: int = 12) -> None:
        # Low rounds for tests; production should use >=10
        self._rounds = rounds

    def hash(self, password: str) -> str:
        return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=self._rounds)).decode("ascii")

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(_encode(password), hashed.encode("ascii"))
        except ValueError:
            return False
