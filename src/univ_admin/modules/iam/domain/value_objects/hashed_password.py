"""IAM value object – HashedPassword."""
from __future__ import annotations

import dataclasses
from typing import Final

from univ_admin.kernel.ddd import DomainPrimitive, Guard
from univ_admin.kernel.errors import ArgumentInvalidException
from univ_admin.kernel.types import Result, err, ok
from univ_admin.modules.iam.domain.errors import InvalidPasswordError

MIN_HASH_LENGTH: Final = 20


@dataclasses.dataclass(frozen=True)
class HashedPassword(DomainPrimitive[str]):
    """Opaque password hash produced by a ``PasswordHasher``; never plaintext."""

    def _validate(self) -> None:
        if not isinstance(self.value, str):
            raise ArgumentInvalidException("HashedPassword value must be a string")

    @classmethod
    def create(cls, raw: str | None) -> Result[HashedPassword, InvalidPasswordError]:
        value = (raw or "").strip()
        if Guard.is_short(value, MIN_HASH_LENGTH):
            return err(InvalidPasswordError("hash is too short"))
        return ok(cls(value))

    def __repr__(self) -> str:
        return "HashedPassword(value='***')"

    __str__ = __repr__


__all__ = ["HashedPassword", "MIN_HASH_LENGTH"]
