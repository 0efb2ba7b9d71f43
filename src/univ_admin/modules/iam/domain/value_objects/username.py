"""IAM value object – Username."""
from __future__ import annotations

import dataclasses
from typing import Final

from univ_admin.kernel.ddd import DomainPrimitive, Guard
from univ_admin.kernel.errors import ArgumentInvalidException
from univ_admin.kernel.types import Result, err, ok
from univ_admin.modules.iam.domain.errors import InvalidUsernameError

MAX_USERNAME_LENGTH: Final = 50


@dataclasses.dataclass(frozen=True)
class Username(DomainPrimitive[str]):
    """Login handle chosen at registration; stored trimmed."""

    def _validate(self) -> None:
        if not isinstance(self.value, str):
            raise ArgumentInvalidException("Username value must be a string")

    @classmethod
    def create(cls, raw: str | None) -> Result[Username, InvalidUsernameError]:
        if raw is None or Guard.is_empty(raw):
            return err(InvalidUsernameError(raw or "", "must not be empty"))
        value = raw.strip()
        if Guard.is_long(value, MAX_USERNAME_LENGTH):
            return err(InvalidUsernameError(value, f"must be at most {MAX_USERNAME_LENGTH} characters"))
        return ok(cls(value))


__all__ = ["MAX_USERNAME_LENGTH", "Username"]
