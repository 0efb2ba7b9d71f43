"""IAM value object – EmailAddress."""
from __future__ import annotations

import dataclasses
import re
from typing import Final

from univ_admin.kernel.ddd import DomainPrimitive
from univ_admin.kernel.errors import ArgumentInvalidException
from univ_admin.kernel.types import Result, err, ok
from univ_admin.modules.iam.domain.errors import InvalidEmailError

_EMAIL_RE: Final = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclasses.dataclass(frozen=True)
class EmailAddress(DomainPrimitive[str]):
    """Normalised (trimmed, lower-cased) e-mail address."""

    def _validate(self) -> None:
        if not isinstance(self.value, str):
            raise ArgumentInvalidException("EmailAddress value must be a string")

    @classmethod
    def create(cls, raw: str | None) -> Result[EmailAddress, InvalidEmailError]:
        value = (raw or "").strip().lower()
        if not _EMAIL_RE.match(value):
            return err(InvalidEmailError(raw or ""))
        return ok(cls(value))

    @property
    def local_part(self) -> str:
        return self.value.split("@", 1)[0]

    @property
    def domain(self) -> str:
        return self.value.split("@", 1)[1]


__all__ = ["EmailAddress"]
