"""IAM value object – PersonName (first or last name)."""
from __future__ import annotations

import dataclasses
import re
from typing import Final

from univ_admin.kernel.ddd import DomainPrimitive, Guard
from univ_admin.kernel.errors import ArgumentInvalidException
from univ_admin.kernel.types import Result, err, ok
from univ_admin.modules.iam.domain.errors import InvalidNameError

MIN_NAME_LENGTH: Final = 2
_NAME_RE: Final = re.compile(r"^[a-zA-ZÀ-ÖØ-öø-ÿ' -]+$")


@dataclasses.dataclass(frozen=True)
class PersonName(DomainPrimitive[str]):
    """Any human name component, normalised to upper case.

    Letters (Latin-1 accents included), apostrophes, spaces and hyphens only.
    """

    def _validate(self) -> None:
        if not isinstance(self.value, str):
            raise ArgumentInvalidException("PersonName value must be a string")

    @classmethod
    def create(cls, raw: str | None) -> Result[PersonName, InvalidNameError]:
        value = (raw or "").strip()
        if Guard.is_short(value, MIN_NAME_LENGTH):
            return err(InvalidNameError(value, f"must be at least {MIN_NAME_LENGTH} characters"))
        if not _NAME_RE.match(value):
            return err(InvalidNameError(value, "contains invalid characters"))
        return ok(cls(value.upper()))


__all__ = ["MIN_NAME_LENGTH", "PersonName"]
