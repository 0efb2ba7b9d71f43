"""Entity identifier value object."""

from __future__ import annotations

import dataclasses
import uuid

from univ_admin.kernel.errors.domain import InvalidIdentifierError
from univ_admin.kernel.errors.exceptions import ArgumentNotProvidedException
from univ_admin.kernel.types.result import Err, Ok, Result


@dataclasses.dataclass(frozen=True, slots=True)
class UniqueEntityID:
    """Identity of an entity, compared by value.

    Examples::

        eid = UniqueEntityID.generate()            # new random UUID4
        eid = UniqueEntityID("7d0b...")            # trusted, e.g. from storage
        res = UniqueEntityID.create(request_value) # validating, returns Result
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ArgumentNotProvidedException(f"{type(self).__name__} must not be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> "UniqueEntityID":
        """Return a new random ``UniqueEntityID``."""
        return cls(str(uuid.uuid4()))

    @classmethod
    def create(cls, raw: str | None) -> Result["UniqueEntityID", InvalidIdentifierError]:
        """Validate *raw* and wrap it; blank input yields ``Err``."""
        if raw is None or not raw.strip():
            return Err(InvalidIdentifierError(raw or ""))
        return Ok(cls(raw.strip()))


__all__ = ["UniqueEntityID"]
