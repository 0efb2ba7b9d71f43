"""IAM value object – ActiveFlag."""
from __future__ import annotations

import dataclasses

from univ_admin.kernel.ddd import DomainPrimitive
from univ_admin.kernel.errors import ArgumentInvalidException


@dataclasses.dataclass(frozen=True)
class ActiveFlag(DomainPrimitive[bool]):
    def _validate(self) -> None:
        if not isinstance(self.value, bool):
            raise ArgumentInvalidException("ActiveFlag value must be a bool")

    @classmethod
    def active(cls) -> ActiveFlag:
        return cls(True)

    @classmethod
    def inactive(cls) -> ActiveFlag:
        return cls(False)

    def is_active(self) -> bool:
        return self.value is True

    def is_inactive(self) -> bool:
        return self.value is False


__all__ = ["ActiveFlag"]
