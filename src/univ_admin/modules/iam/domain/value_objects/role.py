"""IAM value object – Role."""
from __future__ import annotations

import dataclasses

from univ_admin.kernel.ddd import DomainPrimitive
from univ_admin.kernel.errors import ArgumentInvalidException
from univ_admin.kernel.types import Result, err, ok
from univ_admin.modules.iam.domain.errors import InvalidRoleError
from univ_admin.modules.iam.domain.types import UserRole


@dataclasses.dataclass(frozen=True)
class Role(DomainPrimitive[UserRole]):
    def _validate(self) -> None:
        if not isinstance(self.value, UserRole):
            raise ArgumentInvalidException(
                "Role value must be a UserRole", metadata={"value": repr(self.value)}
            )

    @classmethod
    def create(cls, raw: str | UserRole | None) -> Result[Role, InvalidRoleError]:
        try:
            return ok(cls(UserRole(raw)))
        except ValueError:
            return err(InvalidRoleError(str(raw)))


__all__ = ["Role"]
