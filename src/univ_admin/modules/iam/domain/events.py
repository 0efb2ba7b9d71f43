"""IAM domain events."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from univ_admin.kernel.ddd import DomainEvent
from univ_admin.modules.iam.domain.types import UserRole


@dataclasses.dataclass(frozen=True)
class UserCreatedPayload:
    email: str
    username: str
    role: UserRole


@dataclasses.dataclass(frozen=True)
class UserCreated(DomainEvent[UserCreatedPayload]):
    """Raised once when a new user account is registered."""

    event_name: ClassVar[str] = "Iam.UserCreated"


__all__ = ["UserCreated", "UserCreatedPayload"]
