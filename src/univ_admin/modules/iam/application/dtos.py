"""IAM application commands and responses."""
from __future__ import annotations

import dataclasses

from univ_admin.application.cqrs import Command
from univ_admin.modules.iam.application.ports import AuthTokens
from univ_admin.modules.iam.domain import UserAccount


@dataclasses.dataclass(frozen=True)
class CreateUserCommand(Command):
    username: str
    email: str
    first_name: str
    last_name: str
    role: str
    password: str = dataclasses.field(repr=False)


@dataclasses.dataclass(frozen=True)
class CreateUserResponse:
    id: str
    username: str


@dataclasses.dataclass(frozen=True)
class LoginCommand(Command):
    """*identifier* is either the username or the e-mail address."""

    identifier: str
    password: str = dataclasses.field(repr=False)


@dataclasses.dataclass(frozen=True)
class UserSummary:
    id: str
    username: str
    email: str
    full_name: str
    role: str

    @classmethod
    def from_user(cls, user: UserAccount) -> UserSummary:
        return cls(
            id=str(user.id),
            username=user.username,
            email=user.email,
            full_name=user.full_name,
            role=user.role.value,
        )


@dataclasses.dataclass(frozen=True)
class LoginResponse:
    tokens: AuthTokens
    user: UserSummary


__all__ = [
    "CreateUserCommand",
    "CreateUserResponse",
    "LoginCommand",
    "LoginResponse",
    "UserSummary",
]
