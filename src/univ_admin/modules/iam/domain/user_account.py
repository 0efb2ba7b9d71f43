"""IAM aggregate – UserAccount."""
from __future__ import annotations

import dataclasses
from datetime import datetime

from univ_admin.kernel.ddd import AggregateRoot
from univ_admin.kernel.errors import DomainError
from univ_admin.kernel.time import Clock, SystemClock
from univ_admin.kernel.types import Result, UniqueEntityID, all_results, err, ok
from univ_admin.modules.iam.domain.errors import UserAlreadyActiveError, UserAlreadyInactiveError
from univ_admin.modules.iam.domain.events import UserCreated, UserCreatedPayload
from univ_admin.modules.iam.domain.types import UserRole
from univ_admin.modules.iam.domain.value_objects import (
    ActiveFlag,
    EmailAddress,
    HashedPassword,
    PersonName,
    Role,
    Username,
)


@dataclasses.dataclass(frozen=True)
class UserAccountProps:
    username: Username
    email: EmailAddress
    first_name: PersonName
    last_name: PersonName
    password: HashedPassword
    role: Role
    is_active: ActiveFlag
    created_at: datetime
    updated_at: datetime


@dataclasses.dataclass(frozen=True)
class CreateUserProps:
    """Raw, unvalidated input for :meth:`UserAccount.create`."""

    username: str
    first_name: str
    last_name: str
    email: str
    password_hash: str
    role: str


class UserAccount(AggregateRoot[UserAccountProps]):
    """A person able to sign in, with exactly one role."""

    def __init__(
        self,
        props: UserAccountProps,
        id: UniqueEntityID | None = None,  # noqa: A002
        *,
        clock: Clock | None = None,
    ) -> None:
        super().__init__(props, id)
        self._clock: Clock = clock or SystemClock()

    @classmethod
    def create(
        cls,
        props: CreateUserProps,
        id: UniqueEntityID | None = None,  # noqa: A002
        *,
        clock: Clock | None = None,
    ) -> Result[UserAccount, DomainError]:
        """Validate *props* and build a new active account.

        Records a single ``UserCreated`` event unless *id* is supplied (the
        account already exists somewhere and is only being re-created).
        """
        validated = all_results(
            Username.create(props.username),
            EmailAddress.create(props.email),
            PersonName.create(props.first_name),
            PersonName.create(props.last_name),
            HashedPassword.create(props.password_hash),
            Role.create(props.role),
        )
        if validated.is_err():
            return err(validated.unwrap_err())

        username, email, first_name, last_name, password, role = validated.unwrap()
        clock = clock or SystemClock()
        now = clock.now()
        user = cls(
            UserAccountProps(
                username=username,
                email=email,
                first_name=first_name,
                last_name=last_name,
                password=password,
                role=role,
                is_active=ActiveFlag.active(),
                created_at=now,
                updated_at=now,
            ),
            id,
            clock=clock,
        )
        if id is None:
            user._add_domain_event(
                UserCreated(
                    aggregate_id=user.id,
                    payload=UserCreatedPayload(
                        email=email.value,
                        username=username.value,
                        role=role.value,
                    ),
                    occurred_on=now,
                )
            )
        return ok(user)

    @classmethod
    def rehydrate(
        cls,
        props: UserAccountProps,
        id: UniqueEntityID,  # noqa: A002
        *,
        clock: Clock | None = None,
    ) -> UserAccount:
        """Rebuild a stored account; no validation and no events."""
        return cls(props, id, clock=clock)

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def username(self) -> str:
        return self.props.username.value

    @property
    def email(self) -> str:
        return self.props.email.value

    @property
    def first_name(self) -> str:
        return self.props.first_name.value

    @property
    def last_name(self) -> str:
        return self.props.last_name.value

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def role(self) -> UserRole:
        return self.props.role.value

    @property
    def is_active(self) -> bool:
        return self.props.is_active.is_active()

    @property
    def password_hash(self) -> str:
        return self.props.password.value

    @property
    def created_at(self) -> datetime:
        return self.props.created_at

    @property
    def updated_at(self) -> datetime:
        return self.props.updated_at

    # ------------------------------------------------------------------
    # Behaviour
    # ------------------------------------------------------------------

    def change_password(self, new_hash: str) -> Result[None, DomainError]:
        result = HashedPassword.create(new_hash)
        if result.is_err():
            return err(result.unwrap_err())
        self._update_props(password=result.unwrap(), updated_at=self._clock.now())
        return ok()

    def deactivate(self) -> Result[None, DomainError]:
        if self.props.is_active.is_inactive():
            return err(UserAlreadyInactiveError(str(self.id)))
        self._update_props(is_active=ActiveFlag.inactive(), updated_at=self._clock.now())
        return ok()

    def activate(self) -> Result[None, DomainError]:
        if self.props.is_active.is_active():
            return err(UserAlreadyActiveError(str(self.id)))
        self._update_props(is_active=ActiveFlag.active(), updated_at=self._clock.now())
        return ok()


__all__ = ["CreateUserProps", "UserAccount", "UserAccountProps"]
