"""IAM use case – register a new user account."""
from __future__ import annotations

import asyncio

from univ_admin.application.cqrs import CommandHandler
from univ_admin.kernel.ddd import DomainEventBus, Guard
from univ_admin.kernel.errors import DomainError
from univ_admin.kernel.security import PasswordHasher
from univ_admin.kernel.time import Clock
from univ_admin.kernel.types import Result, err, ok
from univ_admin.modules.iam.application.dtos import CreateUserCommand, CreateUserResponse
from univ_admin.modules.iam.application.errors import UserAlreadyExistsError
from univ_admin.modules.iam.domain import (
    CreateUserProps,
    InvalidPasswordError,
    UserAccount,
    UserRepository,
)
from univ_admin.observability.logging import get_logger

_log = get_logger(__name__)


class CreateUserService(CommandHandler[CreateUserCommand, CreateUserResponse]):
    """Check uniqueness, hash the password, persist, then publish events.

    Events are published only after ``save`` succeeds; with no bus they are
    still drained from the aggregate.  Inside a unit of work pass a
    :class:`~univ_admin.kernel.ddd.DeferredEventBus` and flush it after the
    commit.
    """

    def __init__(
        self,
        users: UserRepository,
        hasher: PasswordHasher,
        event_bus: DomainEventBus | None = None,
        *,
        clock: Clock | None = None,
    ) -> None:
        self._users = users
        self._hasher = hasher
        self._event_bus = event_bus
        self._clock = clock

    async def execute(self, command: CreateUserCommand) -> Result[CreateUserResponse, DomainError]:
        uniqueness = await self._ensure_unique(command)
        if uniqueness.is_err():
            return err(uniqueness.unwrap_err())

        if Guard.is_empty(command.password):
            return err(InvalidPasswordError("must not be empty"))

        password_hash = await asyncio.to_thread(self._hasher.hash, command.password)
        created = UserAccount.create(
            CreateUserProps(
                username=command.username,
                first_name=command.first_name,
                last_name=command.last_name,
                email=command.email,
                password_hash=password_hash,
                role=command.role,
            ),
            clock=self._clock,
        )
        if created.is_err():
            error = created.unwrap_err()
            _log.info("user.create_rejected", code=error.code)
            return err(error)

        user = created.unwrap()
        await self._users.save(user)

        for event in user.pull_events():
            if self._event_bus is not None:
                await self._event_bus.publish(event)

        _log.info("user.created", user_id=str(user.id), role=user.role.value)
        return ok(CreateUserResponse(id=str(user.id), username=user.username))

    async def _ensure_unique(self, command: CreateUserCommand) -> Result[None, UserAlreadyExistsError]:
        username = command.username.strip()
        email = command.email.strip().lower()
        conflict = await self._users.find_conflicting_user(email, username)
        if conflict.is_none():
            return ok()
        existing = conflict.unwrap()
        identifier = username if existing.username == username else email
        _log.info("user.create_conflict", identifier=identifier)
        return err(UserAlreadyExistsError(identifier))


__all__ = ["CreateUserService"]
