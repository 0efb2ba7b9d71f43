"""Unit tests for CreateUserService."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from univ_admin.kernel.ddd import DomainEvent, InMemoryDomainEventBus
from univ_admin.modules.iam.application import (
    CreateUserCommand,
    CreateUserResponse,
    CreateUserService,
    UserAlreadyExistsError,
)
from univ_admin.modules.iam.domain import (
    InvalidEmailError,
    InvalidPasswordError,
    UserAccount,
    UserCreated,
)
from univ_admin.modules.iam.infrastructure import InMemoryUserRepository
from univ_admin.testing import FakeClock, FakePasswordHasher


def _command(**overrides: Any) -> CreateUserCommand:
    values: dict[str, Any] = {
        "username": "jdoe",
        "email": "J@Example.com",
        "first_name": "Ana",
        "last_name": "Pérez",
        "role": "STUDENT",
        "password": "S3cure!pass",
    }
    values.update(overrides)
    return CreateUserCommand(**values)


class FailingRepository(InMemoryUserRepository):
    async def save(self, aggregate: UserAccount) -> None:
        raise ConnectionError("database unavailable")


class TestCreateUserService:
    def test_creates_user(self) -> None:
        async def run() -> None:
            users = InMemoryUserRepository()
            hasher = FakePasswordHasher()
            service = CreateUserService(users, hasher, clock=FakeClock())
            result = await service.execute(_command())

            response = result.unwrap()
            assert isinstance(response, CreateUserResponse)
            assert response.username == "jdoe"
            assert len(users) == 1
            stored = (await users.find_by_id(response.id)).unwrap()
            assert stored.email == "j@example.com"
            assert hasher.verify("S3cure!pass", stored.password_hash)
            assert hasher.hashed == ["S3cure!pass"]
            assert stored.domain_events == ()

        asyncio.run(run())

    def test_publishes_event_after_save(self) -> None:
        async def run() -> None:
            users = InMemoryUserRepository()
            bus = InMemoryDomainEventBus(record_history=True)
            seen: list[int] = []

            async def on_created(event: DomainEvent[Any]) -> None:
                seen.append(len(users))

            await bus.subscribe(UserCreated, on_created)
            service = CreateUserService(users, FakePasswordHasher(), bus)
            response = (await service.execute(_command())).unwrap()

            assert seen == [1]
            assert len(bus.published) == 1
            event = bus.published[0]
            assert isinstance(event, UserCreated)
            assert str(event.aggregate_id) == response.id

        asyncio.run(run())

    def test_duplicate_username(self) -> None:
        async def run() -> None:
            users = InMemoryUserRepository()
            service = CreateUserService(users, FakePasswordHasher())
            await service.execute(_command())
            error = (await service.execute(_command(email="other@example.com"))).unwrap_err()
            assert isinstance(error, UserAlreadyExistsError)
            assert error.code == "USER.ALREADY_EXISTS"
            assert error.metadata == {"identifier": "jdoe"}
            assert len(users) == 1

        asyncio.run(run())

    def test_duplicate_email_is_case_insensitive(self) -> None:
        async def run() -> None:
            users = InMemoryUserRepository()
            service = CreateUserService(users, FakePasswordHasher())
            await service.execute(_command())
            error = (await service.execute(_command(username="other", email=" j@EXAMPLE.com"))).unwrap_err()
            assert isinstance(error, UserAlreadyExistsError)
            assert error.metadata == {"identifier": "j@example.com"}

        asyncio.run(run())

    def test_conflict_checked_before_hashing(self) -> None:
        async def run() -> None:
            users = InMemoryUserRepository()
            hasher = FakePasswordHasher()
            service = CreateUserService(users, hasher)
            await service.execute(_command())
            await service.execute(_command())
            assert hasher.hashed == ["S3cure!pass"]

        asyncio.run(run())

    def test_blank_password(self) -> None:
        async def run() -> None:
            hasher = FakePasswordHasher()
            service = CreateUserService(InMemoryUserRepository(), hasher)
            error = (await service.execute(_command(password="   "))).unwrap_err()
            assert isinstance(error, InvalidPasswordError)
            assert hasher.hashed == []

        asyncio.run(run())

    def test_invalid_input_saves_nothing(self) -> None:
        async def run() -> None:
            users = InMemoryUserRepository()
            bus = InMemoryDomainEventBus(record_history=True)
            service = CreateUserService(users, FakePasswordHasher(), bus)
            error = (await service.execute(_command(email="not-an-email"))).unwrap_err()
            assert isinstance(error, InvalidEmailError)
            assert len(users) == 0
            assert bus.published == []

        asyncio.run(run())

    def test_save_failure_propagates_without_events(self) -> None:
        async def run() -> None:
            bus = InMemoryDomainEventBus(record_history=True)
            service = CreateUserService(FailingRepository(), FakePasswordHasher(), bus)
            with pytest.raises(ConnectionError):
                await service.execute(_command())
            assert bus.published == []

        asyncio.run(run())
