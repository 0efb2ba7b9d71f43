"""Unit tests for the UserAccount aggregate."""

from __future__ import annotations

from typing import Any

from univ_admin.kernel.types import UniqueEntityID
from univ_admin.modules.iam.domain import (
    CreateUserProps,
    InvalidEmailError,
    InvalidPasswordError,
    InvalidRoleError,
    InvalidUsernameError,
    UserAccount,
    UserAlreadyActiveError,
    UserAlreadyInactiveError,
    UserCreated,
    UserRole,
)
from univ_admin.testing import FAKE_NOW, FakeClock

VALID_HASH = "$2b$10$" + "a" * 53


def _props(**overrides: Any) -> CreateUserProps:
    values: dict[str, Any] = {
        "username": "jdoe",
        "first_name": "ana",
        "last_name": "pérez",
        "email": "J@Example.com ",
        "password_hash": VALID_HASH,
        "role": "STUDENT",
    }
    values.update(overrides)
    return CreateUserProps(**values)


class TestCreate:
    def test_normalises_inputs(self) -> None:
        user = UserAccount.create(_props(), clock=FakeClock()).unwrap()
        assert user.username == "jdoe"
        assert user.email == "j@example.com"
        assert user.first_name == "ANA"
        assert user.last_name == "PÉREZ"
        assert user.full_name == "ANA PÉREZ"
        assert user.role is UserRole.STUDENT
        assert user.is_active
        assert user.password_hash == VALID_HASH
        assert user.created_at == FAKE_NOW
        assert user.updated_at == FAKE_NOW

    def test_records_one_created_event(self) -> None:
        user = UserAccount.create(_props(), clock=FakeClock()).unwrap()
        events = user.pull_events()
        assert len(events) == 1
        event = events[0]
        assert isinstance(event, UserCreated)
        assert event.aggregate_id == user.id
        assert event.occurred_on == FAKE_NOW
        assert event.payload.email == "j@example.com"
        assert event.payload.username == "jdoe"
        assert event.payload.role is UserRole.STUDENT
        assert user.pull_events() == []

    def test_explicit_id_records_no_event(self) -> None:
        uid = UniqueEntityID("user-1")
        user = UserAccount.create(_props(), uid).unwrap()
        assert user.id == uid
        assert user.domain_events == ()

    def test_invalid_role(self) -> None:
        assert isinstance(UserAccount.create(_props(role="SUPERUSER")).unwrap_err(), InvalidRoleError)

    def test_first_error_wins(self) -> None:
        result = UserAccount.create(_props(username="", email="bad", password_hash="short"))
        assert isinstance(result.unwrap_err(), InvalidUsernameError)

    def test_error_order_follows_fields(self) -> None:
        result = UserAccount.create(_props(email="bad", password_hash="short"))
        assert isinstance(result.unwrap_err(), InvalidEmailError)

    def test_to_object(self) -> None:
        user = UserAccount.create(_props(), UniqueEntityID("user-1"), clock=FakeClock()).unwrap()
        plain = user.to_object()
        assert plain["id"] == "user-1"
        assert plain["email"] == "j@example.com"
        assert plain["role"] == "STUDENT"
        assert plain["is_active"] is True
        assert plain["created_at"] == FAKE_NOW.isoformat()


class TestBehaviour:
    def test_deactivate_then_activate(self) -> None:
        clock = FakeClock()
        user = UserAccount.create(_props(), clock=clock).unwrap()
        clock.advance(minutes=5)
        assert user.deactivate().is_ok()
        assert not user.is_active
        assert user.updated_at > user.created_at

        clock.advance(minutes=5)
        assert user.activate().is_ok()
        assert user.is_active

    def test_deactivate_twice(self) -> None:
        user = UserAccount.create(_props()).unwrap()
        user.deactivate()
        error = user.deactivate().unwrap_err()
        assert isinstance(error, UserAlreadyInactiveError)
        assert error.code == "USER.ALREADY_INACTIVE"
        assert error.metadata == {"id": str(user.id)}

    def test_activate_when_active(self) -> None:
        user = UserAccount.create(_props()).unwrap()
        error = user.activate().unwrap_err()
        assert isinstance(error, UserAlreadyActiveError)
        assert error.code == "USER.ALREADY_ACTIVE"

    def test_change_password(self) -> None:
        clock = FakeClock()
        user = UserAccount.create(_props(), clock=clock).unwrap()
        clock.advance(days=1)
        new_hash = "$2b$10$" + "b" * 53
        assert user.change_password(new_hash).is_ok()
        assert user.password_hash == new_hash
        assert user.updated_at == FAKE_NOW.replace(day=2)

    def test_change_password_rejects_short_hash(self) -> None:
        user = UserAccount.create(_props()).unwrap()
        assert isinstance(user.change_password("short").unwrap_err(), InvalidPasswordError)
        assert user.password_hash == VALID_HASH

    def test_identity_equality(self) -> None:
        uid = UniqueEntityID("user-1")
        a = UserAccount.create(_props(), uid).unwrap()
        b = UserAccount.create(_props(username="other"), uid).unwrap()
        assert a == b

    def test_rehydrate_has_no_events(self) -> None:
        original = UserAccount.create(_props()).unwrap()
        copy = UserAccount.rehydrate(original.props, original.id)
        assert copy == original
        assert copy.domain_events == ()
