"""End-to-end HTTP tests for the application factory."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import pytest
import structlog
from fastapi.testclient import TestClient

from univ_admin.adapters.sqlalchemy import SqlAlchemyUnitOfWork
from univ_admin.app import create_app
from univ_admin.config import AppSettings
from univ_admin.kernel.ddd import DomainEvent, InMemoryDomainEventBus
from univ_admin.modules.iam.domain import UserCreated

SETTINGS = AppSettings(
    database_url="sqlite+aiosqlite:///:memory:",
    jwt_secret="app-test-access-secret-0123456789abcdef",
    jwt_refresh_secret="app-test-refresh-secret-0123456789abcde",
    bcrypt_rounds=4,
    log_level="WARNING",
)


@contextmanager
def _running_app(*, record_history: bool = True, **client_options: Any) -> Iterator[TestClient]:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        app = create_app(SETTINGS)
        if record_history:
            app.state.event_bus = InMemoryDomainEventBus(record_history=True)
        with TestClient(app, **client_options) as test_client:
            yield test_client
    finally:
        structlog.reset_defaults()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


@pytest.fixture
def client() -> Iterator[TestClient]:
    with _running_app() as test_client:
        yield test_client


def _registration(**overrides: Any) -> dict[str, Any]:
    body: dict[str, Any] = {
        "username": "jdoe",
        "email": "JDoe@Uni.edu",
        "firstName": "John",
        "lastName": "Doe",
        "role": "STUDENT",
        "password": "S3cure!pass",
    }
    body.update(overrides)
    return body


def _login(client: TestClient, identifier: str = "jdoe", password: str = "S3cure!pass") -> Any:
    return client.post("/iam/auth/login", json={"identifier": identifier, "password": password})


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


class TestHealth:
    def test_live(self, client: TestClient) -> None:
        response = client.get("/health/live")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_ready_pings_database(self, client: TestClient) -> None:
        response = client.get("/health/ready")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert body["checks"]["database"]["healthy"] is True


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------


class TestRegisterUser:
    def test_created(self, client: TestClient) -> None:
        response = client.post("/iam/users", json=_registration(), headers={"X-Request-ID": "reg-1"})
        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "User created"
        assert body["data"]["username"] == "jdoe"
        assert body["data"]["id"]
        assert body["meta"]["traceId"] == "reg-1"
        assert response.headers["x-request-id"] == "reg-1"

    def test_event_published(self, client: TestClient) -> None:
        user_id = client.post("/iam/users", json=_registration()).json()["data"]["id"]
        published = client.app.state.event_bus.published  # type: ignore[attr-defined]
        assert len(published) == 1
        assert isinstance(published[0], UserCreated)
        assert str(published[0].aggregate_id) == user_id
        assert published[0].payload.email == "jdoe@uni.edu"

    def test_handlers_run_after_commit(self, client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[str] = []
        commit = SqlAlchemyUnitOfWork.commit

        async def recording_commit(self: SqlAlchemyUnitOfWork) -> None:
            await commit(self)
            calls.append("commit")

        async def on_created(event: DomainEvent[Any]) -> None:
            calls.append("handler")

        monkeypatch.setattr(SqlAlchemyUnitOfWork, "commit", recording_commit)
        asyncio.run(client.app.state.event_bus.subscribe(UserCreated, on_created))  # type: ignore[attr-defined]
        assert client.post("/iam/users", json=_registration()).status_code == 201
        assert calls == ["commit", "handler"]

    def test_failed_commit_publishes_nothing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        async def failing_commit(self: SqlAlchemyUnitOfWork) -> None:
            raise ConnectionError("commit lost")

        monkeypatch.setattr(SqlAlchemyUnitOfWork, "commit", failing_commit)
        with _running_app(raise_server_exceptions=False) as client:
            response = client.post("/iam/users", json=_registration())
            assert response.status_code == 500
            assert client.app.state.event_bus.published == []  # type: ignore[attr-defined]

    def test_default_bus_keeps_no_history(self) -> None:
        with _running_app(record_history=False) as client:
            assert client.post("/iam/users", json=_registration()).status_code == 201
            assert client.app.state.event_bus.published == []  # type: ignore[attr-defined]

    def test_snake_case_names_accepted(self, client: TestClient) -> None:
        body = _registration()
        body["first_name"] = body.pop("firstName")
        body["last_name"] = body.pop("lastName")
        assert client.post("/iam/users", json=body).status_code == 201

    def test_duplicate_username(self, client: TestClient) -> None:
        client.post("/iam/users", json=_registration())
        response = client.post("/iam/users", json=_registration(email="other@uni.edu"))
        assert response.status_code == 409
        error = response.json()["error"]
        assert error["code"] == "USER.ALREADY_EXISTS"
        assert error["details"] == {"identifier": "jdoe"}

    def test_duplicate_email(self, client: TestClient) -> None:
        client.post("/iam/users", json=_registration())
        response = client.post("/iam/users", json=_registration(username="other"))
        assert response.status_code == 409
        assert response.json()["error"]["details"] == {"identifier": "jdoe@uni.edu"}

    @pytest.mark.parametrize(
        ("override", "code"),
        [
            ({"email": "not-an-email"}, "USER.INVALID_EMAIL"),
            ({"role": "SUPERUSER"}, "USER.INVALID_ROLE"),
            ({"firstName": "J"}, "USER.INVALID_NAME"),
            ({"username": "   "}, "USER.INVALID_USERNAME"),
            ({"password": "   "}, "USER.INVALID_PASSWORD"),
        ],
    )
    def test_domain_validation(self, client: TestClient, override: dict[str, str], code: str) -> None:
        response = client.post("/iam/users", json=_registration(**override))
        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == code
        assert body["error"]["httpStatus"] == 400

    def test_missing_field(self, client: TestClient) -> None:
        body = _registration()
        del body["email"]
        response = client.post("/iam/users", json=body)
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_password_never_echoed(self, client: TestClient) -> None:
        response = client.post("/iam/users", json=_registration(email="bad"))
        assert "S3cure!pass" not in response.text


# ---------------------------------------------------------------------------
# Login / token introspection
# ---------------------------------------------------------------------------


class TestLogin:
    def test_login_with_username(self, client: TestClient) -> None:
        user_id = client.post("/iam/users", json=_registration()).json()["data"]["id"]
        response = _login(client)
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Login successful"
        tokens = body["data"]["tokens"]
        assert set(tokens) == {"accessToken", "refreshToken", "expiresIn"}
        assert isinstance(tokens["expiresIn"], int)
        assert body["data"]["user"] == {
            "id": user_id,
            "username": "jdoe",
            "email": "jdoe@uni.edu",
            "fullName": "JOHN DOE",
            "role": "STUDENT",
        }

    def test_login_with_email(self, client: TestClient) -> None:
        client.post("/iam/users", json=_registration())
        assert _login(client, identifier="JDOE@uni.edu").status_code == 200

    def test_wrong_password(self, client: TestClient) -> None:
        client.post("/iam/users", json=_registration())
        response = _login(client, password="wrong")
        assert response.status_code == 401
        assert response.json()["error"]["code"] == "AUTH.INVALID_CREDENTIALS"

    def test_unknown_user(self, client: TestClient) -> None:
        response = _login(client, identifier="ghost")
        assert response.status_code == 401
        assert response.json()["error"]["code"] == "AUTH.INVALID_CREDENTIALS"

    def test_empty_body_fields(self, client: TestClient) -> None:
        response = _login(client, identifier="", password="")
        assert response.status_code == 400


class TestMe:
    def test_with_access_token(self, client: TestClient) -> None:
        user_id = client.post("/iam/users", json=_registration(role="ADMIN")).json()["data"]["id"]
        access = _login(client).json()["data"]["tokens"]["accessToken"]
        response = client.get("/iam/auth/me", headers={"Authorization": f"Bearer {access}"})
        assert response.status_code == 200
        assert response.json()["data"] == {"userId": user_id, "username": "jdoe", "role": "ADMIN"}

    def test_without_token(self, client: TestClient) -> None:
        response = client.get("/iam/auth/me")
        assert response.status_code == 401
        assert response.json()["error"]["code"] == "AUTH.INVALID_TOKEN"

    def test_refresh_token_rejected(self, client: TestClient) -> None:
        client.post("/iam/users", json=_registration())
        refresh = _login(client).json()["data"]["tokens"]["refreshToken"]
        response = client.get("/iam/auth/me", headers={"Authorization": f"Bearer {refresh}"})
        assert response.status_code == 401

    def test_garbage_token(self, client: TestClient) -> None:
        response = client.get("/iam/auth/me", headers={"Authorization": "Bearer nope"})
        assert response.status_code == 401
