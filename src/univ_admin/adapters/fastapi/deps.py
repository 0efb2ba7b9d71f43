"""FastAPI adapter – reusable dependency functions."""
from __future__ import annotations

from fastapi import Request

from univ_admin.adapters.sqlalchemy import SqlAlchemySessionFactory
from univ_admin.kernel.errors import ExceptionBase
from univ_admin.kernel.types import NOTHING, Option, Some

_BEARER_PREFIX = "bearer "


def get_session_factory(request: Request) -> SqlAlchemySessionFactory:
    factory = getattr(request.app.state, "session_factory", None)
    if factory is None:
        raise ExceptionBase("Application has no session factory configured", code="APP_NOT_CONFIGURED")
    return factory


def bearer_token(request: Request) -> Option[str]:
    """The Bearer token from ``Authorization``, if any."""
    header = request.headers.get("authorization", "").strip()
    if not header.lower().startswith(_BEARER_PREFIX):
        return NOTHING
    token = header[len(_BEARER_PREFIX):].strip()
    return Some(token) if token else NOTHING


__all__ = ["bearer_token", "get_session_factory"]
