"""FastAPI application factory – wiring only."""
from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from univ_admin import __version__
from univ_admin.adapters.fastapi import FastAPIHealthRouter, TraceIdMiddleware, register_exception_handlers
from univ_admin.adapters.sqlalchemy import Base, SqlAlchemySessionFactory
from univ_admin.config import AppSettings, load_settings, warn_on_default_secrets
from univ_admin.kernel.ddd import InMemoryDomainEventBus
from univ_admin.modules.iam.api import router as iam_router
from univ_admin.modules.iam.infrastructure import JwtTokenService, UserModel  # noqa: F401
from univ_admin.observability.health import DatabaseHealthCheck, HealthRegistry
from univ_admin.observability.logging import JsonLoggerFactory, get_logger
from univ_admin.security import BcryptPasswordHasher

_log = get_logger(__name__)


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Build the HTTP application.

    Tables are created on startup; run it under a lifespan-aware server or
    ``with TestClient(app)``.
    """
    settings = settings or load_settings()
    JsonLoggerFactory.configure(settings.log_level)
    warn_on_default_secrets(settings)

    session_factory = SqlAlchemySessionFactory(settings.database_url)
    health = HealthRegistry()
    health.register(DatabaseHealthCheck(session_factory))

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:  # noqa: ARG001
        await session_factory.create_all(Base.metadata)
        _log.info("app.started", version=__version__)
        try:
            yield
        finally:
            await session_factory.dispose()
            _log.info("app.stopped")

    app = FastAPI(title="univ-admin", version=__version__, debug=settings.debug, lifespan=lifespan)
    app.state.settings = settings
    app.state.session_factory = session_factory
    app.state.password_hasher = BcryptPasswordHasher(rounds=settings.bcrypt_rounds)
    app.state.token_service = JwtTokenService.from_settings(settings)
    app.state.event_bus = InMemoryDomainEventBus()

    app.add_middleware(TraceIdMiddleware)
    register_exception_handlers(app)
    app.include_router(FastAPIHealthRouter(health))
    app.include_router(iam_router)
    return app


__all__ = ["create_app"]
