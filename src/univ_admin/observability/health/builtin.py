"""Observability – stock readiness checks."""
from __future__ import annotations

from collections.abc import Awaitable, Callable

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from univ_admin.observability.health.check import HealthCheck, HealthStatus


class LambdaHealthCheck(HealthCheck):
    """Wraps a coroutine function as a check."""

    def __init__(self, name: str, check_fn: Callable[[], Awaitable[HealthStatus]]) -> None:
        self.name = name
        self._check_fn = check_fn

    async def check(self) -> HealthStatus:
        return await self._check_fn()


class DatabaseHealthCheck(HealthCheck):
    """Opens a session from *session_factory* and runs ``SELECT 1``.

    Failures are reported by exception type only so connection strings never
    reach the health endpoint.
    """

    name = "database"

    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory

    async def check(self) -> HealthStatus:
        try:
            async with self._session_factory() as session:
                await session.execute(text("SELECT 1"))
        except Exception as exc:  # noqa: BLE001
            return HealthStatus.down(type(exc).__name__)
        return HealthStatus.up()


__all__ = ["DatabaseHealthCheck", "LambdaHealthCheck"]
