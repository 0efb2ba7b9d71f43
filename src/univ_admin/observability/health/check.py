"""Observability – the HealthCheck contract and its outcome."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class HealthStatus:
    """Outcome of one check.  ``latency_ms`` is filled in by the registry."""

    healthy: bool
    detail: str | None = None
    latency_ms: float = 0.0

    @classmethod
    def up(cls) -> HealthStatus:
        return cls(healthy=True)

    @classmethod
    def down(cls, detail: str) -> HealthStatus:
        return cls(healthy=False, detail=detail)


class HealthCheck(ABC):
    """A named readiness check.

    Subclasses set :attr:`name` and implement :meth:`check`.  Raising from
    ``check`` is allowed; the registry reports it as a failure.
    """

    name: str = "unnamed"

    @abstractmethod
    async def check(self) -> HealthStatus: ...


__all__ = ["HealthCheck", "HealthStatus"]
