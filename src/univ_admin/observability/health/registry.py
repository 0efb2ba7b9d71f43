"""Observability – HealthRegistry runs every check and builds the readiness report."""
from __future__ import annotations

import asyncio
import dataclasses
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from univ_admin.observability.health.check import HealthCheck, HealthStatus

DEFAULT_TIMEOUT_SECONDS = 5.0


@dataclass(frozen=True)
class HealthReport:
    results: Mapping[str, HealthStatus] = field(default_factory=dict)

    @property
    def overall(self) -> bool:
        return all(status.healthy for status in self.results.values())

    def to_dict(self) -> dict[str, Any]:
        checks = {
            name: {"healthy": status.healthy, "detail": status.detail, "latencyMs": round(status.latency_ms, 2)}
            for name, status in self.results.items()
        }
        return {"status": "ok" if self.overall else "unavailable", "checks": checks}


class HealthRegistry:
    """Holds the readiness checks of one application.

    Checks run concurrently.  A check that raises or exceeds *timeout*
    seconds counts as unhealthy instead of failing the whole report.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> None:
        self._timeout = timeout
        self._checks: list[HealthCheck] = []

    def register(self, check: HealthCheck) -> None:
        self._checks.append(check)

    async def run_all(self) -> HealthReport:
        statuses = await asyncio.gather(*(self._run_check(check) for check in self._checks))
        return HealthReport({check.name: status for check, status in zip(self._checks, statuses)})

    async def _run_check(self, check: HealthCheck) -> HealthStatus:
        started = time.monotonic()
        try:
            status = await asyncio.wait_for(check.check(), self._timeout)
        except TimeoutError:
            status = HealthStatus.down(f"timed out after {self._timeout}s")
        except Exception as exc:  # noqa: BLE001
            status = HealthStatus.down(f"exception: {exc}")
        return dataclasses.replace(status, latency_ms=(time.monotonic() - started) * 1000)


__all__ = ["DEFAULT_TIMEOUT_SECONDS", "HealthRegistry", "HealthReport"]
