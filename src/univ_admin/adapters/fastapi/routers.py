"""FastAPI adapter – operational health endpoints."""
from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from univ_admin.observability.health import HealthRegistry


def FastAPIHealthRouter(  # noqa: N802
    registry: HealthRegistry,
    path: str = "/health",
    tags: list[str] | None = None,
) -> APIRouter:
    """Router with ``{path}/live`` and ``{path}/ready``.

    Liveness never touches dependencies.  Readiness runs every check in
    *registry* and answers 503 when any of them fails.
    """
    router = APIRouter(prefix=path, tags=tags or ["ops"])

    @router.get("/live")
    async def liveness() -> dict[str, str]:
        return {"status": "ok"}

    @router.get("/ready")
    async def readiness() -> JSONResponse:
        report = await registry.run_all()
        status_code = 200 if report.overall else 503
        return JSONResponse(report.to_dict(), status_code=status_code)

    return router


__all__ = ["FastAPIHealthRouter"]
