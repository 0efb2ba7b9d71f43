"""FastAPI adapter – ApiResponseFactory (success / paginated / error envelopes)."""
from __future__ import annotations

import math
from typing import Any

from univ_admin.kernel.ddd.serialization import to_plain
from univ_admin.kernel.time import now_iso
from univ_admin.kernel.types import UniqueEntityID
from univ_admin.observability.correlation import CorrelationContext


class ApiResponseFactory:
    """Build the JSON envelopes every endpoint returns.

    Success::

        {"success": true, "message": ..., "data": ..., "meta": {"timestamp", "traceId"}}

    Error::

        {"success": false, "message": ..., "error": {"code", "message",
         "httpStatus", "details"}, "meta": {...}}

    ``traceId`` defaults to the active request trace id, then to a fresh id.
    """

    @staticmethod
    def success(
        data: Any,
        *,
        message: str | None = None,
        trace_id: str | None = None,
        meta: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        return {
            "success": True,
            "message": message,
            "data": to_plain(data),
            "meta": ApiResponseFactory.build_meta(trace_id, meta),
        }

    @staticmethod
    def paginated(
        data: Any,
        *,
        page: int,
        limit: int,
        total_items: int,
        message: str | None = None,
        trace_id: str | None = None,
        meta: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        total_pages = math.ceil(total_items / limit) if limit > 0 else 0
        pagination = {
            "page": page,
            "limit": limit,
            "totalItems": total_items,
            "totalPages": total_pages,
            "hasNextPage": page < total_pages,
            "hasPreviousPage": page > 1,
        }
        return {
            "success": True,
            "message": message,
            "data": to_plain(data),
            "meta": ApiResponseFactory.build_meta(trace_id, {**(meta or {}), "pagination": pagination}),
        }

    @staticmethod
    def error(
        *,
        code: str,
        message: str,
        http_status: int,
        details: Any = None,
        trace_id: str | None = None,
        meta: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        return {
            "success": False,
            "message": message,
            "error": {
                "code": code,
                "message": message,
                "httpStatus": http_status,
                "details": to_plain(details),
            },
            "meta": ApiResponseFactory.build_meta(trace_id, meta),
        }

    @staticmethod
    def build_meta(trace_id: str | None = None, extra: dict[str, Any] | None = None) -> dict[str, Any]:
        resolved = trace_id or CorrelationContext.trace_id() or str(UniqueEntityID.generate())
        return {"timestamp": now_iso(), "traceId": resolved, **(extra or {})}


__all__ = ["ApiResponseFactory"]
