"""FastAPI adapter – TraceIdMiddleware (pure ASGI)."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from starlette.datastructures import Headers, MutableHeaders

from univ_admin.observability.correlation import CorrelationContext

if TYPE_CHECKING:
    from starlette.types import ASGIApp, Receive, Scope, Send

TRACE_HEADER = "X-Request-ID"


class TraceIdMiddleware:
    """Bind a :class:`RequestContext` for each request and echo its trace id.

    The id comes from ``X-Request-ID``, then a W3C ``traceparent``, and is
    generated otherwise.  The context is cleared once the response is sent.
    """

    def __init__(self, app: ASGIApp, header_name: str = TRACE_HEADER) -> None:
        self.app = app
        self._header_name = header_name

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] not in ("http", "websocket"):
            await self.app(scope, receive, send)
            return

        ctx = CorrelationContext.set_from_headers(Headers(scope=scope))

        async def send_with_trace_id(message: Any) -> None:
            if message["type"] == "http.response.start":
                MutableHeaders(scope=message)[self._header_name] = ctx.trace_id
            await send(message)

        try:
            await self.app(scope, receive, send_with_trace_id)
        finally:
            CorrelationContext.clear()


__all__ = ["TRACE_HEADER", "TraceIdMiddleware"]
