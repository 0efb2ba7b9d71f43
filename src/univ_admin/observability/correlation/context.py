"""Observability – per-request correlation state held in a ContextVar."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from contextvars import ContextVar
from uuid import uuid4

REQUEST_ID_HEADER = "x-request-id"
TRACEPARENT_HEADER = "traceparent"


@dataclasses.dataclass(frozen=True)
class RequestContext:
    """Who and which request the current coroutine is working for."""
    trace_id: str
    user_id: str | None = None

    @classmethod
    def new(cls, user_id: str | None = None) -> RequestContext:
        return cls(trace_id=str(uuid4()), user_id=user_id)

    def with_user(self, user_id: str) -> RequestContext:
        return dataclasses.replace(self, user_id=user_id)


def trace_id_from_headers(headers: Mapping[str, str]) -> str | None:
    """``X-Request-ID`` if sent, else the trace-id field of a W3C ``traceparent``.

    Header names are matched case-insensitively.
    """
    lowered = {name.lower(): value for name, value in headers.items()}
    request_id = lowered.get(REQUEST_ID_HEADER, "").strip()
    if request_id:
        return request_id
    # version-traceid-parentid-flags
    fields = lowered.get(TRACEPARENT_HEADER, "").split("-")
    return fields[1] if len(fields) >= 2 and fields[1] else None


_current: ContextVar[RequestContext | None] = ContextVar("univ_admin_request_context", default=None)


class CorrelationContext:
    """Static accessors for the ambient :class:`RequestContext`."""

    @staticmethod
    def set(ctx: RequestContext) -> None:
        _current.set(ctx)

    @staticmethod
    def get() -> RequestContext | None:
        return _current.get()

    @staticmethod
    def get_or_new() -> RequestContext:
        ctx = _current.get()
        if ctx is None:
            ctx = RequestContext.new()
            _current.set(ctx)
        return ctx

    @staticmethod
    def trace_id() -> str | None:
        ctx = _current.get()
        return None if ctx is None else ctx.trace_id

    @staticmethod
    def clear() -> None:
        _current.set(None)

    @staticmethod
    def set_from_headers(headers: Mapping[str, str]) -> RequestContext:
        """Start a context for an inbound request, generating a trace id if none was sent."""
        ctx = RequestContext(trace_id=trace_id_from_headers(headers) or str(uuid4()))
        _current.set(ctx)
        return ctx


__all__ = ["CorrelationContext", "RequestContext", "trace_id_from_headers"]
