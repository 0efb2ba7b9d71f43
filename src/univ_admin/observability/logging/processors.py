"""Observability – correlation-aware structlog processor and logger accessor."""
from __future__ import annotations

from typing import Any

import structlog

from univ_admin.observability.correlation import CorrelationContext


class TraceIdProcessor:
    """Stamp ``trace_id`` (and ``user_id`` once authenticated) on every event.

    Keys the caller bound explicitly are left alone.
    """

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        ctx = CorrelationContext.get()
        if ctx is None:
            return event_dict
        event_dict.setdefault("trace_id", ctx.trace_id)
        if ctx.user_id is not None:
            event_dict.setdefault("user_id", ctx.user_id)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """structlog logger for *name* with *initial_values* already bound."""
    logger = structlog.get_logger(name)
    return logger.bind(**initial_values) if initial_values else logger


__all__ = ["TraceIdProcessor", "get_logger"]
