"""Observability – request correlation, structured logging, health checks."""

from univ_admin.observability.correlation import CorrelationContext, RequestContext
from univ_admin.observability.logging import (
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)

__all__ = [
    "CorrelationContext",
    "JsonLoggerFactory",
    "RequestContext",
    "SensitiveFieldsFilter",
    "get_logger",
]
