"""Observability – structlog setup, processors and redaction."""
from univ_admin.observability.logging.filters import SensitiveFieldsFilter
from univ_admin.observability.logging.factory import JsonLoggerFactory
from univ_admin.observability.logging.processors import TraceIdProcessor, get_logger

__all__ = [
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "TraceIdProcessor",
    "get_logger",
]
