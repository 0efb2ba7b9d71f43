"""FastAPI adapter – response envelopes, error mapping, trace middleware, health router."""
from univ_admin.adapters.fastapi.deps import bearer_token, get_session_factory
from univ_admin.adapters.fastapi.exception_mapper import (
    FastAPIExceptionMapper,
    domain_error_response,
    error_responses,
    register_exception_handlers,
    status_for,
)
from univ_admin.adapters.fastapi.middleware import TraceIdMiddleware
from univ_admin.adapters.fastapi.responses import ApiResponseFactory
from univ_admin.adapters.fastapi.routers import FastAPIHealthRouter

__all__ = [
    "ApiResponseFactory",
    "FastAPIExceptionMapper",
    "FastAPIHealthRouter",
    "TraceIdMiddleware",
    "bearer_token",
    "domain_error_response",
    "error_responses",
    "get_session_factory",
    "register_exception_handlers",
    "status_for",
]
