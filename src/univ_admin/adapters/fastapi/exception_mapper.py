"""FastAPI adapter – DomainError → HTTP status mapping and exception handlers."""
from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from univ_admin.adapters.fastapi.responses import ApiResponseFactory
from univ_admin.kernel.errors import (
    ArgumentInvalidException,
    ArgumentNotProvidedException,
    ConflictError,
    DomainError,
    ExceptionBase,
    ForbiddenError,
    NotFoundError,
    NotFoundException,
    UnauthorizedError,
    ValidationError,
)
from univ_admin.observability.logging import get_logger

_log = get_logger(__name__)

# ORDER MATTERS: more-specific subtypes first
_DOMAIN_STATUS: tuple[tuple[type[DomainError], int], ...] = (
    (ValidationError, 400),
    (UnauthorizedError, 401),
    (ForbiddenError, 403),
    (NotFoundError, 404),
    (ConflictError, 409),
    (DomainError, 422),
)

_EXCEPTION_STATUS: tuple[tuple[type[ExceptionBase], int], ...] = (
    (ArgumentInvalidException, 400),
    (ArgumentNotProvidedException, 400),
    (NotFoundException, 404),
)

INTERNAL_ERROR_CODE = "INTERNAL_ERROR"
INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"


def status_for(error: DomainError) -> int:
    """HTTP status for a returned domain error."""
    for error_type, status in _DOMAIN_STATUS:
        if isinstance(error, error_type):
            return status
    return 422


def domain_error_response(error: DomainError, *, status: int | None = None) -> JSONResponse:
    """Render *error* as the standard error envelope."""
    http_status = status if status is not None else status_for(error)
    body = ApiResponseFactory.error(
        code=error.code,
        message=error.message,
        http_status=http_status,
        details=error.metadata,
    )
    return JSONResponse(status_code=http_status, content=body)


def _internal_error() -> JSONResponse:
    body = ApiResponseFactory.error(
        code=INTERNAL_ERROR_CODE,
        message=INTERNAL_ERROR_MESSAGE,
        http_status=500,
    )
    return JSONResponse(status_code=500, content=body)


class FastAPIExceptionMapper:
    """Register exception handlers for thrown errors on a FastAPI app.

    Mappings
    --------
    ``ArgumentInvalidException``      → 400
    ``ArgumentNotProvidedException``  → 400
    ``NotFoundException``             → 404
    ``RequestValidationError``        → 400 ``VALIDATION_ERROR``
    any other ``ExceptionBase``       → 500 ``INTERNAL_ERROR``
    any other ``Exception``           → 500 ``INTERNAL_ERROR``

    Messages of unexpected errors never reach the client; they are logged.
    """

    def register(self, app: FastAPI) -> None:
        app.add_exception_handler(RequestValidationError, self._handle_request_validation)  # type: ignore[arg-type]
        app.add_exception_handler(ExceptionBase, self._handle_exception_base)  # type: ignore[arg-type]
        app.add_exception_handler(Exception, self._handle_unexpected)

    async def _handle_request_validation(
        self,
        request: Request,  # noqa: ARG002
        exc: RequestValidationError,
    ) -> JSONResponse:
        details = [
            {"loc": [str(part) for part in err.get("loc", ())], "message": err.get("msg", "")}
            for err in exc.errors()
        ]
        body = ApiResponseFactory.error(
            code=ValidationError.default_code,
            message="Request validation failed",
            http_status=400,
            details=details,
        )
        return JSONResponse(status_code=400, content=body)

    async def _handle_exception_base(self, request: Request, exc: ExceptionBase) -> JSONResponse:
        for exc_type, status in _EXCEPTION_STATUS:
            if isinstance(exc, exc_type):
                _log.warning(
                    "http.exception",
                    path=request.url.path,
                    code=exc.code,
                    status=status,
                )
                body = ApiResponseFactory.error(
                    code=exc.code,
                    message=exc.message,
                    http_status=status,
                    details=exc.metadata,
                )
                return JSONResponse(status_code=status, content=body)
        return await self._handle_unexpected(request, exc)

    async def _handle_unexpected(self, request: Request, exc: Exception) -> JSONResponse:
        _log.error(
            "http.unhandled_exception",
            path=request.url.path,
            error_type=type(exc).__name__,
            exc_info=exc,
        )
        return _internal_error()


def register_exception_handlers(app: FastAPI) -> None:
    FastAPIExceptionMapper().register(app)


def error_responses(*codes: int) -> dict[int | str, dict[str, Any]]:
    """Build an OpenAPI ``responses`` dict describing the error envelope.

    Usage::

        @router.post("/users", responses=error_responses(400, 409))
        async def create_user(...): ...
    """
    result: dict[int | str, dict[str, Any]] = {}
    for code in codes:
        result[code] = {
            "description": _STATUS_DESCRIPTIONS.get(code, "Error"),
            "content": {"application/json": {"schema": _ERROR_SCHEMA}},
        }
    return result


_STATUS_DESCRIPTIONS: dict[int, str] = {
    400: "Validation error",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Resource not found",
    409: "Conflict",
    422: "Domain rule violated",
    500: "Internal server error",
    503: "Service unavailable",
}

_ERROR_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "success": {"type": "boolean", "enum": [False]},
        "message": {"type": "string"},
        "error": {
            "type": "object",
            "properties": {
                "code": {"type": "string"},
                "message": {"type": "string"},
                "httpStatus": {"type": "integer"},
                "details": {},
            },
            "required": ["code", "message", "httpStatus"],
        },
        "meta": {
            "type": "object",
            "properties": {"timestamp": {"type": "string"}, "traceId": {"type": "string"}},
        },
    },
    "required": ["success", "message", "error", "meta"],
}


__all__ = [
    "FastAPIExceptionMapper",
    "INTERNAL_ERROR_CODE",
    "domain_error_response",
    "error_responses",
    "register_exception_handlers",
    "status_for",
]
