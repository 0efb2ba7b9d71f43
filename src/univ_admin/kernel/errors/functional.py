"""Errors raised by explicit ``unwrap()`` calls on Result / Option."""

from __future__ import annotations

from typing import Any

from univ_admin.kernel.errors.base import ExceptionBase


class UnwrapResultError(ExceptionBase):
    """``unwrap()`` was called on an ``Err`` (or ``unwrap_err()`` on an ``Ok``).

    The payload that was found instead is kept as :attr:`cause`.
    """

    default_code = "UNWRAP_RESULT"

    def __init__(self, message: str | None = None, cause: Any = None) -> None:
        if message is None:
            message = f"Attempted to unwrap a Result.Err value: {cause!r}"
        super().__init__(message, cause=cause)


class UnwrapOptionError(ExceptionBase):
    """``unwrap()`` was called on ``Nothing``."""

    default_code = "UNWRAP_OPTION"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "Attempted to unwrap an Option.Nothing value")


__all__ = ["UnwrapOptionError", "UnwrapResultError"]
