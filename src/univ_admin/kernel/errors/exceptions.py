"""Concrete thrown exceptions – malformed arguments and broken invariants."""

from __future__ import annotations

from univ_admin.kernel.errors.base import ExceptionBase


class ArgumentInvalidException(ExceptionBase):
    """An argument reached a trusted code path in an invalid shape."""

    default_code = "ARGUMENT_INVALID"


class ArgumentNotProvidedException(ExceptionBase):
    """A required argument was missing or empty."""

    default_code = "ARGUMENT_NOT_PROVIDED"


class ArgumentOutOfRangeException(ExceptionBase):
    """A numeric or length argument fell outside its allowed range."""

    default_code = "ARGUMENT_OUT_OF_RANGE"


class NotFoundException(ExceptionBase):
    """A resource assumed to exist could not be located."""

    default_code = "NOT_FOUND"


class DomainInvariantViolationException(ExceptionBase):
    """A domain invariant was violated – indicates a programming error."""

    default_code = "DOMAIN_INVARIANT_VIOLATION"


class ForbiddenOperationException(ExceptionBase):
    """An operation was attempted that the domain never permits."""

    default_code = "FORBIDDEN_OPERATION"


__all__ = [
    "ArgumentInvalidException",
    "ArgumentNotProvidedException",
    "ArgumentOutOfRangeException",
    "DomainInvariantViolationException",
    "ForbiddenOperationException",
    "NotFoundException",
]
