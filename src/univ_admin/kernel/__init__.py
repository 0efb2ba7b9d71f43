"""Kernel – framework-agnostic building blocks shared by every module."""

from univ_admin.kernel.errors import (
    ConflictError,
    DomainError,
    ExceptionBase,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from univ_admin.kernel.types import (
    Err,
    Nothing,
    Ok,
    Option,
    Result,
    Some,
    UniqueEntityID,
)

__all__ = [
    "ConflictError",
    "DomainError",
    "Err",
    "ExceptionBase",
    "ForbiddenError",
    "Nothing",
    "NotFoundError",
    "Ok",
    "Option",
    "Result",
    "Some",
    "UnauthorizedError",
    "UniqueEntityID",
    "ValidationError",
]
