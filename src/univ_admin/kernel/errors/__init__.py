"""Kernel error taxonomy – public re-export surface.

Two channels::

    ExceptionBase                       (base.py)  raised
    ├── ArgumentInvalidException        (exceptions.py)
    ├── ArgumentNotProvidedException
    ├── ArgumentOutOfRangeException
    ├── NotFoundException
    ├── DomainInvariantViolationException
    ├── ForbiddenOperationException
    ├── UnwrapResultError               (functional.py)
    └── UnwrapOptionError

    DomainError                         (domain.py)    returned in Err
    ├── ValidationError
    │   └── InvalidIdentifierError
    ├── UnauthorizedError
    ├── ForbiddenError
    ├── NotFoundError
    └── ConflictError
"""

from univ_admin.kernel.errors.base import ExceptionBase
from univ_admin.kernel.errors.domain import (
    ConflictError,
    DomainError,
    ForbiddenError,
    InvalidIdentifierError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from univ_admin.kernel.errors.exceptions import (
    ArgumentInvalidException,
    ArgumentNotProvidedException,
    ArgumentOutOfRangeException,
    DomainInvariantViolationException,
    ForbiddenOperationException,
    NotFoundException,
)
from univ_admin.kernel.errors.functional import UnwrapOptionError, UnwrapResultError

__all__ = [
    "ArgumentInvalidException",
    "ArgumentNotProvidedException",
    "ArgumentOutOfRangeException",
    "ConflictError",
    "DomainError",
    "DomainInvariantViolationException",
    "ExceptionBase",
    "ForbiddenError",
    "ForbiddenOperationException",
    "InvalidIdentifierError",
    "NotFoundError",
    "NotFoundException",
    "UnauthorizedError",
    "UnwrapOptionError",
    "UnwrapResultError",
    "ValidationError",
]
