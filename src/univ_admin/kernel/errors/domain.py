"""Domain errors – expected business outcomes returned through ``Err``.

Unlike :class:`~univ_admin.kernel.errors.base.ExceptionBase`, these are plain
values: they are never raised, only returned inside a ``Result``.
"""

from __future__ import annotations

from typing import Any


class DomainError:
    """Base class for expected business-rule failures.

    Args:
        message: Human-readable description.
        code: Stable machine-readable code (defaults to ``default_code``).
        metadata: Extra structured context for logs and API payloads.
    """

    default_code: str = "DOMAIN_ERROR"

    __slots__ = ("code", "message", "metadata")

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.code = code or self.default_code
        self.metadata = metadata

    @property
    def name(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict[str, Any]:
        """JSON-safe representation for logging or API responses."""
        return {
            "name": self.name,
            "code": self.code,
            "message": self.message,
            "metadata": self.metadata,
        }

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (
            self.code == other.code  # type: ignore[attr-defined]
            and self.message == other.message  # type: ignore[attr-defined]
            and self.metadata == other.metadata  # type: ignore[attr-defined]
        )

    def __hash__(self) -> int:
        return hash((type(self), self.code, self.message))

    def __repr__(self) -> str:
        return f"{self.name}(code={self.code!r}, message={self.message!r})"


class ValidationError(DomainError):
    """Input does not satisfy a business validation rule."""

    default_code = "VALIDATION_ERROR"


class UnauthorizedError(DomainError):
    """Credentials are missing or wrong."""

    default_code = "UNAUTHORIZED"


class ForbiddenError(DomainError):
    """The caller is identified but not allowed to proceed."""

    default_code = "FORBIDDEN"


class NotFoundError(DomainError):
    """The requested resource does not exist."""

    default_code = "NOT_FOUND"


class ConflictError(DomainError):
    """The operation conflicts with existing state."""

    default_code = "CONFLICT"


class InvalidIdentifierError(ValidationError):
    """An entity identifier could not be parsed."""

    default_code = "INVALID_IDENTIFIER"

    def __init__(self, raw: str) -> None:
        super().__init__(f"Identifier {raw!r} is not valid", metadata={"id": raw})


__all__ = [
    "ConflictError",
    "DomainError",
    "ForbiddenError",
    "InvalidIdentifierError",
    "NotFoundError",
    "UnauthorizedError",
    "ValidationError",
]
