"""Root of the thrown-exception hierarchy."""

from __future__ import annotations

import json
import traceback
from typing import Any


class ExceptionBase(Exception):
    """Root of the exceptions raised for programmer / invariant failures.

    Business outcomes are *not* raised; they travel as
    :class:`~univ_admin.kernel.errors.domain.DomainError` values inside
    ``Err``.  Anything deriving from this class is expected to propagate to a
    top-level boundary that logs it and answers with a generic failure.

    Args:
        message: Human-readable description.
        code: Machine-readable discriminator (defaults to ``default_code``).
        cause: Original value that triggered this error.  When it is an
            exception it is also chained as ``__cause__``.
        metadata: Arbitrary structured context (serialisable dict).
    """

    default_code: str = "EXCEPTION"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        cause: Any = None,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.cause = cause
        self.metadata = metadata
        if isinstance(cause, BaseException):
            self.__cause__ = cause

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def stack(self) -> str | None:
        """Formatted traceback, available once the exception has been raised."""
        if self.__traceback__ is None:
            return None
        return "".join(traceback.format_exception(type(self), self, self.__traceback__))

    def __str__(self) -> str:
        """Return a JSON-serialisable single-line string representation."""
        payload = {k: v for k, v in self.to_dict().items() if k != "stack"}
        return json.dumps(payload, ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the stable ``{message, code, stack, cause, metadata}`` shape."""
        return {
            "message": self.message,
            "code": self.code,
            "stack": self.stack,
            "cause": self.cause,
            "metadata": self.metadata,
        }


__all__ = ["ExceptionBase"]
