"""ValueObject base classes."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Generic, Self, TypeVar

T = TypeVar("T")


def _unpack(value: Any) -> Any:
    if isinstance(value, ValueObject):
        return value.unpack()
    if isinstance(value, (list, tuple)):
        return tuple(_unpack(item) for item in value)
    if isinstance(value, Mapping):
        return MappingProxyType({key: _unpack(item) for key, item in value.items()})
    return value


@dataclasses.dataclass(frozen=True)
class ValueObject:
    """Base class for value objects.

    Subclasses must be ``@dataclass(frozen=True)``.  Equality and hashing are
    structural (dataclass default for frozen); identity never matters.

    Expected validation belongs in a ``create(...)`` classmethod returning a
    ``Result``; the constructor is the trusted path used once the input is
    known to be valid (factories, persistence mappers).  :meth:`_validate`
    runs on every construction and may only raise
    :class:`~univ_admin.kernel.errors.ExceptionBase` subclasses for
    programmer errors.
    """

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to assert invariants that callers must never break."""

    def unpack(self) -> Any:
        """Return the plain value with every nested value object unwrapped.

        Composites come back as read-only mappings and sequences as tuples;
        datetimes are left untouched.
        """
        return MappingProxyType({f.name: _unpack(getattr(self, f.name)) for f in dataclasses.fields(self)})

    def equals(self, other: object) -> bool:
        if other is None:
            return False
        if other is self:
            return True
        return self == other

    def to_object(self) -> Any:
        """JSON-safe form of :meth:`unpack` (datetimes become ISO-8601)."""
        from univ_admin.kernel.ddd.serialization import to_plain

        return to_plain(self.unpack())

    def copy_with(self, **changes: Any) -> Self:
        """Return a new instance with given fields replaced."""
        return dataclasses.replace(self, **changes)


@dataclasses.dataclass(frozen=True)
class DomainPrimitive(ValueObject, Generic[T]):
    """Value object wrapping a single primitive ``value``."""

    value: T

    def unpack(self) -> T:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


__all__ = ["DomainPrimitive", "ValueObject"]
