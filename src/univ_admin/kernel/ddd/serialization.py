"""Plain-data serialisation of domain objects.

A closed set of variants is supported: primitives, enums, dates, identifiers,
value objects, entities, mappings, sequences and dataclasses.  Anything else
is a programming error.
"""

from __future__ import annotations

import dataclasses
import uuid
from collections.abc import Mapping
from datetime import date, datetime
from enum import Enum
from typing import Any

from univ_admin.kernel.errors.exceptions import ArgumentInvalidException
from univ_admin.kernel.types.ids import UniqueEntityID

ENTITY_MARKER = "__domain_entity__"


def is_entity(value: Any) -> bool:
    """Capability check for entities, independent of the class hierarchy."""
    return getattr(type(value), ENTITY_MARKER, False) is True


def to_plain(value: Any) -> Any:
    """Convert *value* into JSON-safe builtins."""
    from univ_admin.kernel.ddd.value_object import ValueObject

    if isinstance(value, Enum):
        return to_plain(value.value)
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (UniqueEntityID, uuid.UUID)):
        return str(value)
    if isinstance(value, ValueObject) or is_entity(value):
        return value.to_object()
    if isinstance(value, Mapping):
        return {str(key): to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_plain(item) for item in value]
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_plain(getattr(value, f.name)) for f in dataclasses.fields(value)}
    raise ArgumentInvalidException(
        f"Cannot serialise value of type {type(value).__name__}",
        metadata={"type": type(value).__name__},
    )


__all__ = ["ENTITY_MARKER", "is_entity", "to_plain"]
