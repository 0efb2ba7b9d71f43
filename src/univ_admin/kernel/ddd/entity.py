"""Entity base class – identity-based equality over immutable props."""

from __future__ import annotations

import dataclasses
from typing import Any, ClassVar, Generic, TypeVar

from univ_admin.kernel.ddd.serialization import is_entity, to_plain
from univ_admin.kernel.errors.exceptions import ArgumentInvalidException
from univ_admin.kernel.types.ids import UniqueEntityID

P = TypeVar("P")


def _is_frozen_dataclass(value: Any) -> bool:
    if not dataclasses.is_dataclass(value) or isinstance(value, type):
        return False
    return bool(type(value).__dataclass_params__.frozen)


class Entity(Generic[P]):
    """Base entity – equality is identity-based (by ``id``).

    *props* must be a frozen dataclass instance; the entity never mutates it
    in place.  When *id* is omitted a fresh random identifier is generated.
    """

    __domain_entity__: ClassVar[bool] = True

    def __init__(self, props: P, id: UniqueEntityID | None = None) -> None:  # noqa: A002
        if not _is_frozen_dataclass(props):
            raise ArgumentInvalidException(
                f"{type(self).__name__} props must be a frozen dataclass instance",
                metadata={"props_type": type(props).__name__},
            )
        self._props = props
        self._id = id if id is not None else UniqueEntityID.generate()

    @property
    def id(self) -> UniqueEntityID:
        return self._id

    @property
    def props(self) -> P:
        return self._props

    @staticmethod
    def is_entity(value: object) -> bool:
        return is_entity(value)

    def equals(self, other: object) -> bool:
        if other is None:
            return False
        if other is self:
            return True
        if not is_entity(other):
            return False
        return self._id == other.id  # type: ignore[attr-defined]

    def to_object(self) -> dict[str, Any]:
        """Plain JSON-safe copy: ``{"id": ..., **props}``."""
        return {"id": str(self._id), **to_plain(self._props)}

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:  # pragma: no cover
        return f"{type(self).__name__}(id={self._id.value!r})"


__all__ = ["Entity"]
