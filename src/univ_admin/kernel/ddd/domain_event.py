"""Domain events raised by aggregates."""

from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any, ClassVar, Generic, TypeVar
from uuid import uuid4

from univ_admin.kernel.ddd.serialization import to_plain
from univ_admin.kernel.errors.exceptions import ArgumentNotProvidedException
from univ_admin.kernel.time.clock import utc_now
from univ_admin.kernel.types.ids import UniqueEntityID

P = TypeVar("P")


@dataclasses.dataclass(frozen=True)
class DomainEvent(Generic[P]):
    """Base class for domain events.

    Concrete subclasses set a dot-namespaced ``event_name``.

    Example::

        @dataclasses.dataclass(frozen=True)
        class CourseOpened(DomainEvent[CourseOpenedPayload]):
            event_name: ClassVar[str] = "Academic.CourseOpened"
    """

    event_name: ClassVar[str] = ""

    aggregate_id: UniqueEntityID
    payload: P
    event_id: str = dataclasses.field(default_factory=lambda: str(uuid4()))
    occurred_on: datetime = dataclasses.field(default_factory=utc_now)

    def __post_init__(self) -> None:
        if not type(self).event_name:
            raise ArgumentNotProvidedException(
                f"{type(self).__name__} must define event_name",
            )

    def to_dict(self) -> dict[str, Any]:
        return {
            "eventId": self.event_id,
            "aggregateId": str(self.aggregate_id),
            "eventName": self.event_name,
            "occurredOn": self.occurred_on.isoformat(),
            "payload": to_plain(self.payload),
        }


__all__ = ["DomainEvent"]
