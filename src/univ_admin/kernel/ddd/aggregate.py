"""AggregateRoot – owns domain events and the props mutation path."""

from __future__ import annotations

import dataclasses
from typing import Any, TypeVar

from univ_admin.kernel.ddd.domain_event import DomainEvent
from univ_admin.kernel.ddd.entity import Entity
from univ_admin.kernel.types.ids import UniqueEntityID

P = TypeVar("P")


class AggregateRoot(Entity[P]):
    """Aggregate root – records domain events raised by its behaviour.

    Events accumulate until the application layer calls :meth:`pull_events`
    after a successful save.
    """

    _events: list[DomainEvent[Any]]

    def __init__(self, props: P, id: UniqueEntityID | None = None) -> None:  # noqa: A002
        super().__init__(props, id)
        self._events = []

    @property
    def domain_events(self) -> tuple[DomainEvent[Any], ...]:
        """Snapshot of pending events; mutating it has no effect."""
        return tuple(self._events)

    def _add_domain_event(self, event: DomainEvent[Any]) -> None:
        self._events.append(event)

    def clear_events(self) -> None:
        self._events.clear()

    def pull_events(self) -> list[DomainEvent[Any]]:
        """Return and clear pending domain events."""
        events = list(self._events)
        self._events.clear()
        return events

    def _update_props(self, **changes: Any) -> None:
        """Replace props with a copy carrying *changes*."""
        self._props = dataclasses.replace(self._props, **changes)  # type: ignore[type-var]


__all__ = ["AggregateRoot"]
