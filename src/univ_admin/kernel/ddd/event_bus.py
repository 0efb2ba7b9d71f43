"""DomainEventBus port – in-process event pub/sub."""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Awaitable, Callable, Protocol

import structlog

from univ_admin.kernel.ddd.domain_event import DomainEvent

#: Type alias for an async event handler function.
Handler = Callable[[DomainEvent[Any]], Awaitable[None]]

_log = structlog.get_logger(__name__)


def _name_of(event_type: str | type[DomainEvent[Any]]) -> str:
    return event_type if isinstance(event_type, str) else event_type.event_name


class DomainEventBus(Protocol):
    """Port: in-process domain event bus.

    Application services publish events pulled from aggregates; handlers
    (registered by bootstrap or test setup) react to them.

    Example::

        bus = InMemoryDomainEventBus()
        await bus.subscribe(UserCreated, send_welcome_email)
        await bus.publish(event)
    """

    async def publish(self, event: DomainEvent[Any]) -> None:
        """Broadcast *event* to all handlers registered for its name."""
        ...

    async def subscribe(
        self,
        event_type: str | type[DomainEvent[Any]],
        handler: Handler,
    ) -> None:
        """Register *handler* for *event_type* (a class or an event name)."""
        ...


class InMemoryDomainEventBus:
    """Event bus that awaits handlers sequentially, in registration order.

    With ``record_history=True`` every published event is also kept in
    :attr:`published`; leave it off outside tests.
    """

    def __init__(self, *, record_history: bool = False) -> None:
        self._handlers: dict[str, list[Handler]] = defaultdict(list)
        self._record_history = record_history
        self.published: list[DomainEvent[Any]] = []

    async def subscribe(
        self,
        event_type: str | type[DomainEvent[Any]],
        handler: Handler,
    ) -> None:
        self._handlers[_name_of(event_type)].append(handler)

    async def publish(self, event: DomainEvent[Any]) -> None:
        if self._record_history:
            self.published.append(event)
        handlers = list(self._handlers.get(event.event_name, ()))
        _log.debug(
            "domain_event.dispatch",
            event_name=event.event_name,
            event_id=event.event_id,
            aggregate_id=str(event.aggregate_id),
            handlers=len(handlers),
        )
        for handler in handlers:
            await handler(event)

    async def publish_all(self, events: list[DomainEvent[Any]]) -> None:
        for event in events:
            await self.publish(event)


class DeferredEventBus:
    """Holds published events until :meth:`flush` hands them to *target*.

    Wrap the real bus around a unit of work and flush once the block has
    committed, so handlers never see an aggregate whose write was rolled
    back::

        outbox = DeferredEventBus(bus)
        async with uow:
            await service(outbox).execute(command)
        await outbox.flush()
    """

    def __init__(self, target: DomainEventBus | None) -> None:
        self._target = target
        self._pending: list[DomainEvent[Any]] = []

    @property
    def pending(self) -> tuple[DomainEvent[Any], ...]:
        return tuple(self._pending)

    async def subscribe(
        self,
        event_type: str | type[DomainEvent[Any]],
        handler: Handler,
    ) -> None:
        if self._target is not None:
            await self._target.subscribe(event_type, handler)

    async def publish(self, event: DomainEvent[Any]) -> None:
        self._pending.append(event)

    async def flush(self) -> None:
        events, self._pending = self._pending, []
        if self._target is None:
            return
        for event in events:
            await self._target.publish(event)


__all__ = ["DeferredEventBus", "DomainEventBus", "Handler", "InMemoryDomainEventBus"]
