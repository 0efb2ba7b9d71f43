"""DDD building blocks – public re-export surface."""

from univ_admin.kernel.ddd.aggregate import AggregateRoot
from univ_admin.kernel.ddd.domain_event import DomainEvent
from univ_admin.kernel.ddd.entity import Entity
from univ_admin.kernel.ddd.event_bus import DeferredEventBus, DomainEventBus, Handler, InMemoryDomainEventBus
from univ_admin.kernel.ddd.guard import Guard
from univ_admin.kernel.ddd.repository import Repository
from univ_admin.kernel.ddd.serialization import is_entity, to_plain
from univ_admin.kernel.ddd.value_object import DomainPrimitive, ValueObject

__all__ = [
    "AggregateRoot",
    "DeferredEventBus",
    "DomainEvent",
    "DomainEventBus",
    "DomainPrimitive",
    "Entity",
    "Guard",
    "Handler",
    "InMemoryDomainEventBus",
    "Repository",
    "ValueObject",
    "is_entity",
    "to_plain",
]
