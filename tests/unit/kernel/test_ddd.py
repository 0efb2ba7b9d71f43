"""Unit tests for kernel DDD building blocks."""

from __future__ import annotations

import asyncio
import dataclasses
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any, ClassVar

import pytest

from univ_admin.kernel.ddd import (
    AggregateRoot,
    DeferredEventBus,
    DomainEvent,
    DomainPrimitive,
    Entity,
    InMemoryDomainEventBus,
    ValueObject,
    is_entity,
    to_plain,
)
from univ_admin.kernel.ddd.unit_of_work import UnitOfWork
from univ_admin.kernel.errors import ArgumentInvalidException, ArgumentNotProvidedException
from univ_admin.kernel.types import UniqueEntityID

# ---------------------------------------------------------------------------
# Fixtures – minimal domain model
# ---------------------------------------------------------------------------


class Level(StrEnum):
    LOW = "low"
    HIGH = "high"


@dataclasses.dataclass(frozen=True)
class Code(DomainPrimitive[str]):
    def _validate(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ArgumentInvalidException("code must be a non-empty string")


@dataclasses.dataclass(frozen=True)
class Address(ValueObject):
    street: str
    city: str
    tags: tuple[str, ...] = ()


@dataclasses.dataclass(frozen=True)
class Location(ValueObject):
    code: Code
    address: Address
    level: Level = Level.LOW


@dataclasses.dataclass(frozen=True)
class CourseProps:
    code: Code
    title: str
    level: Level
    starts_on: datetime


@dataclasses.dataclass(frozen=True)
class CourseRenamedPayload:
    title: str


@dataclasses.dataclass(frozen=True)
class CourseRenamed(DomainEvent[CourseRenamedPayload]):
    event_name: ClassVar[str] = "Academic.CourseRenamed"


@dataclasses.dataclass(frozen=True)
class UnnamedEvent(DomainEvent[dict[str, Any]]):
    pass


class Course(AggregateRoot[CourseProps]):
    def rename(self, title: str) -> None:
        self._update_props(title=title)
        self._add_domain_event(CourseRenamed(self.id, CourseRenamedPayload(title)))


class Room(Entity[CourseProps]):
    pass


def _props(**overrides: Any) -> CourseProps:
    values: dict[str, Any] = {
        "code": Code("CS101"),
        "title": "Algorithms",
        "level": Level.HIGH,
        "starts_on": datetime(2026, 9, 1, tzinfo=UTC),
    }
    values.update(overrides)
    return CourseProps(**values)


# ---------------------------------------------------------------------------
# ValueObject
# ---------------------------------------------------------------------------


class TestValueObject:
    def test_structural_equality(self) -> None:
        assert Address("Main", "Lima") == Address("Main", "Lima")
        assert Address("Main", "Lima") != Address("Main", "Cusco")
        assert Address("Main", "Lima").equals(Address("Main", "Lima"))
        assert not Address("Main", "Lima").equals(None)

    def test_frozen(self) -> None:
        a = Address("Main", "Lima")
        with pytest.raises(dataclasses.FrozenInstanceError):
            a.city = "Cusco"  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert len({Address("Main", "Lima"), Address("Main", "Lima")}) == 1

    def test_validate_runs_on_construction(self) -> None:
        with pytest.raises(ArgumentInvalidException):
            Code("")

    def test_primitive_unpack(self) -> None:
        assert Code("CS101").unpack() == "CS101"
        assert str(Code("CS101")) == "CS101"

    def test_nested_unpack(self) -> None:
        loc = Location(Code("A1"), Address("Main", "Lima", ("x", "y")))
        assert loc.unpack() == {
            "code": "A1",
            "address": {"street": "Main", "city": "Lima", "tags": ("x", "y")},
            "level": Level.LOW,
        }

    def test_unpack_is_read_only(self) -> None:
        plain = Location(Code("A1"), Address("Main", "Lima")).unpack()
        with pytest.raises(TypeError):
            plain["code"] = "B2"
        with pytest.raises(TypeError):
            plain["address"]["city"] = "Cusco"
        assert isinstance(plain["address"]["tags"], tuple)

    def test_to_object_is_json_safe(self) -> None:
        loc = Location(Code("A1"), Address("Main", "Lima"), Level.HIGH)
        assert loc.to_object()["level"] == "high"

    def test_copy_with(self) -> None:
        a = Address("Main", "Lima")
        b = a.copy_with(city="Cusco")
        assert b == Address("Main", "Cusco")
        assert a.city == "Lima"


# ---------------------------------------------------------------------------
# Serialisation
# ---------------------------------------------------------------------------


class TestToPlain:
    def test_primitives_pass_through(self) -> None:
        assert to_plain(None) is None
        assert to_plain(1.5) == 1.5
        assert to_plain("s") == "s"

    def test_dates_and_ids(self) -> None:
        moment = datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC)
        assert to_plain(moment) == moment.isoformat()
        assert to_plain(UniqueEntityID("abc")) == "abc"

    def test_collections(self) -> None:
        assert to_plain({"a": (1, Level.LOW)}) == {"a": [1, "low"]}

    def test_unsupported_type_raises(self) -> None:
        with pytest.raises(ArgumentInvalidException) as exc_info:
            to_plain(object())
        assert exc_info.value.metadata == {"type": "object"}


# ---------------------------------------------------------------------------
# Entity
# ---------------------------------------------------------------------------


class TestEntity:
    def test_generates_id(self) -> None:
        assert Room(_props()).id != Room(_props()).id

    def test_id_based_equality(self) -> None:
        uid = UniqueEntityID("room-1")
        a = Room(_props(title="A"), uid)
        b = Room(_props(title="B"), uid)
        assert a == b
        assert a.equals(b)
        assert len({a, b}) == 1

    def test_not_equal_to_none_or_plain_objects(self) -> None:
        room = Room(_props())
        assert not room.equals(None)
        assert room != object()

    def test_same_reference(self) -> None:
        room = Room(_props())
        assert room.equals(room)

    def test_rejects_mutable_props(self) -> None:
        with pytest.raises(ArgumentInvalidException):
            Room({"title": "x"})  # type: ignore[arg-type]

    def test_is_entity(self) -> None:
        assert is_entity(Room(_props()))
        assert Entity.is_entity(Room(_props()))
        assert not is_entity(Address("Main", "Lima"))

    def test_to_object(self) -> None:
        room = Room(_props(), UniqueEntityID("room-9"))
        assert room.to_object() == {
            "id": "room-9",
            "code": "CS101",
            "title": "Algorithms",
            "level": "high",
            "starts_on": "2026-09-01T00:00:00+00:00",
        }


# ---------------------------------------------------------------------------
# AggregateRoot / DomainEvent
# ---------------------------------------------------------------------------


class TestAggregateRoot:
    def test_update_props_replaces_snapshot(self) -> None:
        course = Course(_props())
        before = course.props
        course.rename("Data Structures")
        assert course.props.title == "Data Structures"
        assert before.title == "Algorithms"

    def test_domain_events_snapshot(self) -> None:
        course = Course(_props())
        course.rename("X")
        events = course.domain_events
        assert isinstance(events, tuple)
        assert len(events) == 1
        assert events[0].aggregate_id == course.id

    def test_pull_events_clears(self) -> None:
        course = Course(_props())
        course.rename("X")
        course.rename("Y")
        pulled = course.pull_events()
        assert [e.payload.title for e in pulled] == ["X", "Y"]
        assert course.pull_events() == []

    def test_pulled_list_is_a_copy(self) -> None:
        course = Course(_props())
        course.rename("X")
        pulled = course.pull_events()
        pulled.append(CourseRenamed(course.id, CourseRenamedPayload("Z")))
        assert course.domain_events == ()
        assert course.pull_events() == []

    def test_clear_events(self) -> None:
        course = Course(_props())
        course.rename("X")
        course.clear_events()
        assert course.domain_events == ()


class TestDomainEvent:
    def test_metadata_defaults(self) -> None:
        evt = CourseRenamed(UniqueEntityID("c1"), CourseRenamedPayload("X"))
        assert evt.event_id
        assert evt.occurred_on.tzinfo is not None
        assert evt.event_name == "Academic.CourseRenamed"

    def test_unique_event_ids(self) -> None:
        a = CourseRenamed(UniqueEntityID("c1"), CourseRenamedPayload("X"))
        b = CourseRenamed(UniqueEntityID("c1"), CourseRenamedPayload("X"))
        assert a.event_id != b.event_id

    def test_missing_name_raises(self) -> None:
        with pytest.raises(ArgumentNotProvidedException):
            UnnamedEvent(UniqueEntityID("c1"), {})

    def test_frozen(self) -> None:
        evt = CourseRenamed(UniqueEntityID("c1"), CourseRenamedPayload("X"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            evt.event_id = "other"  # type: ignore[misc]

    def test_to_dict(self) -> None:
        moment = datetime(2026, 1, 1, tzinfo=UTC)
        evt = CourseRenamed(
            UniqueEntityID("c1"), CourseRenamedPayload("X"), event_id="e1", occurred_on=moment
        )
        assert evt.to_dict() == {
            "eventId": "e1",
            "aggregateId": "c1",
            "eventName": "Academic.CourseRenamed",
            "occurredOn": moment.isoformat(),
            "payload": {"title": "X"},
        }


# ---------------------------------------------------------------------------
# Event bus / Unit of Work
# ---------------------------------------------------------------------------


class TestInMemoryDomainEventBus:
    def test_handlers_run_in_order(self) -> None:
        async def run() -> None:
            bus = InMemoryDomainEventBus(record_history=True)
            calls: list[str] = []

            async def first(event: DomainEvent[Any]) -> None:
                calls.append(f"first:{event.payload.title}")

            async def second(event: DomainEvent[Any]) -> None:
                calls.append(f"second:{event.payload.title}")

            await bus.subscribe(CourseRenamed, first)
            await bus.subscribe("Academic.CourseRenamed", second)
            await bus.publish(CourseRenamed(UniqueEntityID("c1"), CourseRenamedPayload("X")))
            assert calls == ["first:X", "second:X"]
            assert len(bus.published) == 1

        asyncio.run(run())

    def test_publish_without_handlers(self) -> None:
        async def run() -> None:
            bus = InMemoryDomainEventBus(record_history=True)
            course = Course(_props())
            course.rename("A")
            course.rename("B")
            await bus.publish_all(course.pull_events())
            assert [e.payload.title for e in bus.published] == ["A", "B"]

        asyncio.run(run())

    def test_history_is_off_by_default(self) -> None:
        async def run() -> None:
            bus = InMemoryDomainEventBus()
            seen: list[str] = []

            async def handler(event: DomainEvent[Any]) -> None:
                seen.append(event.event_name)

            await bus.subscribe(CourseRenamed, handler)
            await bus.publish(CourseRenamed(UniqueEntityID("c1"), CourseRenamedPayload("X")))
            assert seen == ["Academic.CourseRenamed"]
            assert bus.published == []

        asyncio.run(run())


class TestDeferredEventBus:
    def test_holds_events_until_flush(self) -> None:
        async def run() -> None:
            target = InMemoryDomainEventBus(record_history=True)
            outbox = DeferredEventBus(target)
            event = CourseRenamed(UniqueEntityID("c1"), CourseRenamedPayload("X"))
            await outbox.publish(event)
            assert outbox.pending == (event,)
            assert target.published == []

            await outbox.flush()
            assert target.published == [event]
            assert outbox.pending == ()

        asyncio.run(run())

    def test_subscribe_reaches_target(self) -> None:
        async def run() -> None:
            target = InMemoryDomainEventBus()
            outbox = DeferredEventBus(target)
            seen: list[str] = []

            async def handler(event: DomainEvent[Any]) -> None:
                seen.append(event.payload.title)

            await outbox.subscribe(CourseRenamed, handler)
            await outbox.publish(CourseRenamed(UniqueEntityID("c1"), CourseRenamedPayload("X")))
            assert seen == []
            await outbox.flush()
            assert seen == ["X"]

        asyncio.run(run())

    def test_without_target_flush_drains(self) -> None:
        async def run() -> None:
            outbox = DeferredEventBus(None)
            await outbox.publish(CourseRenamed(UniqueEntityID("c1"), CourseRenamedPayload("X")))
            await outbox.flush()
            assert outbox.pending == ()

        asyncio.run(run())

    def test_rolled_back_block_publishes_nothing(self) -> None:
        async def run() -> None:
            target = InMemoryDomainEventBus(record_history=True)
            outbox = DeferredEventBus(target)
            uow = RecordingUnitOfWork()
            with pytest.raises(RuntimeError):
                async with uow:
                    await outbox.publish(CourseRenamed(UniqueEntityID("c1"), CourseRenamedPayload("X")))
                    raise RuntimeError("boom")
                await outbox.flush()
            assert uow.calls == ["rollback"]
            assert target.published == []

        asyncio.run(run())


class RecordingUnitOfWork(UnitOfWork):
    def __init__(self) -> None:
        self.calls: list[str] = []

    async def commit(self) -> None:
        self.calls.append("commit")

    async def rollback(self) -> None:
        self.calls.append("rollback")


class TestUnitOfWork:
    def test_commits_on_success(self) -> None:
        async def run() -> None:
            uow = RecordingUnitOfWork()
            async with uow:
                pass
            assert uow.calls == ["commit"]

        asyncio.run(run())

    def test_rolls_back_on_error(self) -> None:
        async def run() -> None:
            uow = RecordingUnitOfWork()
            with pytest.raises(RuntimeError):
                async with uow:
                    raise RuntimeError("boom")
            assert uow.calls == ["rollback"]

        asyncio.run(run())
