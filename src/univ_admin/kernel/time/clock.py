"""Kernel time – Clock port, its two implementations and UTC date helpers.

Domain code never calls ``datetime.now`` directly; it takes a :class:`Clock`
so tests can pin time with :class:`FrozenClock`.
"""
from __future__ import annotations

from datetime import UTC, date, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...

    def today(self) -> date: ...


class SystemClock:
    """Wall-clock time, always timezone-aware UTC."""

    def now(self) -> datetime:
        return utc_now()

    def today(self) -> date:
        return self.now().date()


class FrozenClock:
    """Clock that only moves when told to."""

    def __init__(self, at: datetime) -> None:
        self._at = at

    def now(self) -> datetime:
        return self._at

    def today(self) -> date:
        return self._at.date()

    def advance(self, delta: timedelta | None = None, **units: float) -> None:
        """Move forward by *delta* and/or ``timedelta`` keyword *units*."""
        self._at += (delta or timedelta()) + timedelta(**units)


def utc_now() -> datetime:
    return datetime.now(UTC)


def now_iso() -> str:
    """Current UTC instant in ISO-8601 form."""
    return utc_now().isoformat()


def is_before(a: datetime, b: datetime) -> bool:
    return a < b


def is_after(a: datetime, b: datetime) -> bool:
    return a > b


def add_days(value: datetime, days: int) -> datetime:
    """A new datetime *days* away from *value*; negative values go back."""
    return value + timedelta(days=days)


def start_of_utc_day(value: datetime) -> datetime:
    """00:00 UTC of the UTC day containing *value*.  Naive input is taken as UTC."""
    in_utc = value.replace(tzinfo=UTC) if value.tzinfo is None else value.astimezone(UTC)
    return datetime.combine(in_utc.date(), datetime.min.time(), tzinfo=UTC)


__all__ = [
    "Clock",
    "FrozenClock",
    "SystemClock",
    "add_days",
    "is_after",
    "is_before",
    "now_iso",
    "start_of_utc_day",
    "utc_now",
]
