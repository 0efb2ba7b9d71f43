"""Guard – stateless predicates shared by validation code."""

from __future__ import annotations

from collections.abc import Mapping, Sized
from typing import Any

_COLLECTIONS = (list, tuple, set, frozenset)


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (*_COLLECTIONS, Mapping)):
        return len(value) == 0
    return False


class Guard:
    """Namespace for common validation checks."""

    @staticmethod
    def is_empty(value: Any) -> bool:
        """True for ``None``, blank strings, empty collections and "empty" mappings.

        A mapping counts as empty when every one of its values is blank; the
        check goes one level deep only.  Numbers, booleans, dates, callables
        and value objects are never empty.
        """
        if isinstance(value, Mapping):
            return all(_is_blank(v) for v in value.values())
        return _is_blank(value)

    @staticmethod
    def is_short(value: Sized, min_length: int) -> bool:
        """True when *value* has fewer than *min_length* items/characters."""
        return len(value) < min_length

    @staticmethod
    def is_long(value: Sized, max_length: int) -> bool:
        """True when *value* has more than *max_length* items/characters."""
        return len(value) > max_length

    @staticmethod
    def is_out_of_range(value: float, low: float, high: float) -> bool:
        """True when *value* falls outside the inclusive range ``[low, high]``."""
        return value < low or value > high


__all__ = ["Guard"]
