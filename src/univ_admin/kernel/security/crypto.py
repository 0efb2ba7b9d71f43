"""Kernel security – PasswordHasher port."""
from __future__ import annotations

import abc


class PasswordHasher(abc.ABC):
    """Port: one-way password hashing.

    Implementations must be safe to call concurrently; the hash string they
    return is opaque to the domain and stored as-is.
    """

    @abc.abstractmethod
    def hash(self, password: str) -> str: ...

    @abc.abstractmethod
    def verify(self, password: str, hashed: str) -> bool: ...


__all__ = ["PasswordHasher"]
