"""Application CQRS – Command marker and CommandHandler use-case base."""
from __future__ import annotations

import abc
from typing import Generic, TypeVar

from univ_admin.kernel.errors import DomainError
from univ_admin.kernel.types import Result

C = TypeVar("C", bound="Command")
R = TypeVar("R")


class Command:
    """Marker base for commands (intent to change state)."""


class CommandHandler(abc.ABC, Generic[C, R]):
    """Handle a single command type.

    Expected failures come back as ``Err(DomainError)``; only programmer
    errors and infrastructure failures raise.
    """

    @abc.abstractmethod
    async def execute(self, command: C) -> Result[R, DomainError]: ...


__all__ = ["Command", "CommandHandler"]
