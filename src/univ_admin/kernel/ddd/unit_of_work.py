"""Unit of Work port – the transactional boundary of one use case."""

from __future__ import annotations

import abc
from types import TracebackType
from typing import Self


class UnitOfWork(abc.ABC):
    """``async with uow:`` opens a transaction scope.

    A block that finishes normally is committed; a block that raises is
    rolled back and the exception propagates.  Adapters acquire and release
    their resources in :meth:`_begin` / :meth:`_end`, which bracket the
    commit or rollback.
    """

    @abc.abstractmethod
    async def commit(self) -> None: ...

    @abc.abstractmethod
    async def rollback(self) -> None: ...

    async def _begin(self) -> None:
        """Acquire per-scope resources."""

    async def _end(self) -> None:
        """Release per-scope resources; always runs."""

    async def __aenter__(self) -> Self:
        await self._begin()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            if exc is None:
                await self.commit()
            else:
                await self.rollback()
        finally:
            await self._end()


__all__ = ["UnitOfWork"]
