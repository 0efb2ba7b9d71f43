"""Repository port – generic async repository for aggregate roots."""

from __future__ import annotations

import abc
from typing import Generic, TypeVar

from univ_admin.kernel.ddd.aggregate import AggregateRoot
from univ_admin.kernel.types.option import Option

TAggregate = TypeVar("TAggregate", bound=AggregateRoot)


class Repository(abc.ABC, Generic[TAggregate]):
    """Port: generic repository for aggregate roots.

    Concrete implementations live in ``adapters/sqlalchemy`` and in each
    module's ``infrastructure`` package.
    """

    @abc.abstractmethod
    async def save(self, aggregate: TAggregate) -> None: ...

    @abc.abstractmethod
    async def find_by_id(self, id: str) -> Option[TAggregate]: ...  # noqa: A002

    @abc.abstractmethod
    async def delete(self, aggregate: TAggregate) -> None: ...


__all__ = ["Repository"]
