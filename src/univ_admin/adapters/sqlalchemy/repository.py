"""SQLAlchemy adapter – SqlAlchemyRepositoryBase."""
from __future__ import annotations

from typing import Any, Generic, Protocol, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import DeclarativeBase

from univ_admin.kernel.ddd import AggregateRoot, Repository
from univ_admin.kernel.types import NOTHING, Option, Some

TAggregate = TypeVar("TAggregate", bound=AggregateRoot)
TModel = TypeVar("TModel", bound=DeclarativeBase)


class PersistenceMapper(Protocol[TAggregate, TModel]):
    """Translates between an aggregate and its ORM row."""

    def to_domain(self, model: TModel) -> TAggregate: ...

    def to_persistence(self, aggregate: TAggregate) -> TModel: ...


class SqlAlchemyRepositoryBase(Repository[TAggregate], Generic[TAggregate, TModel]):
    """Generic SQLAlchemy repository for aggregate roots.

    Rows never leave the repository: reads go through ``mapper.to_domain``
    and writes through ``mapper.to_persistence``.  Transaction control
    belongs to the unit of work owning *session*.
    """

    def __init__(
        self,
        session: AsyncSession,
        model_class: type[TModel],
        mapper: PersistenceMapper[TAggregate, TModel],
    ) -> None:
        self._session = session
        self._model = model_class
        self._mapper = mapper

    async def save(self, aggregate: TAggregate) -> None:
        await self._session.merge(self._mapper.to_persistence(aggregate))
        await self._session.flush()

    async def find_by_id(self, id: str) -> Option[TAggregate]:  # noqa: A002
        row = await self._session.get(self._model, id)
        if row is None:
            return NOTHING
        return Some(self._mapper.to_domain(row))

    async def delete(self, aggregate: TAggregate) -> None:
        row = await self._session.get(self._model, str(aggregate.id))
        if row is not None:
            await self._session.delete(row)
            await self._session.flush()

    async def find_all(self) -> list[TAggregate]:
        result = await self._session.execute(select(self._model))
        return [self._mapper.to_domain(row) for row in result.scalars().all()]

    async def _find_one(self, *criteria: Any) -> Option[TAggregate]:
        result = await self._session.execute(select(self._model).where(*criteria).limit(1))
        row = result.scalars().first()
        if row is None:
            return NOTHING
        return Some(self._mapper.to_domain(row))


__all__ = ["PersistenceMapper", "SqlAlchemyRepositoryBase"]
