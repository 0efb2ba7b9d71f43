"""SQLAlchemy adapter – session factory, unit of work, repository base, mixins."""
from univ_admin.adapters.sqlalchemy.session import SqlAlchemySessionFactory
from univ_admin.adapters.sqlalchemy.uow import SqlAlchemyUnitOfWork
from univ_admin.adapters.sqlalchemy.repository import PersistenceMapper, SqlAlchemyRepositoryBase
from univ_admin.adapters.sqlalchemy.mixins import Base, TimestampMixin, as_utc

__all__ = [
    "Base",
    "PersistenceMapper",
    "SqlAlchemyRepositoryBase",
    "SqlAlchemySessionFactory",
    "SqlAlchemyUnitOfWork",
    "TimestampMixin",
    "as_utc",
]
