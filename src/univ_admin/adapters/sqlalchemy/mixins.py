"""SQLAlchemy ORM declarative base and TimestampMixin."""
from __future__ import annotations

import datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from univ_admin.kernel.time import utc_now


class Base(DeclarativeBase):
    """Declarative base shared by every module's ORM models."""


class TimestampMixin:
    """Adds ``created_at`` and ``updated_at`` timestamp columns.

    Mix into any concrete ORM model class that extends :class:`Base`::

        class CourseModel(TimestampMixin, Base):
            __tablename__ = "courses"
            id: Mapped[str] = mapped_column(String(36), primary_key=True)

    Aggregates own their timestamps, so mappers normally set both columns;
    the Python-side defaults only cover rows written without a mapper.
    """

    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
    updated_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )


def as_utc(value: datetime.datetime) -> datetime.datetime:
    """Attach UTC to naive datetimes read back from backends like SQLite."""
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.UTC)
    return value.astimezone(datetime.UTC)


__all__ = ["Base", "TimestampMixin", "as_utc"]
