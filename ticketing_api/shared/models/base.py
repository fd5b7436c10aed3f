"""
Base Model Classes

Declarative base and the timestamp mixin shared by every entity.

Model Hierarchy:
================
    Base                    ← SQLAlchemy declarative base
       │
       └── TimestampMixin   ← created_at / updated_at

Every listable entity needs `created_at`: it is the fallback sort column
for paginated listing (see repositories/query_builder.py).

Usage:
======
    from ticketing_api.shared.models.base import Base, TimestampMixin

    class Venue(Base, TimestampMixin):
        __tablename__ = "venues"
        id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
"""

from datetime import datetime, timezone
from enum import Enum

from sqlalchemy import DateTime, Enum as SQLEnum, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Column types are generic SQLAlchemy types (Uuid, Numeric, DateTime...)
    so the same metadata works on PostgreSQL and on SQLite in tests.
    """


class TimestampMixin:
    """
    Adds created_at / updated_at to a model.

    - created_at: set by the database on INSERT
    - updated_at: set on INSERT, bumped by SQLAlchemy on every UPDATE
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
        index=True,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )


def str_enum(enum_cls: type[Enum], length: int = 20) -> SQLEnum:
    """
    Column type for a `str` Enum stored by value ("vip"), not by name ("VIP").

    native_enum=False keeps it a VARCHAR so no CREATE TYPE is needed.
    """
    return SQLEnum(
        enum_cls,
        values_callable=lambda members: [member.value for member in members],
        native_enum=False,
        validate_strings=True,
        length=length,
    )
