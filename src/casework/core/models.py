"""Base ORM classes for SQLAlchemy models."""

from __future__ import annotations

from sqlalchemy import Integer
from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(AsyncAttrs, DeclarativeBase):
    """Root declarative base with async support."""


class Entity(Base):
    """Abstract ORM entity with a store-assigned integer primary key."""

    __abstract__ = True

    # sort_order keeps id as the first column of every table
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, sort_order=-1)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r}>"
