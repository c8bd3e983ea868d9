"""Base repository classes for data access layer."""

from __future__ import annotations

from abc import ABC, abstractmethod

from sqlalchemy import delete as sql_delete
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Entity


class Repository[T, IdT](ABC):
    """Abstract repository interface for data access operations."""

    @abstractmethod
    async def save(self, entity: T) -> T:
        """Stage an entity for insertion or update."""
        ...

    @abstractmethod
    async def commit(self) -> None:
        """Commit the current transaction."""
        ...

    @abstractmethod
    async def find_all(self) -> list[T]:
        """Return every entity."""
        ...

    @abstractmethod
    async def find_by_id(self, id: IdT) -> T | None:
        """Return the entity with the given id, or None."""
        ...

    @abstractmethod
    async def exists_by_id(self, id: IdT) -> bool:
        """Check whether an entity with the given id exists."""
        ...

    @abstractmethod
    async def delete_by_id(self, id: IdT) -> bool:
        """Delete the entity with the given id and report whether a row was removed."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored entities."""
        ...


class BaseRepository[T: Entity, IdT](Repository[T, IdT]):
    """SQLAlchemy-backed repository bound to a single session and model."""

    def __init__(self, session: AsyncSession, model: type[T]) -> None:
        """Initialize repository with database session and model class."""
        self.s = session
        self.model = model

    async def save(self, entity: T) -> T:
        self.s.add(entity)
        await self.s.flush()
        return entity

    async def commit(self) -> None:
        await self.s.commit()

    async def find_all(self) -> list[T]:
        result = await self.s.scalars(select(self.model).order_by(self.model.id))
        return list(result.all())

    async def find_by_id(self, id: IdT) -> T | None:
        return await self.s.get(self.model, id)

    async def exists_by_id(self, id: IdT) -> bool:
        result = await self.s.scalar(select(self.model.id).where(self.model.id == id))
        return result is not None

    async def delete_by_id(self, id: IdT) -> bool:
        result = await self.s.execute(sql_delete(self.model).where(self.model.id == id))
        return bool(result.rowcount)  # type: ignore[attr-defined]

    async def count(self) -> int:
        result = await self.s.scalar(select(func.count()).select_from(self.model))
        return int(result or 0)
