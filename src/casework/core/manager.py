"""Base manager classes converting ORM entities to output schemas."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel

from .models import Entity
from .repository import BaseRepository


class Manager[OutSchemaT: BaseModel, IdT](ABC):
    """Abstract manager interface for business logic over a repository."""

    @abstractmethod
    async def find_all(self) -> list[OutSchemaT]:
        """Return every entity as an output schema."""
        ...

    @abstractmethod
    async def find_by_id(self, id: IdT) -> OutSchemaT | None:
        """Return the entity with the given id, or None."""
        ...

    @abstractmethod
    async def delete_by_id(self, id: IdT) -> bool:
        """Delete the entity with the given id and report whether it existed."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored entities."""
        ...


class BaseManager[ModelT: Entity, OutSchemaT: BaseModel, IdT](Manager[OutSchemaT, IdT]):
    """Manager implementation committing through a BaseRepository."""

    def __init__(
        self,
        repo: BaseRepository[ModelT, IdT],
        model_cls: type[ModelT],
        out_schema_cls: type[OutSchemaT],
    ) -> None:
        """Initialize manager with repository, model class, and output schema class."""
        self.repo = repo
        self.model_cls = model_cls
        self.out_schema_cls = out_schema_cls

    def _to_output_schema(self, entity: ModelT) -> OutSchemaT:
        """Convert ORM entity to output schema."""
        return self.out_schema_cls.model_validate(entity, from_attributes=True)

    async def find_all(self) -> list[OutSchemaT]:
        entities = await self.repo.find_all()
        return [self._to_output_schema(e) for e in entities]

    async def find_by_id(self, id: IdT) -> OutSchemaT | None:
        entity = await self.repo.find_by_id(id)
        if entity is None:
            return None
        return self._to_output_schema(entity)

    async def delete_by_id(self, id: IdT) -> bool:
        deleted = await self.repo.delete_by_id(id)
        if deleted:
            await self.repo.commit()
        return deleted

    async def count(self) -> int:
        return await self.repo.count()
