"""Task repository for database access and querying."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from casework.core.repository import BaseRepository

from .models import Task


class TaskRepository(BaseRepository[Task, int]):
    """Repository for Task entities; every value reaches SQLite as a bound parameter."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize task repository with database session."""
        super().__init__(session, Task)

    async def create(self, *, title: str, description: str, status: str, due_date_time: str) -> Task:
        """Insert a task and return the persisted row including its assigned id."""
        task = Task(title=title, description=description, status=status, due_date_time=due_date_time)
        await self.save(task)
        await self.s.refresh(task)
        return task

    async def find_ordered(self, *, limit: int | None = None, offset: int = 0) -> list[Task]:
        """Return tasks by ascending due date-time.

        Without a limit every row is returned and offset is ignored. A negative
        limit means no limit (offset still applies) and a negative offset counts
        as zero, as in SQLite.
        """
        stmt = select(Task).order_by(Task.due_date_time.asc(), Task.id.asc())
        if limit is not None:
            if limit >= 0:
                stmt = stmt.limit(limit)
            stmt = stmt.offset(max(offset, 0))
        result = await self.s.scalars(stmt)
        return list(result.all())

    async def update_status(self, id: int, status: str) -> Task | None:
        """Set the status of a task; None when no task has this id."""
        task = await self.find_by_id(id)
        if task is None:
            return None
        task.status = status
        await self.s.flush()
        return task
