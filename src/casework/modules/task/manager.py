"""Task manager committing task changes and shaping responses."""

from __future__ import annotations

from casework.core.logging import get_logger
from casework.core.manager import BaseManager

from .models import Task
from .repository import TaskRepository
from .schemas import TaskIn, TaskOut

logger = get_logger(__name__)


class TaskManager(BaseManager[Task, TaskOut, int]):
    """Manager for Task entities."""

    def __init__(self, repo: TaskRepository) -> None:
        """Initialize task manager with repository."""
        super().__init__(repo, Task, TaskOut)
        self.repo: TaskRepository = repo

    async def create(self, data: TaskIn) -> TaskOut:
        """Persist a new task and return it with its assigned id."""
        task = await self.repo.create(
            title=data.title,
            description=data.description,
            status=data.status,
            due_date_time=data.due_date_time,
        )
        await self.repo.commit()
        logger.info("task.created", task_id=task.id, status=task.status)
        return self._to_output_schema(task)

    async def find_page(self, *, limit: int | None = None, offset: int = 0) -> list[TaskOut]:
        """List tasks ordered by due date-time, see TaskRepository.find_ordered."""
        tasks = await self.repo.find_ordered(limit=limit, offset=offset)
        return [self._to_output_schema(task) for task in tasks]

    async def update_status(self, id: int, status: str) -> TaskOut | None:
        """Change the status of a task; None when it does not exist."""
        task = await self.repo.update_status(id, status)
        if task is None:
            return None
        await self.repo.commit()
        logger.info("task.status_updated", task_id=id, status=status)
        return self._to_output_schema(task)

    async def delete_by_id(self, id: int) -> bool:
        deleted = await super().delete_by_id(id)
        if deleted:
            logger.info("task.deleted", task_id=id)
        return deleted
