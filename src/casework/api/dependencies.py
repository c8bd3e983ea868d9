"""Feature-specific FastAPI dependency injection for managers."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from casework.core.api.dependencies import get_session
from casework.modules.task import TaskManager, TaskRepository


async def get_task_manager(session: Annotated[AsyncSession, Depends(get_session)]) -> TaskManager:
    """Get a task manager instance for dependency injection."""
    return TaskManager(TaskRepository(session))
