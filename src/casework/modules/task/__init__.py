"""Task feature - caseworker tasks with a free-form status and due date-time."""

from .manager import TaskManager
from .models import Task
from .repository import TaskRepository
from .router import TaskRouter
from .schemas import TaskCreateRequest, TaskIn, TaskOut, TaskStatusUpdate

__all__ = [
    "Task",
    "TaskIn",
    "TaskOut",
    "TaskCreateRequest",
    "TaskStatusUpdate",
    "TaskRepository",
    "TaskManager",
    "TaskRouter",
]
