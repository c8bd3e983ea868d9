"""Casework - caseworker task service built on FastAPI and async SQLAlchemy."""

# Core framework
from casework.core import (
    Base,
    BaseManager,
    BaseRepository,
    CaseworkError,
    Database,
    Entity,
    EntityIn,
    EntityOut,
    ErrorResponse,
    InvalidRequestError,
    Manager,
    NotFoundError,
    Repository,
)

# Task feature
from casework.modules.task import (
    Task,
    TaskCreateRequest,
    TaskIn,
    TaskManager,
    TaskOut,
    TaskRepository,
    TaskStatusUpdate,
)

__all__ = [
    # Core framework
    "Database",
    "Repository",
    "BaseRepository",
    "Manager",
    "BaseManager",
    "Base",
    "Entity",
    "EntityIn",
    "EntityOut",
    "ErrorResponse",
    "CaseworkError",
    "InvalidRequestError",
    "NotFoundError",
    # Task feature
    "Task",
    "TaskIn",
    "TaskOut",
    "TaskCreateRequest",
    "TaskStatusUpdate",
    "TaskRepository",
    "TaskManager",
]
