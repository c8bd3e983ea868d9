"""Service builder with task module integration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Self

from fastapi import FastAPI

from casework.core.api.service_builder import BaseServiceBuilder, ServiceInfo
from casework.modules.task import TaskRouter

from .dependencies import get_task_manager

TASK_SERVICE_INFO = ServiceInfo(
    display_name="Caseworker Task Manager API",
    version="1.0.0",
    description="Simple API for managing caseworker tasks",
    servers=[{"url": "http://localhost:3000", "description": "Local server"}],
)


@dataclass(slots=True)
class _TaskOptions:
    """Internal task options for ServiceBuilder."""

    prefix: str = "/tasks"
    tags: List[str] = field(default_factory=lambda: ["Tasks"])


class ServiceBuilder(BaseServiceBuilder):
    """Service builder with integrated task module support."""

    def __init__(self, **kwargs: Any) -> None:
        """Initialize service builder with module-specific state."""
        kwargs.setdefault("info", TASK_SERVICE_INFO)
        super().__init__(**kwargs)
        self._task_options: _TaskOptions | None = None

    def with_tasks(self, *, prefix: str = "/tasks", tags: List[str] | None = None) -> Self:
        """Enable the task CRUD endpoints."""
        self._task_options = _TaskOptions(prefix=prefix, tags=list(tags) if tags else ["Tasks"])
        return self

    def _register_module_routers(self, app: FastAPI) -> None:
        """Register the task router when enabled."""
        if self._task_options:
            task_options = self._task_options
            task_router = TaskRouter.create(
                prefix=task_options.prefix,
                tags=task_options.tags,
                manager_factory=get_task_manager,
            )
            app.include_router(task_router)
