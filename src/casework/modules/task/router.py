"""Task router mapping HTTP requests onto TaskManager operations."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Annotated, Any

from fastapi import Body, Depends, Query, Request, Response, status

from casework.core.api.pagination import LimitOffset
from casework.core.api.router import Router
from casework.core.api.utilities import build_location_url
from casework.core.exceptions import InvalidRequestError, NotFoundError
from casework.core.schemas import ErrorResponse

from .manager import TaskManager
from .schemas import TaskCreateRequest, TaskOut, TaskStatusUpdate

_TASK_ID = re.compile(r"[+-]?\d+")
# SQLite INTEGER is a signed 64-bit value
_MAX_ID = 2**63 - 1

TASK_NOT_FOUND = "Task not found"
MISSING_FIELDS = "Missing required fields"
MISSING_STATUS = "Missing status"

_NOT_FOUND_RESPONSE: dict[int | str, dict[str, Any]] = {
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": TASK_NOT_FOUND},
}


def parse_task_id(value: str) -> int | None:
    """Return the integer id in a path segment, or None if it cannot name a task."""
    if _TASK_ID.fullmatch(value) is None:
        return None
    id = int(value)
    if abs(id) > _MAX_ID:
        return None
    return id


class TaskRouter(Router):
    """Router for the /tasks resource."""

    def __init__(
        self,
        prefix: str,
        tags: Sequence[str],
        manager_factory: Any,
        **kwargs: Any,
    ) -> None:
        """Initialize task router with a dependency that yields a TaskManager."""
        self.manager_factory = manager_factory
        super().__init__(prefix=prefix, tags=tags, **kwargs)

    def _register_routes(self) -> None:
        """Register create, list, get, status update, and delete endpoints."""
        manager_dependency = Depends(self.manager_factory)
        prefix = self.router.prefix

        async def _require(manager: TaskManager, task_id: str) -> TaskOut:
            id = parse_task_id(task_id)
            task = await manager.find_by_id(id) if id is not None else None
            if task is None:
                raise NotFoundError(TASK_NOT_FOUND)
            return task

        @self.router.post(
            "",
            summary="Create a new task",
            response_model=TaskOut,
            status_code=status.HTTP_201_CREATED,
            responses={
                status.HTTP_201_CREATED: {"description": "Task created"},
                status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": MISSING_FIELDS},
            },
        )
        async def create_task(
            request: Request,
            response: Response,
            payload: Annotated[TaskCreateRequest | None, Body()] = None,
            manager: TaskManager = manager_dependency,
        ) -> TaskOut:
            if payload is None or payload.missing_fields():
                raise InvalidRequestError(MISSING_FIELDS)

            task = await manager.create(payload.to_task_in())
            response.headers["Location"] = build_location_url(request, f"{prefix}/{task.id}")
            return task

        @self.router.get(
            "",
            summary="Retrieve all tasks (with optional pagination)",
            response_model=list[TaskOut],
            responses={status.HTTP_200_OK: {"description": "A list of tasks"}},
        )
        async def list_tasks(
            limit: Annotated[
                str | None, Query(description="Number of tasks to return (integer); omit for all tasks")
            ] = None,
            offset: Annotated[
                str | None, Query(description="Number of tasks to skip (integer); only used with limit")
            ] = None,
            manager: TaskManager = manager_dependency,
        ) -> list[TaskOut]:
            window = LimitOffset.from_query(limit, offset)
            return await manager.find_page(limit=window.limit, offset=window.offset)

        @self.router.get(
            "/{task_id}",
            name="get_task",
            summary="Get a task by ID",
            response_model=TaskOut,
            responses={status.HTTP_200_OK: {"description": "Task object"}, **_NOT_FOUND_RESPONSE},
        )
        async def get_task(task_id: str, manager: TaskManager = manager_dependency) -> TaskOut:
            return await _require(manager, task_id)

        @self.router.patch(
            "/{task_id}/status",
            summary="Update the status of a task",
            response_model=TaskOut,
            responses={
                status.HTTP_200_OK: {"description": "Task updated"},
                status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": MISSING_STATUS},
                **_NOT_FOUND_RESPONSE,
            },
        )
        async def update_task_status(
            task_id: str,
            payload: Annotated[TaskStatusUpdate | None, Body()] = None,
            manager: TaskManager = manager_dependency,
        ) -> TaskOut:
            if payload is None or not payload.status:
                raise InvalidRequestError(MISSING_STATUS)

            id = parse_task_id(task_id)
            task = await manager.update_status(id, payload.status) if id is not None else None
            if task is None:
                raise NotFoundError(TASK_NOT_FOUND)
            return task

        @self.router.delete(
            "/{task_id}",
            summary="Delete a task",
            status_code=status.HTTP_204_NO_CONTENT,
            response_class=Response,
            responses={status.HTTP_204_NO_CONTENT: {"description": "Task deleted"}, **_NOT_FOUND_RESPONSE},
        )
        async def delete_task(task_id: str, manager: TaskManager = manager_dependency) -> Response:
            id = parse_task_id(task_id)
            if id is None or not await manager.delete_by_id(id):
                raise NotFoundError(TASK_NOT_FOUND)
            return Response(status_code=status.HTTP_204_NO_CONTENT)
