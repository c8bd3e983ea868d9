"""Task schemas for request bodies and responses."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from casework.core.schemas import EntityIn, EntityOut


class TaskIn(EntityIn):
    """Validated input for creating a task."""

    title: str = Field(min_length=1, description="Short title of the task")
    description: str = Field(default="", description="Optional longer description")
    status: str = Field(min_length=1, description="Free-form status, e.g. open or done")
    due_date_time: str = Field(min_length=1, description="Due date and time", json_schema_extra={"format": "date-time"})


class TaskOut(EntityOut):
    """Task as returned by the API."""

    title: str
    description: str = ""
    status: str
    due_date_time: str = Field(json_schema_extra={"format": "date-time"})

    @field_validator("description", mode="before")
    @classmethod
    def null_description_as_empty(cls, v: Any) -> Any:
        """Rows written without a description read back as an empty string."""
        return "" if v is None else v


class TaskCreateRequest(BaseModel):
    """Body of POST /tasks; presence of required fields is checked by the router."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={"required": ["title", "status", "dueDateTime"]},
    )

    REQUIRED_FIELDS: ClassVar[tuple[str, ...]] = ("title", "status", "due_date_time")

    title: str | None = None
    description: str | None = None
    status: str | None = None
    due_date_time: str | None = Field(default=None, json_schema_extra={"format": "date-time"})

    def missing_fields(self) -> list[str]:
        """Return the aliases of required fields that are absent or empty."""
        fields = type(self).model_fields
        return [fields[name].alias or name for name in self.REQUIRED_FIELDS if not getattr(self, name)]

    def to_task_in(self) -> TaskIn:
        """Convert a complete request into validated task input."""
        return TaskIn(
            title=self.title,
            description=self.description or "",
            status=self.status,
            due_date_time=self.due_date_time,
        )


class TaskStatusUpdate(BaseModel):
    """Body of PATCH /tasks/{id}/status."""

    status: str | None = Field(default=None, description="New status")
