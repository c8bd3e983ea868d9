"""Task ORM model for caseworker tasks."""

from __future__ import annotations

from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import Text

from casework.core.models import Entity


class Task(Entity):
    """ORM model for a caseworker task with a free-form status and a due date-time."""

    __tablename__ = "tasks"
    # AUTOINCREMENT: ids of deleted rows are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default="")
    status: Mapped[str] = mapped_column(Text, nullable=False)
    due_date_time: Mapped[str] = mapped_column("dueDateTime", Text, nullable=False)
