"""Tests for ServiceBuilder assembly and lifespan."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from fastapi import APIRouter, Depends, FastAPI
from fastapi.testclient import TestClient

from casework import Database, TaskRepository
from casework.api import TASK_SERVICE_INFO, ServiceBuilder, ServiceInfo
from casework.core.api.dependencies import get_database
from casework.core.api.routers.health import check_database

from .conftest import MEMORY_URL, task_payload


def test_invalid_health_check_name_raises_error() -> None:
    builder = ServiceBuilder().with_health(checks={"bad name!": check_database})

    with pytest.raises(ValueError, match="contains invalid characters"):
        builder.build()


def test_default_info_is_task_service() -> None:
    app = ServiceBuilder().build()

    assert app.title == TASK_SERVICE_INFO.display_name
    assert app.version == "1.0.0"


def test_custom_info() -> None:
    app = ServiceBuilder(info=ServiceInfo(display_name="Intake Tasks", version="2.0.0")).build()

    assert app.title == "Intake Tasks"
    assert app.version == "2.0.0"


def test_tasks_disabled_by_default() -> None:
    with TestClient(ServiceBuilder().build()) as client:
        assert client.get("/tasks").status_code == 404


def test_custom_prefix() -> None:
    app = ServiceBuilder().with_database(MEMORY_URL).with_tasks(prefix="/api/v1/tasks").build()

    with TestClient(app) as client:
        response = client.post("/api/v1/tasks", json=task_payload())

        assert response.status_code == 201
        assert response.headers["location"].endswith("/api/v1/tasks/1")
        assert client.get("/tasks").status_code == 404


def test_lifespan_opens_and_closes_database() -> None:
    app = ServiceBuilder().with_tasks().build()
    assert app.state.database is None

    with TestClient(app):
        assert isinstance(app.state.database, Database)

    assert app.state.database is None


def test_injected_database_is_not_disposed(monkeypatch: pytest.MonkeyPatch) -> None:
    database = Database(MEMORY_URL)
    dispose = AsyncMock()
    monkeypatch.setattr(database, "dispose", dispose)
    app = ServiceBuilder().with_database_instance(database).with_tasks().build()

    with TestClient(app) as client:
        assert app.state.database is database
        assert client.post("/tasks", json=task_payload()).status_code == 201

    dispose.assert_not_awaited()


def test_startup_and_shutdown_hooks() -> None:
    calls: list[str] = []

    async def seed(app: FastAPI) -> None:
        async with app.state.database.session() as session:
            repo = TaskRepository(session)
            await repo.create(title="Seeded", description="", status="open", due_date_time="2025-01-01")
            await repo.commit()
        calls.append("startup")

    async def stop(app: FastAPI) -> None:
        calls.append("shutdown")

    app = ServiceBuilder().with_tasks().on_startup(seed).on_shutdown(stop).build()

    with TestClient(app) as client:
        assert [t["title"] for t in client.get("/tasks").json()] == ["Seeded"]

    assert calls == ["startup", "shutdown"]


def test_custom_router_and_dependency_override() -> None:
    router = APIRouter()

    @router.get("/db-url")
    async def db_url(database: Database = Depends(get_database)) -> dict[str, str]:
        return {"url": database.url}

    fake = Database(MEMORY_URL)
    app = ServiceBuilder().include_router(router).override_dependency(get_database, lambda: fake).build()

    with TestClient(app) as client:
        assert client.get("/db-url").json() == {"url": MEMORY_URL}


def test_database_failure_aborts_startup(tmp_path: Path) -> None:
    app = ServiceBuilder().with_database(f"sqlite+aiosqlite:///{tmp_path}/missing/tasks.db").build()

    with pytest.raises(Exception):
        with TestClient(app):
            pass
