"""Test configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

from casework import Database
from casework.config import Settings
from casework.main import create_app

MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def database() -> AsyncIterator[Database]:
    """Initialized in-memory database, disposed after the test."""
    db = Database(MEMORY_URL)
    await db.init()
    yield db
    await db.dispose()


@pytest.fixture
async def session(database: Database) -> AsyncIterator[AsyncSession]:
    """Session on the in-memory database."""
    async with database.session() as s:
        yield s


@pytest.fixture
def client() -> Iterator[TestClient]:
    """TestClient over the full service with a fresh in-memory database."""
    app = create_app(Settings(database_url=MEMORY_URL))
    with TestClient(app) as test_client:
        yield test_client


def task_payload(**overrides: object) -> dict[str, object]:
    """Valid create body, with overrides applied."""
    payload: dict[str, object] = {
        "title": "Call client",
        "status": "open",
        "dueDateTime": "2025-01-01T10:00:00Z",
    }
    payload.update(overrides)
    return payload
