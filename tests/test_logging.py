"""Tests for structured logging configuration."""

from __future__ import annotations

import io
import json
import sys
from collections.abc import Iterator

import pytest
import structlog

from casework.core.logging import (
    add_request_context,
    clear_request_context,
    configure_logging,
    get_logger,
    reset_request_context,
)


@pytest.fixture(autouse=True)
def _clean_context() -> Iterator[None]:
    clear_request_context()
    yield
    clear_request_context()
    structlog.reset_defaults()


def _events(err: str) -> list[dict[str, object]]:
    return [json.loads(line) for line in err.splitlines() if line.strip()]


def test_json_format_renders_events(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(log_format="json", level="INFO")

    get_logger("casework.test").info("task.created", task_id=1)

    (event,) = _events(capsys.readouterr().err)
    assert event["event"] == "task.created"
    assert event["task_id"] == 1
    assert event["level"] == "info"
    assert "timestamp" in event


def test_level_filters_events(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(log_format="json", level="WARNING")

    logger = get_logger()
    logger.info("ignored")
    logger.warning("kept")

    assert [e["event"] for e in _events(capsys.readouterr().err)] == ["kept"]


def test_request_context_is_merged(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging(log_format="json", level="INFO")
    logger = get_logger()

    add_request_context(request_id="01J0000000000000000000TEST", path="/tasks")
    logger.info("with.context")
    reset_request_context("path")
    logger.info("partial.context")

    first, second = _events(capsys.readouterr().err)
    assert first["request_id"] == "01J0000000000000000000TEST"
    assert first["path"] == "/tasks"
    assert second["request_id"] == "01J0000000000000000000TEST"
    assert "path" not in second


def test_invalid_format_rejected() -> None:
    with pytest.raises(ValueError, match="Unsupported log format"):
        configure_logging(log_format="xml")


def test_invalid_level_rejected() -> None:
    with pytest.raises(ValueError, match="Unsupported log level"):
        configure_logging(log_format="console", level="LOUD")


def test_events_follow_current_stderr(monkeypatch: pytest.MonkeyPatch) -> None:
    """A stream swapped in after configuration still receives events."""
    configure_logging(log_format="json", level="INFO")
    logger = get_logger("casework.test")
    stream = io.StringIO()
    monkeypatch.setattr(sys, "stderr", stream)

    logger.info("task.deleted", task_id=3)

    (event,) = _events(stream.getvalue())
    assert event["event"] == "task.deleted"
    assert event["task_id"] == 3
