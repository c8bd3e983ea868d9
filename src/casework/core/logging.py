"""Structured logging configuration with request context support."""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog
from structlog.typing import Processor

LOG_FORMATS = ("console", "json")


def _stderr_logger_factory(*args: Any) -> structlog.PrintLogger:
    """Create a PrintLogger on whatever sys.stderr is when the event is logged."""
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(*, log_format: str | None = None, level: str | None = None) -> None:
    """Configure structlog for console or JSON output.

    Both arguments fall back to the LOG_FORMAT and LOG_LEVEL environment
    variables, then to "console" and "INFO".
    """
    fmt = (log_format or os.getenv("LOG_FORMAT", "console")).lower()
    if fmt not in LOG_FORMATS:
        raise ValueError(f"Unsupported log format '{fmt}'. Expected one of: {', '.join(LOG_FORMATS)}")

    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    level_value = logging.getLevelName(level_name)
    if not isinstance(level_value, int):
        raise ValueError(f"Unsupported log level '{level_name}'")

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]

    renderer: Processor
    if fmt == "json":
        shared_processors.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(level_value),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger, optionally named after a module."""
    if name is None:
        return structlog.get_logger()
    return structlog.get_logger(name)


def add_request_context(**kwargs: Any) -> None:
    """Bind key/value pairs to every log event of the current request."""
    structlog.contextvars.bind_contextvars(**kwargs)


def reset_request_context(*keys: str) -> None:
    """Remove the given keys from the request log context."""
    structlog.contextvars.unbind_contextvars(*keys)


def clear_request_context() -> None:
    """Drop the whole request log context."""
    structlog.contextvars.clear_contextvars()
