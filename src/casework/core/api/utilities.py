"""Helpers for building URLs and running the service with uvicorn."""

from __future__ import annotations

from typing import Any

import uvicorn
from fastapi import FastAPI, Request

from casework.core.logging import configure_logging


def build_location_url(request: Request, path: str) -> str:
    """Build an absolute URL for a resource path on the current host."""
    return str(request.base_url).rstrip("/") + path


def run_app(
    app: FastAPI | str,
    *,
    host: str = "0.0.0.0",
    port: int = 3000,
    reload: bool = False,
    log_format: str | None = None,
    log_level: str | None = None,
    **uvicorn_kwargs: Any,
) -> None:
    """Run the app with uvicorn after configuring structured logging.

    Pass an import string ("casework.main:app") when reload is enabled.
    """
    configure_logging(log_format=log_format, level=log_level)
    uvicorn.run(
        app,
        host=host,
        port=port,
        reload=reload,
        log_level=(log_level or "info").lower(),
        **uvicorn_kwargs,
    )
