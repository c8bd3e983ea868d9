"""Caseworker task service application."""

from __future__ import annotations

from fastapi import FastAPI

from casework.api import ServiceBuilder, run_app
from casework.config import Settings


def create_app(settings: Settings | None = None) -> FastAPI:
    """Assemble the task service from settings (environment by default)."""
    settings = settings or Settings.from_env()
    return (
        ServiceBuilder()
        .with_database(settings.database_url, echo=settings.echo_sql)
        .with_logging(log_format=settings.log_format, level=settings.log_level)
        .with_docs(docs_url="/api-docs")
        .with_cors(settings.cors_origins)
        .with_health()
        .with_tasks()
        .build()
    )


app = create_app()


def main() -> None:
    """Run the task service with uvicorn."""
    settings = Settings.from_env()
    run_app(
        app,
        host=settings.host,
        port=settings.port,
        log_format=settings.log_format,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
