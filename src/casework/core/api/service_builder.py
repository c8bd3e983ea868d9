"""Base service builder for FastAPI applications without module dependencies."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncContextManager, AsyncIterator, Awaitable, Callable, Dict, List, Self

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict

from casework.core import Database
from casework.core.logging import configure_logging, get_logger

from .middleware import add_error_handlers, add_logging_middleware
from .routers import HealthRouter
from .routers.health import HealthCheck, check_database

logger = get_logger(__name__)


class ServiceInfo(BaseModel):
    """Service metadata used for the OpenAPI document."""

    display_name: str
    version: str = "1.0.0"
    summary: str | None = None
    description: str | None = None
    servers: list[dict[str, str]] | None = None

    model_config = ConfigDict(extra="forbid")


class BaseServiceBuilder:
    """Base service builder providing core FastAPI functionality without module dependencies."""

    def __init__(
        self,
        *,
        info: ServiceInfo,
        database_url: str = "sqlite+aiosqlite:///:memory:",
        include_error_handlers: bool = True,
        include_logging: bool = False,
    ) -> None:
        """Initialize base service builder with core options."""
        self.info = info
        self._database_url = database_url
        self._database_echo = False
        self._database_instance: Database | None = None
        self._include_error_handlers = include_error_handlers
        self._include_logging = include_logging
        self._log_options: tuple[str | None, str | None] = (None, None)
        self._docs_options: tuple[str | None, str] = ("/docs", "/openapi.json")
        self._cors_origins: List[str] | None = None
        self._health_options: tuple[str, List[str], dict[str, HealthCheck]] | None = None
        self._custom_routers: List[APIRouter] = []
        self._dependency_overrides: Dict[Callable[..., object], Callable[..., object]] = {}
        self._startup_hooks: List[Callable[[FastAPI], Awaitable[None]]] = []
        self._shutdown_hooks: List[Callable[[FastAPI], Awaitable[None]]] = []

    # --------------------------------------------------------------------- Fluent configuration

    def with_database(self, url: str, *, echo: bool = False) -> Self:
        """Configure database URL; echo logs every SQL statement."""
        self._database_url = url
        self._database_echo = echo
        return self

    def with_database_instance(self, database: Database) -> Self:
        """Inject a pre-configured database instance; its lifecycle stays with the caller."""
        self._database_instance = database
        return self

    def with_logging(self, enabled: bool = True, *, log_format: str | None = None, level: str | None = None) -> Self:
        """Enable structured logging with request tracing."""
        self._include_logging = enabled
        self._log_options = (log_format, level)
        return self

    def with_docs(self, *, docs_url: str | None = "/docs", openapi_url: str = "/openapi.json") -> Self:
        """Configure where Swagger UI and the OpenAPI document are served."""
        self._docs_options = (docs_url, openapi_url)
        return self

    def with_cors(self, origins: List[str] | None = None) -> Self:
        """Allow cross-origin requests from the given origins (all by default)."""
        self._cors_origins = list(origins) if origins else ["*"]
        return self

    def with_health(
        self,
        *,
        prefix: str = "/health",
        tags: List[str] | None = None,
        checks: dict[str, HealthCheck] | None = None,
        include_database_check: bool = True,
    ) -> Self:
        """Add health check endpoint with optional custom checks."""
        health_checks = dict(checks or {})

        if include_database_check:
            health_checks["database"] = check_database

        self._health_options = (prefix, list(tags) if tags is not None else ["Health"], health_checks)
        return self

    def include_router(self, router: APIRouter) -> Self:
        """Include a custom router."""
        self._custom_routers.append(router)
        return self

    def override_dependency(self, dependency: Callable[..., object], override: Callable[..., object]) -> Self:
        """Override a dependency for testing or customization."""
        self._dependency_overrides[dependency] = override
        return self

    def on_startup(self, hook: Callable[[FastAPI], Awaitable[None]]) -> Self:
        """Register a startup hook."""
        self._startup_hooks.append(hook)
        return self

    def on_shutdown(self, hook: Callable[[FastAPI], Awaitable[None]]) -> Self:
        """Register a shutdown hook."""
        self._shutdown_hooks.append(hook)
        return self

    # --------------------------------------------------------------------- Build mechanics

    def build(self) -> FastAPI:
        """Build and configure the FastAPI application."""
        self._validate_configuration()

        docs_url, openapi_url = self._docs_options
        app = FastAPI(
            title=self.info.display_name,
            summary=self.info.summary,
            description=self.info.description or "",
            version=self.info.version,
            servers=self.info.servers,
            docs_url=docs_url,
            redoc_url=None,
            openapi_url=openapi_url,
            lifespan=self._build_lifespan(),
        )
        app.state.database_url = self._database_url
        app.state.database = None

        if self._include_error_handlers:
            add_error_handlers(app)

        if self._include_logging:
            add_logging_middleware(app)

        if self._cors_origins is not None:
            app.add_middleware(
                CORSMiddleware,
                allow_origins=self._cors_origins,
                allow_methods=["*"],
                allow_headers=["*"],
            )

        if self._health_options:
            prefix, tags, checks = self._health_options
            app.include_router(HealthRouter.create(prefix=prefix, tags=tags, checks=checks))

        # Extension point for module-specific routers
        self._register_module_routers(app)

        for router in self._custom_routers:
            app.include_router(router)

        for dependency, override in self._dependency_overrides.items():
            app.dependency_overrides[dependency] = override

        return app

    # --------------------------------------------------------------------- Extension points

    def _register_module_routers(self, app: FastAPI) -> None:
        """Extension point for registering module-specific routers (override in subclasses)."""
        pass

    # --------------------------------------------------------------------- Core helpers

    def _validate_configuration(self) -> None:
        """Validate core configuration."""
        if self._health_options:
            _, _, checks = self._health_options
            for name in checks.keys():
                if not name.replace("_", "").replace("-", "").isalnum():
                    raise ValueError(
                        f"Health check name '{name}' contains invalid characters. "
                        "Only alphanumeric characters, underscores, and hyphens are allowed."
                    )

    def _build_lifespan(self) -> Callable[[FastAPI], AsyncContextManager[None]]:
        """Build lifespan context manager opening the database on startup and closing it on shutdown."""
        database_url = self._database_url
        database_echo = self._database_echo
        database_instance = self._database_instance
        include_logging = self._include_logging
        log_format, log_level = self._log_options
        startup_hooks = list(self._startup_hooks)
        shutdown_hooks = list(self._shutdown_hooks)

        @asynccontextmanager
        async def lifespan(app: FastAPI) -> AsyncIterator[None]:
            if include_logging:
                configure_logging(log_format=log_format, level=log_level)

            # Use injected database or create new one from URL
            if database_instance is not None:
                database = database_instance
                should_manage_lifecycle = False
            else:
                database = Database(database_url, echo=database_echo)
                should_manage_lifecycle = True

            # Safe to call on an existing database; a failure aborts startup
            await database.init()
            app.state.database = database
            logger.info("service.started", title=app.title, version=app.version)

            for hook in startup_hooks:
                await hook(app)
            try:
                yield
            finally:
                for hook in shutdown_hooks:
                    await hook(app)
                app.state.database = None

                # Dispose database only if we created it
                if should_manage_lifecycle:
                    await database.dispose()
                logger.info("service.stopped", title=app.title)

        return lifespan

    # --------------------------------------------------------------------- Convenience

    @classmethod
    def create(cls, *, info: ServiceInfo, **kwargs: Any) -> FastAPI:
        """Create and build a FastAPI application in one call."""
        return cls(info=info, **kwargs).build()
