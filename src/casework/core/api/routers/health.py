"""Health check router."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from enum import StrEnum

from fastapi import Request, Response, status
from pydantic import BaseModel, Field
from sqlalchemy import text

from casework.core.logging import get_logger

from ..router import Router

logger = get_logger(__name__)


class HealthState(StrEnum):
    """Health state enumeration for health checks."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


HealthCheck = Callable[[Request], Awaitable[tuple[HealthState, str | None]]]


class CheckResult(BaseModel):
    """Result of an individual health check."""

    state: HealthState = Field(description="Health state of this check")
    message: str | None = Field(default=None, description="Optional message or error detail")


class HealthStatus(BaseModel):
    """Overall health status response."""

    status: HealthState = Field(description="Overall service health indicator")
    checks: dict[str, CheckResult] | None = Field(
        default=None, description="Individual health check results (if checks are configured)"
    )


async def check_database(request: Request) -> tuple[HealthState, str | None]:
    """Run a trivial query against the database opened by the lifespan."""
    database = getattr(request.app.state, "database", None)
    if database is None:
        return (HealthState.UNHEALTHY, "Database not initialized")
    try:
        async with database.session() as session:
            await session.execute(text("SELECT 1"))
    except Exception as e:
        return (HealthState.UNHEALTHY, f"Database connection failed: {e}")
    return (HealthState.HEALTHY, None)


class HealthRouter(Router):
    """Health check router; answers 503 while any check is unhealthy."""

    def __init__(
        self,
        prefix: str,
        tags: list[str],
        checks: dict[str, HealthCheck] | None = None,
        **kwargs: object,
    ) -> None:
        """Initialize health router with optional health checks."""
        self.checks = checks or {}
        super().__init__(prefix=prefix, tags=tags, **kwargs)

    def _register_routes(self) -> None:
        """Register health check endpoint."""
        checks = self.checks

        @self.router.get(
            "",
            summary="Health check",
            response_model=HealthStatus,
            response_model_exclude_none=True,
            responses={status.HTTP_503_SERVICE_UNAVAILABLE: {"model": HealthStatus}},
        )
        async def health_check(request: Request, response: Response) -> HealthStatus:
            if not checks:
                return HealthStatus(status=HealthState.HEALTHY)

            check_results: dict[str, CheckResult] = {}
            overall_state = HealthState.HEALTHY

            for name, check_fn in checks.items():
                try:
                    state, message = await check_fn(request)
                except Exception as e:
                    state, message = HealthState.UNHEALTHY, f"Check failed: {e}"
                check_results[name] = CheckResult(state=state, message=message)

                if state == HealthState.UNHEALTHY:
                    overall_state = HealthState.UNHEALTHY
                elif state == HealthState.DEGRADED and overall_state == HealthState.HEALTHY:
                    overall_state = HealthState.DEGRADED

            if overall_state == HealthState.UNHEALTHY:
                logger.warning("health.unhealthy", checks={k: v.state.value for k, v in check_results.items()})
                response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

            return HealthStatus(status=overall_state, checks=check_results)
