"""Core routers shared by every service."""

from .health import CheckResult, HealthCheck, HealthRouter, HealthState, HealthStatus, check_database

__all__ = [
    "HealthRouter",
    "HealthStatus",
    "HealthState",
    "HealthCheck",
    "CheckResult",
    "check_database",
]
