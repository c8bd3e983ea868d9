"""FastAPI routers and related presentation logic."""

from casework.core.api import Router
from casework.core.api.middleware import (
    add_error_handlers,
    add_logging_middleware,
    database_error_handler,
    validation_error_handler,
)
from casework.core.api.routers import HealthRouter, HealthState, HealthStatus
from casework.core.api.service_builder import ServiceInfo
from casework.core.api.utilities import build_location_url, run_app
from casework.core.logging import (
    add_request_context,
    clear_request_context,
    configure_logging,
    get_logger,
    reset_request_context,
)
from casework.modules.task import TaskRouter

from .dependencies import get_task_manager
from .service_builder import TASK_SERVICE_INFO, ServiceBuilder

__all__ = [
    # Base classes
    "Router",
    # Routers
    "HealthRouter",
    "HealthStatus",
    "HealthState",
    "TaskRouter",
    # Dependencies
    "get_task_manager",
    # Middleware
    "add_error_handlers",
    "add_logging_middleware",
    "database_error_handler",
    "validation_error_handler",
    # Logging
    "configure_logging",
    "get_logger",
    "add_request_context",
    "clear_request_context",
    "reset_request_context",
    # Builders
    "ServiceBuilder",
    "ServiceInfo",
    "TASK_SERVICE_INFO",
    # Utilities
    "build_location_url",
    "run_app",
]
