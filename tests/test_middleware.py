"""Tests for the exception handlers installed by add_error_handlers."""

from __future__ import annotations

import json

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import OperationalError

from casework.core.api.middleware import (
    casework_error_handler,
    database_error_handler,
    validation_error_handler,
)
from casework.core.exceptions import InvalidRequestError, NotFoundError


def _request(path: str = "/tasks") -> Request:
    return Request({"type": "http", "method": "GET", "path": path, "headers": [], "query_string": b""})


async def test_casework_error_rendered_with_its_status() -> None:
    response = await casework_error_handler(_request(), NotFoundError("Task not found"))

    assert response.status_code == 404
    assert json.loads(response.body) == {"error": "Task not found"}


async def test_invalid_request_rendered_as_400() -> None:
    response = await casework_error_handler(_request(), InvalidRequestError("Missing status"))

    assert response.status_code == 400
    assert json.loads(response.body) == {"error": "Missing status"}


async def test_validation_error_reports_first_problem() -> None:
    exc = RequestValidationError(
        [
            {"loc": ("body", "title"), "msg": "Input should be a valid string", "type": "string_type"},
            {"loc": ("body", "status"), "msg": "Input should be a valid string", "type": "string_type"},
        ]
    )

    response = await validation_error_handler(_request(), exc)

    assert response.status_code == 400
    assert json.loads(response.body) == {"error": "Invalid request: body.title: Input should be a valid string"}


async def test_validation_error_without_details() -> None:
    response = await validation_error_handler(_request(), RequestValidationError([]))

    assert response.status_code == 400
    assert json.loads(response.body) == {"error": "Invalid request"}


async def test_database_error_hides_driver_details() -> None:
    exc = OperationalError("SELECT 1", {}, Exception("disk I/O error"))

    response = await database_error_handler(_request(), exc)

    assert response.status_code == 500
    assert json.loads(response.body) == {"error": "Internal server error"}
