"""Exceptions carrying the HTTP status they map to."""

from __future__ import annotations

from fastapi import status


class CaseworkError(Exception):
    """Base error rendered as {"error": message} with its status code."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidRequestError(CaseworkError):
    """The request is missing required data."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(CaseworkError):
    """The requested entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
