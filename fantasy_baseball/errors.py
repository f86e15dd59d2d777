"""
Typed errors carrying an HTTP status code.

Raise these from services and repositories; the API layer renders them as
``{"success": false, "message": ...}`` with the matching status.

Usage:
    from fantasy_baseball.errors import NotFoundError
    raise NotFoundError("Player not found")
"""

from __future__ import annotations

from http import HTTPStatus


class ConfigError(RuntimeError):
    """Fatal configuration problem detected at startup."""


class ApiError(Exception):
    """Base error with an HTTP status code."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.status_code}, {self.message!r})"


class ValidationError(ApiError):
    status_code = HTTPStatus.BAD_REQUEST


class UnauthorizedError(ApiError):
    status_code = HTTPStatus.UNAUTHORIZED


class ForbiddenError(ApiError):
    status_code = HTTPStatus.FORBIDDEN


class NotFoundError(ApiError):
    status_code = HTTPStatus.NOT_FOUND


class ConflictError(ApiError):
    status_code = HTTPStatus.CONFLICT
