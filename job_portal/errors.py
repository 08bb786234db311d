from __future__ import annotations

from fastapi import status


class ApiError(Exception):
    """Base class for errors rendered to the client as ``{"message": ...}``."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class Unauthenticated(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED


class InvalidToken(ApiError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


class ConfigurationError(RuntimeError):
    pass


class DatabaseConnectionError(RuntimeError):
    pass


JOB_NOT_FOUND = "Không tìm thấy công việc"
