"""
Domain error taxonomy shared by services and the HTTP boundary.

Every error carries a machine-readable code and a human message; the API
layer maps the class to a fixed status code.
"""
from typing import Any, Optional
from fastapi import status


class AppError(Exception):
    """Base class for all application errors."""

    code: str = "internal_error"
    message: str = "An unexpected error occurred"
    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, code: Optional[str] = None, message: Optional[str] = None, details: Any = None):
        if code:
            self.code = code
        if message:
            self.message = message
        self.details = details
        super().__init__(self.message)

    def to_response(self) -> dict:
        """Structured error body."""
        body = {"error": self.code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ValidationError(AppError):
    code = "invalid_request"
    message = "Invalid request"
    http_status = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(AppError):
    code = "unauthorized"
    message = "Invalid or expired token"
    http_status = status.HTTP_401_UNAUTHORIZED


class NotFoundError(AppError):
    code = "not_found"
    message = "Resource not found"
    http_status = status.HTTP_404_NOT_FOUND


class ConflictError(AppError):
    code = "conflict"
    message = "Resource already exists"
    http_status = status.HTTP_409_CONFLICT


class InternalError(AppError):
    pass
