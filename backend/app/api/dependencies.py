"""
Shared route dependencies.
"""
from typing import Optional
from fastapi import Header
from app.core.errors import UnauthorizedError
from app.schemas.user import CurrentUser
from app.services.auth_service import verify_token


def get_current_user(authorization: Optional[str] = Header(None)) -> CurrentUser:
    """Resolve `Authorization: Bearer <token>` to the caller identity."""
    if not authorization:
        raise UnauthorizedError("unauthorized", "Authorization header required")

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer" or not parts[1]:
        raise UnauthorizedError("unauthorized", "Invalid authorization header format")

    return verify_token(parts[1])
