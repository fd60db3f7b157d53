"""
Auth gate: registration, credential check and token issuance/verification.
"""
import logging
from typing import Optional, Tuple
from uuid import UUID
from jose import JWTError
from sqlalchemy.orm import Session
from app.core.errors import InternalError, UnauthorizedError
from app.core.security import (
    create_access_token, decode_access_token, get_password_hash, verify_password
)
from app.models.user import User
from app.schemas.user import CurrentUser
from app.services import user_service

logger = logging.getLogger(__name__)


def issue_token(user: User) -> str:
    """Sign a token for the user, mapping signing failures to InternalError."""
    try:
        return create_access_token(user.id, user.email)
    except JWTError as e:
        logger.error(f"Failed to sign token for user {user.id}: {e}", exc_info=True)
        raise InternalError("internal_error", "Failed to generate token")


def register(
    db: Session,
    username: str,
    display_name: str,
    email: str,
    password: str
) -> Tuple[User, str]:
    """Create an account and return it with a fresh token."""
    try:
        hashed_password = get_password_hash(password)
    except ValueError as e:
        logger.error(f"Password hashing failed: {e}", exc_info=True)
        raise InternalError("internal_error", "Failed to hash password")

    user = user_service.create_user(db, username, display_name, email, hashed_password)
    return user, issue_token(user)


def authenticate(db: Session, email: str, password: str) -> Tuple[User, str]:
    """Verify credentials. Unknown email and wrong password fail identically."""
    user = user_service.get_user_by_email(db, email)
    if not user or not verify_password(password, user.hashed_password):
        logger.info("Failed login attempt for %s", email)
        raise UnauthorizedError("invalid_credentials", "Invalid email or password")
    return user, issue_token(user)


def verify_token(token: Optional[str]) -> CurrentUser:
    """Resolve a bearer token to the caller identity without touching storage."""
    if not token:
        raise UnauthorizedError("unauthorized", "Authorization header required")

    payload = decode_access_token(token)
    if not payload:
        raise UnauthorizedError("unauthorized", "Invalid or expired token")

    try:
        return CurrentUser(id=UUID(payload["sub"]), email=payload["email"])
    except (KeyError, TypeError, ValueError):
        raise UnauthorizedError("unauthorized", "Invalid or expired token")
