"""
Identity store: user creation with uniqueness checks, lookups and profile update.
"""
import logging
from typing import Optional
from uuid import UUID
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.core.errors import ConflictError, NotFoundError
from app.db.base import utcnow
from app.models.user import User

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: UUID) -> User:
    """Fetch a user by id or raise NotFoundError."""
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("user_not_found", "User not found")
    return user


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def _raise_duplicate(db: Session, username: str, email: str) -> None:
    if get_user_by_email(db, email):
        raise ConflictError("user_exists", "User with this email already exists")
    if get_user_by_username(db, username):
        raise ConflictError("username_taken", "Username is already taken")


def create_user(
    db: Session,
    username: str,
    display_name: str,
    email: str,
    hashed_password: str
) -> User:
    """
    Insert a new user.

    Email and username are pre-checked independently; the unique
    constraints on both columns catch a concurrent registration that
    slips between the check and the insert.
    """
    _raise_duplicate(db, username, email)

    new_user = User(
        username=username,
        display_name=display_name,
        email=email,
        hashed_password=hashed_password
    )
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info("Registration race lost for username=%s", username)
        _raise_duplicate(db, username, email)
        raise ConflictError("user_exists", "User with this email already exists")
    db.refresh(new_user)

    logger.info("Created user %s (%s)", new_user.id, new_user.username)
    return new_user


def update_profile(db: Session, user_id: UUID, display_name: str) -> User:
    """Change the display name. Zero rows affected means the user does not exist."""
    updated = db.query(User).filter(User.id == user_id).update(
        {User.display_name: display_name, User.updated_at: utcnow()},
        synchronize_session=False
    )
    if updated == 0:
        db.rollback()
        raise NotFoundError("user_not_found", "User not found")
    db.commit()

    logger.info("Updated display name for user %s", user_id)
    return get_user(db, user_id)
