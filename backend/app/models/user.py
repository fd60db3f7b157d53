"""
User model for authentication and profile management.
"""
from sqlalchemy import Column, String
from app.db.base import BaseModel


class User(BaseModel):
    """User account. Only display_name is mutable after registration."""
    __tablename__ = "users"

    username = Column(String(30), unique=True, nullable=False, index=True)
    display_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
