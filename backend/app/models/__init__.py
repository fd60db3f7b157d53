"""Models package - Import all models for SQLAlchemy registration."""
from app.models.user import User
from app.models.connection import Connection, ConnectionStatus

__all__ = [
    "User",
    "Connection",
    "ConnectionStatus",
]
