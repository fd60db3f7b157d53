"""
Connection model for the friendship graph.
"""
from sqlalchemy import (
    Column, String, Enum as SQLEnum, ForeignKey, Uuid,
    CheckConstraint, UniqueConstraint
)
from app.db.base import BaseModel
import enum


class ConnectionStatus(str, enum.Enum):
    """Connection status enumeration."""
    PENDING = "pending"
    ACCEPTED = "accepted"


class Connection(BaseModel):
    """
    A friendship edge between two users.

    requester_id/addressee_id keep the direction of the original request
    (accept and decline are directional). pair_key is the same for (A, B)
    and (B, A), so the unique constraint on it allows a single edge per
    unordered pair no matter who asked first.
    """
    __tablename__ = "user_connections"
    __table_args__ = (
        UniqueConstraint("requester_id", "addressee_id", name="uq_connection_direction"),
        UniqueConstraint("pair_key", name="uq_connection_pair"),
        CheckConstraint("requester_id <> addressee_id", name="ck_connection_not_self"),
    )

    requester_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    addressee_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    pair_key = Column(String(73), nullable=False)
    status = Column(SQLEnum(ConnectionStatus, name="connection_status"),
                    default=ConnectionStatus.PENDING, nullable=False, index=True)
