"""
Pydantic schemas for Connection entity.
"""
from pydantic import BaseModel
from datetime import datetime
from uuid import UUID
from app.models.connection import ConnectionStatus
from app.schemas.user import UserPublic


class ConnectionResponse(BaseModel):
    """Schema for a connection edge."""
    id: UUID
    requester_id: UUID
    addressee_id: UUID
    status: ConnectionStatus
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ConnectionWithUser(BaseModel):
    """An edge paired with the counterpart's public profile."""
    connection: ConnectionResponse
    user: UserPublic
