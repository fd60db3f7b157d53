"""
Pydantic schemas for User entity.
"""
from pydantic import BaseModel, EmailStr, Field
from typing import Optional, Any
from datetime import datetime
from uuid import UUID


class UserPublic(BaseModel):
    """Public projection, safe to show to any authenticated caller."""
    id: UUID
    username: str
    display_name: str
    created_at: datetime

    class Config:
        from_attributes = True


class UserAuth(UserPublic):
    """Owner projection: public fields plus email."""
    email: EmailStr


class UserCreate(BaseModel):
    """Schema for user registration."""
    username: str = Field(min_length=3, max_length=30)
    display_name: str = Field(min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(min_length=8)


class UserUpdate(BaseModel):
    """Schema for profile update."""
    display_name: str = Field(min_length=1, max_length=100)


class UserLogin(BaseModel):
    """Schema for user login."""
    email: EmailStr
    password: str


class AuthResponse(BaseModel):
    """Token plus the owner projection, returned by register and login."""
    token: str
    token_type: str = "bearer"
    user: UserAuth


class CurrentUser(BaseModel):
    """Identity claim extracted from a verified bearer token."""
    id: UUID
    email: str


class MessageResponse(BaseModel):
    message: str
    data: Optional[Any] = None
