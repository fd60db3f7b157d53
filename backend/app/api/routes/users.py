"""
User profile and search routes.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from app.db.session import get_db
from app.schemas.user import CurrentUser, MessageResponse, UserAuth, UserPublic, UserUpdate
from app.api.dependencies import get_current_user
from app.core.utils import format_response, parse_identifier
from app.services import search_service, user_service

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserAuth)
def get_current_user_info(
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get the caller's own profile, including email."""
    return user_service.get_user(db, current_user.id)


@router.put("/me", response_model=MessageResponse)
def update_profile(
    profile: UserUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update the caller's display name."""
    user = user_service.update_profile(db, current_user.id, profile.display_name)
    return format_response(
        UserAuth.model_validate(user).model_dump(mode="json"),
        "Profile updated successfully"
    )


@router.get("/search", response_model=List[UserPublic])
def search_users(
    q: str = Query(""),
    limit: Optional[int] = Query(None),
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Ranked search over username and display name."""
    return search_service.search_users(db, q, limit)


@router.get("/{user_id}", response_model=UserPublic)
def get_user(
    user_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get another user's public profile."""
    return user_service.get_user(db, parse_identifier(user_id, "user ID"))
