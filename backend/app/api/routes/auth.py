"""
Authentication routes for registration and login.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.schemas.user import UserCreate, UserLogin, AuthResponse, UserAuth
from app.services import auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(user_data: UserCreate, db: Session = Depends(get_db)):
    """Register a new user and return a token."""
    user, token = auth_service.register(
        db,
        username=user_data.username,
        display_name=user_data.display_name,
        email=user_data.email,
        password=user_data.password
    )
    return AuthResponse(token=token, user=UserAuth.model_validate(user))


@router.post("/login", response_model=AuthResponse)
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """Login and get JWT token."""
    user, token = auth_service.authenticate(db, credentials.email, credentials.password)
    return AuthResponse(token=token, user=UserAuth.model_validate(user))
