"""
Authentication routes for registration, login, and profile lookup.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from taskflow.db.session import get_db
from taskflow.schemas.user import UserRegister, UserLogin, UserProfile, AuthResponse
from taskflow.services import auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(user_data: UserRegister, db: Session = Depends(get_db)):
    """Register a new user."""
    user = auth_service.register(
        user_data.email,
        user_data.password,
        display_name=user_data.display_name,
        db=db
    )
    return AuthResponse(message="Account created successfully", user=user)


@router.post("/login", response_model=AuthResponse)
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    """Check credentials and return the public user view."""
    user = auth_service.login(credentials.email, credentials.password, db)
    return AuthResponse(message="Login successful", user=user)


@router.get("/profile/{user_id}", response_model=UserProfile)
def get_profile(user_id: str, db: Session = Depends(get_db)):
    """Get a user's public profile."""
    return auth_service.get_profile(user_id, db)
