"""
Auth service for registration, login and profile lookup.

No session or token is issued: clients keep the returned public user view and
send its user id with later requests.
"""
from sqlalchemy.orm import Session
from typing import Optional
import logging

from taskflow.core.exceptions import AuthError, ConflictError, NotFoundError, ValidationError
from taskflow.core.security import hash_password, verify_password, generate_user_id
from taskflow.db import repository
from taskflow.models.user import User
from taskflow.schemas.user import UserPublic, UserProfile

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
INVALID_CREDENTIALS = "Invalid email or password"


def to_public(user: User) -> UserPublic:
    return UserPublic(user_id=user.user_id, email=user.email, display_name=user.display_name)


def register(
    email: Optional[str],
    password: Optional[str],
    display_name: Optional[str] = None,
    db: Session = None
) -> UserPublic:
    """Create an account and return its public view."""
    if not email or not password:
        raise ValidationError("Email and password are required")

    if "@" not in email:
        raise ValidationError("Please enter a valid email address")

    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

    email = email.lower()
    if repository.find_user_by_email(db, email):
        raise ConflictError("An account with this email already exists")

    salt, password_hash = hash_password(password)
    user = User(
        user_id=generate_user_id(),
        email=email,
        display_name=display_name or email.split("@")[0],
        password_hash=password_hash,
        password_salt=salt
    )
    user = repository.insert_user(db, user)

    logger.info(f"New user registered: {email}")
    return to_public(user)


def login(email: Optional[str], password: Optional[str], db: Session) -> UserPublic:
    """Check credentials. Unknown email and wrong password fail identically."""
    if not email or not password:
        raise ValidationError("Email and password are required")

    user = repository.find_user_by_email(db, email)
    if not user or not verify_password(password, user.password_salt, user.password_hash):
        raise AuthError(INVALID_CREDENTIALS)

    logger.info(f"User logged in: {user.email}")
    return to_public(user)


def get_profile(user_id: str, db: Session) -> UserProfile:
    """Public profile of an account."""
    user = repository.find_user_by_id(db, user_id)
    if not user:
        raise NotFoundError("User not found")

    return UserProfile(
        user_id=user.user_id,
        email=user.email,
        display_name=user.display_name,
        created_at=user.created_at
    )
