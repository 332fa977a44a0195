"""
Pydantic schemas for User entity.
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class UserRegister(BaseModel):
    """Schema for account registration. Presence rules are checked by the auth service."""
    email: Optional[str] = None
    password: Optional[str] = None
    display_name: Optional[str] = Field(default=None, alias="displayName")

    class Config:
        populate_by_name = True


class UserLogin(BaseModel):
    """Schema for user login."""
    email: Optional[str] = None
    password: Optional[str] = None


class UserPublic(BaseModel):
    """Public view of a user; never carries credential fields."""
    user_id: str = Field(alias="uid")
    email: str
    display_name: str = Field(alias="displayName")

    class Config:
        from_attributes = True
        populate_by_name = True


class UserProfile(UserPublic):
    """Schema for profile response."""
    created_at: datetime = Field(alias="createdAt")


class AuthResponse(BaseModel):
    """Schema for register/login response."""
    success: bool = True
    message: str
    user: UserPublic
