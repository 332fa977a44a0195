"""
User model for authentication and account lookup.
"""
from sqlalchemy import Column, String
from taskflow.db.base import BaseModel


class User(BaseModel):
    """User account keyed externally by an opaque, immutable user_id."""
    __tablename__ = "users"

    user_id = Column(String(64), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)  # Stored lowercase
    display_name = Column(String(255), nullable=False)
    password_hash = Column(String(128), nullable=False)
    password_salt = Column(String(32), nullable=False)
