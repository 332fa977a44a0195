"""
Declarative base and shared model columns.
"""
from sqlalchemy import Column, Integer, DateTime
from sqlalchemy.orm import declarative_base
from taskflow.core.utils import utcnow

Base = declarative_base()


class BaseModel(Base):
    """Abstract base with integer primary key and storage timestamps."""
    __abstract__ = True

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
