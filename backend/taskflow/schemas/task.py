"""
Pydantic schemas for Task entity.
"""
from pydantic import BaseModel, computed_field, field_validator
from typing import Optional
from datetime import date, datetime
from taskflow.models.task import TaskPriority, TaskStatus
from taskflow.services.task_service import is_overdue


def _blank_to_none(v):
    """Forms send an empty string for an unset due date."""
    if isinstance(v, str) and not v.strip():
        return None
    return v


class TaskCreate(BaseModel):
    """Schema for task creation. user_id and title presence is checked by the task service."""
    user_id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[TaskPriority] = None
    status: Optional[TaskStatus] = None
    due_date: Optional[date] = None

    @field_validator("due_date", mode="before")
    @classmethod
    def blank_due_date(cls, v):
        return _blank_to_none(v)


class TaskUpdate(BaseModel):
    """Schema for full-replace task update; every field is resent by the client."""
    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[TaskPriority] = None
    status: Optional[TaskStatus] = None
    due_date: Optional[date] = None

    @field_validator("due_date", mode="before")
    @classmethod
    def blank_due_date(cls, v):
        return _blank_to_none(v)


class TaskResponse(BaseModel):
    """Schema for task response."""
    id: int
    user_id: str
    title: str
    description: str = ""
    priority: TaskPriority
    status: TaskStatus
    due_date: Optional[date] = None
    created_at: datetime
    updated_at: datetime

    @computed_field
    @property
    def is_overdue(self) -> bool:
        return is_overdue(self)

    class Config:
        from_attributes = True


class TaskDeleteResponse(BaseModel):
    success: bool = True
    message: str
