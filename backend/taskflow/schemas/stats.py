"""
Pydantic schemas for task statistics.
"""
from pydantic import BaseModel, Field


class TaskStats(BaseModel):
    """Per-user task counts and completion rate (0-100)."""
    total: int
    completed: int
    pending: int
    in_progress: int = Field(alias="inProgress")
    completion_rate: int = Field(alias="completionRate")

    class Config:
        populate_by_name = True
