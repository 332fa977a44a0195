"""Models package - Import all models for SQLAlchemy registration."""
from taskflow.models.user import User
from taskflow.models.task import Task, TaskPriority, TaskStatus

__all__ = [
    "User",
    "Task",
    "TaskPriority",
    "TaskStatus",
]
