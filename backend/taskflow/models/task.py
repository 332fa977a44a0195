"""
Task model for a user's personal task list.
"""
from sqlalchemy import Column, String, Date, Text, Enum as SQLEnum
from taskflow.db.base import BaseModel
import enum


class TaskPriority(str, enum.Enum):
    """Task priority enumeration."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TaskStatus(str, enum.Enum):
    """Task status enumeration."""
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


def _enum_values(enum_cls):
    return [member.value for member in enum_cls]


class Task(BaseModel):
    """Task owned by a user through the user's opaque id."""
    __tablename__ = "tasks"

    # Plain value match, not a foreign key: tasks may outlive their user
    user_id = Column(String(64), nullable=False, index=True)
    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=False, default="")
    priority = Column(
        SQLEnum(TaskPriority, name="task_priority", values_callable=_enum_values, native_enum=False),
        nullable=False,
        default=TaskPriority.MEDIUM,
        index=True
    )
    status = Column(
        SQLEnum(TaskStatus, name="task_status", values_callable=_enum_values, native_enum=False),
        nullable=False,
        default=TaskStatus.PENDING,
        index=True
    )
    due_date = Column(Date, nullable=True)
