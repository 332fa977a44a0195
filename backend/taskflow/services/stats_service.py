"""
Statistics service for per-user task aggregates.
"""
from sqlalchemy.orm import Session
import math

from taskflow.db import repository
from taskflow.models.task import TaskStatus
from taskflow.schemas.stats import TaskStats


def completion_rate(completed: int, total: int) -> int:
    """Percentage of completed tasks, rounded half up; 0 when there are no tasks."""
    if total <= 0:
        return 0
    return math.floor(completed * 100 / total + 0.5)


def get_stats(user_id: str, db: Session) -> TaskStats:
    """Count a user's tasks by status. Recomputed on every call."""
    total = repository.count_tasks(db, user_id)
    completed = repository.count_tasks(db, user_id, TaskStatus.COMPLETED)
    pending = repository.count_tasks(db, user_id, TaskStatus.PENDING)
    in_progress = repository.count_tasks(db, user_id, TaskStatus.IN_PROGRESS)

    return TaskStats(
        total=total,
        completed=completed,
        pending=pending,
        in_progress=in_progress,
        completion_rate=completion_rate(completed, total)
    )
