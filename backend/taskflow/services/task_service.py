"""
Task service for task-related business logic.
"""
from sqlalchemy.orm import Session
from datetime import date
from typing import Any, Dict, Iterable, List, Optional
import enum
import logging

from taskflow.core.exceptions import NotFoundError, ValidationError
from taskflow.db import repository
from taskflow.models.task import Task, TaskPriority, TaskStatus

logger = logging.getLogger(__name__)

# Filter value meaning "no filter"
FILTER_ALL = "all"
# Filter value outside the enum, so nothing can match
_NO_MATCH = object()

PRIORITY_ORDER = {
    TaskPriority.HIGH: 0,
    TaskPriority.MEDIUM: 1,
    TaskPriority.LOW: 2,
}


class TaskSort(str, enum.Enum):
    """Sort orders offered to clients."""
    NEWEST = "newest"
    OLDEST = "oldest"
    PRIORITY = "priority"
    DUE_DATE = "due-date"


def _clean_title(title: Optional[str]) -> str:
    title = (title or "").strip()
    if not title:
        raise ValidationError("Title cannot be empty")
    return title


def create_task(
    user_id: str,
    title: str,
    description: Optional[str] = None,
    priority: Optional[TaskPriority] = None,
    status: Optional[TaskStatus] = None,
    due_date: Optional[date] = None,
    db: Session = None
) -> Task:
    """Create a task, applying defaults for the optional fields."""
    if not user_id or not title:
        raise ValidationError("User ID and title are required")

    task = Task(
        user_id=user_id,
        title=_clean_title(title),
        description=description or "",
        priority=priority or TaskPriority.MEDIUM,
        status=status or TaskStatus.PENDING,
        due_date=due_date
    )
    task = repository.insert_task(db, task)

    logger.info(f"Task created: \"{task.title}\" for user {user_id}")
    return task


def get_task(user_id: str, task_id: int, db: Session) -> Task:
    """Get a single task, only if it belongs to user_id."""
    task = repository.get_task(db, task_id)
    if not task or task.user_id != user_id:
        raise NotFoundError("Task not found")
    return task


def update_task(task_id: int, fields: Dict[str, Any], db: Session) -> Task:
    """
    Full-replace update of a task.
    Title, priority and status must all be resent; description and due_date
    are cleared when omitted.
    """
    task = repository.get_task(db, task_id)
    if not task:
        raise NotFoundError("Task not found")

    title = _clean_title(fields.get("title"))
    if not fields.get("priority") or not fields.get("status"):
        raise ValidationError("Priority and status are required")

    task = repository.replace_task_fields(db, task, {
        "title": title,
        "description": fields.get("description") or "",
        "priority": fields["priority"],
        "status": fields["status"],
        "due_date": fields.get("due_date"),
    })

    logger.info(f"Task updated: ID {task_id}")
    return task


def delete_task(task_id: int, db: Session) -> None:
    """Delete a task permanently."""
    repository.delete_task(db, task_id)
    logger.info(f"Task deleted: ID {task_id}")


def _parse_filter(value: Optional[str], enum_cls):
    """
    Map a query-string filter to its enum member; empty or "all" means no filter.
    A value outside the enum returns _NO_MATCH, since no stored task can carry it.
    """
    if not value or value == FILTER_ALL:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return _NO_MATCH


def list_tasks(
    user_id: str,
    status: Optional[str] = None,
    priority: Optional[str] = None,
    search: Optional[str] = None,
    sort: Optional[TaskSort] = None,
    db: Session = None
) -> List[Task]:
    """List a user's tasks, newest first unless another sort is requested."""
    status_filter = _parse_filter(status, TaskStatus)
    priority_filter = _parse_filter(priority, TaskPriority)
    if status_filter is _NO_MATCH or priority_filter is _NO_MATCH:
        return []

    tasks = repository.query_tasks(
        db,
        user_id,
        status=status_filter,
        priority=priority_filter,
        search=search
    )
    if sort:
        tasks = sort_tasks(tasks, sort)
    return tasks


def _due_date_key(task) -> tuple:
    # Tasks without a due date go last
    return (task.due_date is None, task.due_date or date.min)


def sort_tasks(tasks: Iterable, sort_by: Optional[TaskSort]) -> list:
    """
    Sort tasks for display. The sort is stable, so ties keep their
    incoming order; an unknown or missing sort leaves the order unchanged.
    """
    tasks = list(tasks)
    if sort_by == TaskSort.NEWEST:
        return sorted(tasks, key=lambda t: t.created_at, reverse=True)
    if sort_by == TaskSort.OLDEST:
        return sorted(tasks, key=lambda t: t.created_at)
    if sort_by == TaskSort.PRIORITY:
        return sorted(tasks, key=lambda t: PRIORITY_ORDER[TaskPriority(t.priority)])
    if sort_by == TaskSort.DUE_DATE:
        return sorted(tasks, key=_due_date_key)
    return tasks


def is_overdue(task, today: Optional[date] = None) -> bool:
    """A task is overdue when its due date is before today and it is not completed."""
    if task.due_date is None:
        return False
    today = today or date.today()
    return task.due_date < today and TaskStatus(task.status) != TaskStatus.COMPLETED
