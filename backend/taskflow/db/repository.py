"""
Query operations for users and tasks.

Every predicate is built with the SQLAlchemy expression language, so values are
always sent as bound parameters. Mutations commit before returning and are
serialized through the module-level write lock.
"""
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional
import logging

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from taskflow.core.exceptions import ConflictError, NotFoundError, StorageError
from taskflow.core.utils import utcnow
from taskflow.db.session import write_lock
from taskflow.models.task import Task, TaskPriority, TaskStatus
from taskflow.models.user import User

logger = logging.getLogger(__name__)

# Columns replaced by a full-field task update
TASK_UPDATE_FIELDS = ("title", "description", "priority", "status", "due_date")


@contextmanager
def _committing(db: Session, action: str) -> Iterator[None]:
    """Run a mutation under the write lock and commit it, rolling back on failure."""
    with write_lock:
        try:
            yield
            db.commit()
        except IntegrityError:
            db.rollback()
            raise
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Database error while trying to {action}: {e}", exc_info=True)
            raise StorageError(f"Failed to {action}") from e


# ---- users ----

def find_user_by_email(db: Session, email: str) -> Optional[User]:
    """Case-insensitive lookup by email."""
    try:
        return db.query(User).filter(func.lower(User.email) == email.lower()).first()
    except SQLAlchemyError as e:
        logger.error(f"Failed to look up user by email: {e}", exc_info=True)
        raise StorageError("Failed to look up account") from e


def find_user_by_id(db: Session, user_id: str) -> Optional[User]:
    """Lookup by opaque user id."""
    try:
        return db.query(User).filter(User.user_id == user_id).first()
    except SQLAlchemyError as e:
        logger.error(f"Failed to look up user {user_id}: {e}", exc_info=True)
        raise StorageError("Failed to look up account") from e


def insert_user(db: Session, user: User) -> User:
    """Persist a new user. Raises ConflictError when the email or user id is taken."""
    try:
        with _committing(db, "create account"):
            db.add(user)
    except IntegrityError as e:
        logger.warning(f"Duplicate account rejected for {user.email}: {e.orig}")
        raise ConflictError("An account with this email already exists") from e
    db.refresh(user)
    return user


# ---- tasks ----

def get_task(db: Session, task_id: int) -> Optional[Task]:
    try:
        return db.query(Task).filter(Task.id == task_id).first()
    except SQLAlchemyError as e:
        logger.error(f"Failed to fetch task {task_id}: {e}", exc_info=True)
        raise StorageError("Failed to fetch task") from e


def insert_task(db: Session, task: Task) -> Task:
    """Persist a new task and return it with storage-assigned fields."""
    try:
        with _committing(db, "create task"):
            db.add(task)
    except IntegrityError as e:
        logger.error(f"Task insert violated a constraint: {e}", exc_info=True)
        raise StorageError("Failed to create task") from e
    db.refresh(task)
    return task


def update_task(db: Session, task_id: int, fields: Dict[str, Any]) -> Task:
    """
    Replace every mutable field of a task and refresh updated_at.
    Raises NotFoundError when no task has that id.
    """
    task = get_task(db, task_id)
    if not task:
        raise NotFoundError("Task not found")
    return replace_task_fields(db, task, fields)


def replace_task_fields(db: Session, task: Task, fields: Dict[str, Any]) -> Task:
    """Replace every mutable field of an already loaded task and refresh updated_at."""
    try:
        with _committing(db, "update task"):
            for name in TASK_UPDATE_FIELDS:
                setattr(task, name, fields.get(name))
            # Set explicitly so an update that changes nothing still refreshes it
            task.updated_at = utcnow()
    except IntegrityError as e:
        logger.error(f"Task {task.id} update violated a constraint: {e}", exc_info=True)
        raise StorageError("Failed to update task") from e
    db.refresh(task)
    return task


def delete_task(db: Session, task_id: int) -> None:
    """Remove a task permanently. Raises NotFoundError when no task has that id."""
    task = get_task(db, task_id)
    if not task:
        raise NotFoundError("Task not found")

    with _committing(db, "delete task"):
        db.delete(task)


def query_tasks(
    db: Session,
    user_id: str,
    status: Optional[TaskStatus] = None,
    priority: Optional[TaskPriority] = None,
    search: Optional[str] = None
) -> List[Task]:
    """Tasks owned by user_id matching the optional filters, newest first."""
    query = db.query(Task).filter(Task.user_id == user_id)

    if status:
        query = query.filter(Task.status == status)

    if priority:
        query = query.filter(Task.priority == priority)

    if search:
        # Literal substring: LIKE wildcards in the search text are escaped
        query = query.filter(or_(
            Task.title.icontains(search, autoescape=True),
            Task.description.icontains(search, autoescape=True)
        ))

    try:
        return query.order_by(Task.created_at.desc(), Task.id.desc()).all()
    except SQLAlchemyError as e:
        logger.error(f"Failed to query tasks for {user_id}: {e}", exc_info=True)
        raise StorageError("Failed to fetch tasks") from e


def count_tasks(db: Session, user_id: str, status: Optional[TaskStatus] = None) -> int:
    """Count tasks owned by user_id, optionally restricted to one status."""
    query = db.query(func.count(Task.id)).filter(Task.user_id == user_id)
    if status:
        query = query.filter(Task.status == status)

    try:
        return query.scalar() or 0
    except SQLAlchemyError as e:
        logger.error(f"Failed to count tasks for {user_id}: {e}", exc_info=True)
        raise StorageError("Failed to fetch statistics") from e
