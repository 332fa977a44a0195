"""
Task CRUD routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional
from taskflow.db.session import get_db
from taskflow.schemas.task import TaskCreate, TaskUpdate, TaskResponse, TaskDeleteResponse
from taskflow.services import task_service
from taskflow.services.task_service import TaskSort

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("/{user_id}", response_model=List[TaskResponse])
def list_tasks(
    user_id: str,
    status: Optional[str] = None,
    priority: Optional[str] = None,
    search: Optional[str] = None,
    sort: Optional[TaskSort] = None,
    db: Session = Depends(get_db)
):
    """Get all tasks for a user, optionally filtered and sorted."""
    return task_service.list_tasks(
        user_id,
        status=status,
        priority=priority,
        search=search,
        sort=sort,
        db=db
    )


@router.get("/{user_id}/{task_id}", response_model=TaskResponse)
def get_task(user_id: str, task_id: int, db: Session = Depends(get_db)):
    """Get a single task owned by the user."""
    return task_service.get_task(user_id, task_id, db)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(task_data: TaskCreate, db: Session = Depends(get_db)):
    """Create a task."""
    return task_service.create_task(
        task_data.user_id,
        task_data.title,
        description=task_data.description,
        priority=task_data.priority,
        status=task_data.status,
        due_date=task_data.due_date,
        db=db
    )


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(task_id: int, task_data: TaskUpdate, db: Session = Depends(get_db)):
    """Replace every field of a task."""
    return task_service.update_task(task_id, task_data.model_dump(), db)


@router.delete("/{task_id}", response_model=TaskDeleteResponse)
def delete_task(task_id: int, db: Session = Depends(get_db)):
    """Delete a task."""
    task_service.delete_task(task_id, db)
    return TaskDeleteResponse(message="Task deleted successfully")
