"""
Task statistics routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from taskflow.db.session import get_db
from taskflow.schemas.stats import TaskStats
from taskflow.services import stats_service

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("/{user_id}", response_model=TaskStats)
def get_stats(user_id: str, db: Session = Depends(get_db)):
    """Get task counts and completion rate for a user."""
    return stats_service.get_stats(user_id, db)
