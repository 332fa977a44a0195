"""
Tests for engine setup and the repository update operation.
"""
import pytest
from taskflow.core.exceptions import NotFoundError
from taskflow.db import repository
from taskflow.db.session import create_db_engine, init_db
from taskflow.models.task import Task, TaskPriority, TaskStatus


def test_engine_creation_does_not_touch_disk(tmp_path):
    """Only init_db creates the database directory."""
    db_dir = tmp_path / "nested" / "data"
    engine = create_db_engine(f"sqlite:///{db_dir / 'tasks.db'}")
    try:
        assert not db_dir.exists()
        init_db(engine)
        assert (db_dir / "tasks.db").exists()
    finally:
        engine.dispose()


def test_repository_update_task(db):
    task = repository.insert_task(db, Task(user_id="user_a", title="before"))

    updated = repository.update_task(db, task.id, {
        "title": "after",
        "description": "",
        "priority": TaskPriority.LOW,
        "status": TaskStatus.IN_PROGRESS,
    })
    assert updated.title == "after"
    assert updated.priority == TaskPriority.LOW
    assert updated.status == TaskStatus.IN_PROGRESS
    assert updated.description == ""
    assert updated.due_date is None


def test_repository_update_missing_task(db):
    with pytest.raises(NotFoundError):
        repository.update_task(db, 999, {"title": "x"})
