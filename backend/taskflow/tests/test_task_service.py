"""
Tests for task service rules: creation defaults, sorting and overdue detection.
"""
from datetime import date, datetime, timedelta
from types import SimpleNamespace

import pytest
from taskflow.core.exceptions import NotFoundError, ValidationError
from taskflow.models.task import TaskPriority, TaskStatus
from taskflow.services import task_service
from taskflow.services.task_service import TaskSort, is_overdue, sort_tasks


def make(title, priority="medium", status="pending", due_date=None, created_minute=0):
    return SimpleNamespace(
        title=title,
        priority=priority,
        status=status,
        due_date=due_date,
        created_at=datetime(2024, 1, 1, 12, created_minute)
    )


def titles(tasks):
    return [t.title for t in tasks]


def test_create_defaults(db):
    task = task_service.create_task("user_a", "Read book", db=db)
    assert task.id is not None
    assert task.description == ""
    assert task.priority == TaskPriority.MEDIUM
    assert task.status == TaskStatus.PENDING
    assert task.due_date is None


@pytest.mark.parametrize("title", ["", "   ", "\t\n"])
def test_create_rejects_blank_title(db, title):
    with pytest.raises(ValidationError):
        task_service.create_task("user_a", title, db=db)


def test_create_requires_user_id(db):
    with pytest.raises(ValidationError):
        task_service.create_task(None, "title", db=db)


def test_update_checks_existence_before_fields(db):
    with pytest.raises(NotFoundError):
        task_service.update_task(123, {"title": ""}, db)


def test_delete_then_missing(db):
    task = task_service.create_task("user_a", "temp", db=db)
    task_service.delete_task(task.id, db)
    assert task_service.list_tasks("user_a", db=db) == []
    with pytest.raises(NotFoundError):
        task_service.delete_task(task.id, db)


def test_sort_by_due_date_puts_undated_last():
    tasks = [
        make("none-1"),
        make("march", due_date=date(2024, 3, 1)),
        make("none-2"),
        make("january", due_date=date(2024, 1, 1)),
    ]
    assert titles(sort_tasks(tasks, TaskSort.DUE_DATE)) == ["january", "march", "none-1", "none-2"]
    assert titles(sort_tasks(list(reversed(tasks)), TaskSort.DUE_DATE)) == ["january", "march", "none-2", "none-1"]


def test_sort_by_priority():
    tasks = [make("low", priority="low"), make("high", priority="high"), make("medium", priority="medium")]
    assert titles(sort_tasks(tasks, TaskSort.PRIORITY)) == ["high", "medium", "low"]


def test_sort_by_created():
    tasks = [make("b", created_minute=2), make("a", created_minute=1), make("c", created_minute=3)]
    assert titles(sort_tasks(tasks, TaskSort.NEWEST)) == ["c", "b", "a"]
    assert titles(sort_tasks(tasks, TaskSort.OLDEST)) == ["a", "b", "c"]
    assert titles(sort_tasks(tasks, None)) == ["b", "a", "c"]


def test_is_overdue():
    today = date(2024, 5, 10)
    yesterday = today - timedelta(days=1)

    assert is_overdue(make("late", due_date=yesterday), today)
    assert is_overdue(make("late", status="in-progress", due_date=yesterday), today)
    assert not is_overdue(make("done", status="completed", due_date=yesterday), today)
    assert not is_overdue(make("today", due_date=today), today)
    assert not is_overdue(make("undated"), today)


def test_update_loads_task_once(db, monkeypatch):
    task = task_service.create_task("user_a", "original", db=db)
    calls = []
    real_get_task = task_service.repository.get_task

    def counting_get_task(session, task_id):
        calls.append(task_id)
        return real_get_task(session, task_id)

    monkeypatch.setattr(task_service.repository, "get_task", counting_get_task)
    updated = task_service.update_task(
        task.id,
        {"title": "renamed", "priority": "high", "status": "completed"},
        db
    )

    assert calls == [task.id]
    assert updated.title == "renamed"
    assert updated.status == TaskStatus.COMPLETED


def test_list_unknown_filter_value_is_empty(db):
    task_service.create_task("user_a", "something", db=db)
    assert task_service.list_tasks("user_a", status="archived", db=db) == []
    assert task_service.list_tasks("user_a", priority="urgent", db=db) == []
    assert len(task_service.list_tasks("user_a", status="all", priority="all", db=db)) == 1
