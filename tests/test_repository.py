# tests/test_repository.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from sqlmodel import Session

from taskboard.models import Task
from taskboard.repository import TaskRepository, TaskStoreError


def test_list_recent_is_newest_first(db: Session):
    t0 = datetime(2024, 1, 1, tzinfo=timezone.utc)
    for i, title in enumerate(["t1", "t2", "t3"]):
        db.add(Task(title=title, created_at=t0 + timedelta(minutes=i)))
    db.commit()

    titles = [t.title for t in TaskRepository(db).list_recent()]
    assert titles == ["t3", "t2", "t1"]


def test_create_drops_unknown_fields_and_stamps_created_at(db: Session):
    repo = TaskRepository(db)
    task = repo.create({"title": "  Buy milk ", "description": "", "completed": False, "id": 999, "owner": "x"})

    assert task.id is not None and task.id != 999
    assert task.title == "Buy milk"
    assert task.description is None
    assert task.completed is False
    assert task.created_at is not None


def test_create_requires_strict_bool_completed(db: Session):
    with pytest.raises(TaskStoreError):
        TaskRepository(db).create({"title": "x", "completed": "on"})


def test_create_with_blank_title_is_a_store_error(db: Session):
    with pytest.raises(TaskStoreError) as exc:
        TaskRepository(db).create({"title": "   ", "completed": False})
    assert exc.value.operation == "create"
    assert TaskRepository(db).list_recent() == []


def test_get_handles_missing_and_non_numeric_ids(db: Session):
    repo = TaskRepository(db)
    task = repo.create({"title": "x", "completed": False})

    assert repo.get(task.id).title == "x"
    assert repo.get(str(task.id)).id == task.id
    assert repo.get(task.id + 100) is None
    assert repo.get("abc") is None


def test_update_replaces_fields_and_reports_match(db: Session):
    repo = TaskRepository(db)
    task = repo.create({"title": "old", "description": "keep?", "completed": True})

    assert repo.update(task.id, {"title": "new", "completed": False}) is True
    db.expire_all()
    fresh = repo.get(task.id)
    assert fresh.title == "new"
    assert fresh.description is None
    assert fresh.completed is False

    assert repo.update(task.id + 100, {"title": "ghost", "completed": False}) is False


def test_delete_reports_match(db: Session):
    repo = TaskRepository(db)
    task = repo.create({"title": "bye", "completed": False})

    assert repo.delete(task.id) is True
    assert repo.get(task.id) is None
    assert repo.delete(task.id) is False
    assert repo.delete("nope") is False


def test_driver_errors_become_task_store_error(broken_engine):
    with Session(broken_engine) as s:
        repo = TaskRepository(s)
        with pytest.raises(TaskStoreError) as exc:
            repo.list_recent()
        assert exc.value.operation == "list"
        assert exc.value.cause is not None

        for call in (
            lambda: repo.get(1),
            lambda: repo.create({"title": "x", "completed": False}),
            lambda: repo.update(1, {"title": "x", "completed": False}),
            lambda: repo.delete(1),
        ):
            with pytest.raises(TaskStoreError):
                call()


@pytest.mark.parametrize("task_id", ["9" * 25, str(2 ** 63), str(-(2 ** 63) - 1)])
def test_ids_outside_integer_range_match_nothing(db: Session, task_id):
    repo = TaskRepository(db)
    repo.create({"title": "x", "completed": False})

    assert repo.get(task_id) is None
    assert repo.update(task_id, {"title": "y", "completed": False}) is False
    assert repo.delete(task_id) is False
    assert [t.title for t in repo.list_recent()] == ["x"]


def test_update_checks_existence_before_validating(db: Session):
    repo = TaskRepository(db)
    assert repo.update(12345, {"title": "", "completed": False}) is False
    task = repo.create({"title": "x", "completed": False})
    with pytest.raises(TaskStoreError):
        repo.update(task.id, {"title": "", "completed": False})
