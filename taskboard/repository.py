# taskboard/repository.py
"""
Task persistence.

Every failure of the store (driver/connection errors, constraint errors,
invalid field values) leaves this module as a TaskStoreError, so route
handlers only ever have one error type to catch.
"""
from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional

from fastapi import Depends
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from taskboard.db import get_session
from taskboard.models import Task
from taskboard.schemas import TaskIn

logger = logging.getLogger(__name__)

_MIN_ID = -(2 ** 63)
_MAX_ID = 2 ** 63 - 1


class TaskStoreError(Exception):
    """A task store operation failed."""

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        msg = f"task store {operation} failed"
        if cause is not None:
            msg = f"{msg}: {cause}"
        super().__init__(msg)


def _parse_id(task_id: Any) -> Optional[int]:
    """Ids come straight off the URL; anything non-numeric can't match a row."""
    try:
        pk = int(str(task_id).strip())
    except (TypeError, ValueError):
        return None
    # wider than a 64-bit INTEGER column: no row can have it
    if not _MIN_ID <= pk <= _MAX_ID:
        return None
    return pk


def _validate(operation: str, fields: Mapping[str, Any]) -> TaskIn:
    try:
        return TaskIn.model_validate(dict(fields))
    except ValidationError as e:
        raise TaskStoreError(operation, e) from e


class TaskRepository:
    def __init__(self, session: Session):
        self.session = session

    def list_recent(self) -> List[Task]:
        """All tasks, newest first."""
        try:
            stmt = select(Task).order_by(Task.created_at.desc(), Task.id.desc())
            return list(self.session.exec(stmt).all())
        except SQLAlchemyError as e:
            raise TaskStoreError("list", e) from e

    def get(self, task_id: Any) -> Optional[Task]:
        pk = _parse_id(task_id)
        if pk is None:
            return None
        try:
            return self.session.get(Task, pk)
        except SQLAlchemyError as e:
            raise TaskStoreError("get", e) from e

    def create(self, fields: Mapping[str, Any]) -> Task:
        data = _validate("create", fields)
        task = Task(**data.model_dump())
        try:
            self.session.add(task)
            self.session.commit()
            self.session.refresh(task)
        except SQLAlchemyError as e:
            self.session.rollback()
            raise TaskStoreError("create", e) from e
        logger.info("created task id=%s", task.id)
        return task

    def update(self, task_id: Any, fields: Mapping[str, Any]) -> bool:
        """Replace the editable fields of a task. Returns False when no task matched."""
        pk = _parse_id(task_id)
        if pk is None:
            return False
        try:
            task = self.session.get(Task, pk)
        except SQLAlchemyError as e:
            raise TaskStoreError("update", e) from e
        if task is None:
            return False
        data = _validate("update", fields)
        try:
            for key, value in data.model_dump().items():
                setattr(task, key, value)
            self.session.add(task)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise TaskStoreError("update", e) from e
        logger.info("updated task id=%s", pk)
        return True

    def delete(self, task_id: Any) -> bool:
        """Returns False when no task matched."""
        pk = _parse_id(task_id)
        if pk is None:
            return False
        try:
            task = self.session.get(Task, pk)
            if task is None:
                return False
            self.session.delete(task)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise TaskStoreError("delete", e) from e
        logger.info("deleted task id=%s", pk)
        return True


def get_task_repository(session: Session = Depends(get_session)) -> TaskRepository:
    return TaskRepository(session)
