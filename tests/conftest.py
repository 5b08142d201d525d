# tests/conftest.py

from __future__ import annotations

import os

# keep test runs off disk; must happen before taskboard.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ["LOG_TO_FILE"] = "false"
os.environ["TASKBOARD_USERNAME"] = "admin"
os.environ.pop("TASKBOARD_PASSWORD_HASH", None)  # falls back to sha256("admin")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel

from taskboard.db import get_session, make_engine
from taskboard.main import create_app

USERNAME = "admin"
PASSWORD = "admin"


def _memory_engine():
    # one shared connection so every session sees the same in-memory DB
    return make_engine("sqlite://", poolclass=StaticPool)


@pytest.fixture()
def engine():
    eng = _memory_engine()
    SQLModel.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def broken_engine():
    """Engine with no tables: every task query fails with OperationalError."""
    eng = _memory_engine()
    yield eng
    eng.dispose()


@pytest.fixture()
def db(engine):
    with Session(engine) as session:
        yield session


def _app_for(engine):
    app = create_app(init_db=False)

    def _session_override():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _session_override
    return app


@pytest.fixture()
def app(engine):
    return _app_for(engine)


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c


def login(c: TestClient) -> None:
    resp = c.post(
        "/auth/login",
        data={"username": USERNAME, "password": PASSWORD},
        follow_redirects=False,
    )
    assert resp.status_code == 303
    assert resp.headers["location"] == "/tasks"


@pytest.fixture()
def auth_client(client):
    login(client)
    # drop the "logged in" flash so tests only see their own messages
    client.get("/tasks")
    return client


@pytest.fixture()
def broken_client(broken_engine):
    """Logged-in client whose task store fails on every call."""
    with TestClient(_app_for(broken_engine)) as c:
        login(c)
        c.get("/tasks")  # renders the error page, which consumes the login flash
        yield c
