# taskboard/db.py
from pathlib import Path

from sqlmodel import SQLModel, create_engine, Session

from taskboard import models  # noqa: F401  ensures Task is registered before create_all()
from taskboard.config import settings

DATABASE_URL = settings.DATABASE_URL


def make_engine(url: str = DATABASE_URL, **kwargs):
    # SQLite needs this connect arg and a real folder
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    if url.startswith("sqlite:///") and url != "sqlite:///:memory:":
        Path(url[len("sqlite:///"):]).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(url, connect_args=connect_args, **kwargs)


engine = make_engine()


def create_db_and_tables(bind=None) -> None:
    SQLModel.metadata.create_all(bind or engine)


def get_session():
    with Session(engine) as session:
        yield session
