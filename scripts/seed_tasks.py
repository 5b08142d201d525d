# scripts/seed_tasks.py
import sys

from sqlmodel import Session, select

from taskboard.db import engine, create_db_and_tables
from taskboard.repository import TaskRepository
from taskboard.models import Task

SAMPLE_TASKS = [
    {"title": "Read the onboarding notes", "completed": True},
    {"title": "Set SESSION_SECRET in .env", "description": "Any long random string.", "completed": False},
    {"title": "Change the operator password", "completed": False},
]


def main(force: bool = False) -> None:
    create_db_and_tables()
    with Session(engine) as s:
        existing = s.exec(select(Task)).first()
        if existing and not force:
            print("tasks already present, skipping (pass --force to add anyway)")
            return
        repo = TaskRepository(s)
        for fields in SAMPLE_TASKS:
            t = repo.create(fields)
            print(f"created task id={t.id} title={t.title!r}")


if __name__ == "__main__":
    main(force="--force" in sys.argv[1:])
