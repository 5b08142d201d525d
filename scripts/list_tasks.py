# scripts/list_tasks.py

from taskboard.db import get_session
from taskboard.repository import TaskRepository


def main():
    gen = get_session()
    session = next(gen)

    rows = TaskRepository(session).list_recent()
    print("TOTAL Task rows:", len(rows))
    for t in rows:
        print(f"id={t.id}  completed={t.completed!r}  created_at={t.created_at!r}  title={t.title!r}")

    session.close()


if __name__ == "__main__":
    main()
