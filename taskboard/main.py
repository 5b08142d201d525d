# taskboard/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, status
from fastapi.responses import RedirectResponse
from starlette.middleware.sessions import SessionMiddleware

from taskboard.config import settings
from taskboard.db import create_db_and_tables
from taskboard.logging_config import setup_logging

# Routers
from taskboard.routers.auth import router as auth_router
from taskboard.routers.health import router as health_router
from taskboard.routers.tasks import router as tasks_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    create_db_and_tables()
    logger.info("Database ready (env=%s)", settings.ENV)
    yield


def create_app(*, init_db: bool = True) -> FastAPI:
    app = FastAPI(
        title=settings.APP_TITLE,
        version="0.1.0",
        lifespan=_lifespan if init_db else None,
    )

    # signed cookie; holds the logged-in user and pending flash messages
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.SESSION_SECRET,
        session_cookie=settings.SESSION_COOKIE,
        max_age=settings.SESSION_MAX_AGE,
        https_only=settings.SESSION_HTTPS_ONLY,
        same_site="lax",
    )

    @app.get("/", include_in_schema=False)
    def root():
        return RedirectResponse("/tasks", status_code=status.HTTP_303_SEE_OTHER)

    # ---------- Routers ----------
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(tasks_router)

    return app


def build() -> FastAPI:
    """Entry point for `uvicorn taskboard.main:build --factory`."""
    setup_logging()
    return create_app()
