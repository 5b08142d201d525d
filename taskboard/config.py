# taskboard/config.py
import hashlib
import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parents[1]
# load .env into process env vars (real env wins)
load_dotenv(ROOT / ".env")


def _as_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in ("1", "true", "yes", "y", "on")


def _as_int(name: str, default: int) -> int:
    try:
        return int(str(os.getenv(name, default)).strip())
    except (TypeError, ValueError):
        return default


def _default_password_hash() -> str:
    # sha256("admin"), only meant for local dev
    return hashlib.sha256(b"admin").hexdigest()


class Settings:
    # App
    ENV: str = os.getenv("ENV", "dev")
    PORT: int = _as_int("PORT", 8000)
    APP_TITLE: str = os.getenv("APP_TITLE", "Taskboard")

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///data/taskboard.db")

    # Session cookie (flash messages + login live here)
    SESSION_SECRET: str = os.getenv("SESSION_SECRET", "dev-session-secret")
    SESSION_COOKIE: str = os.getenv("SESSION_COOKIE", "taskboard_session")
    SESSION_MAX_AGE: int = _as_int("SESSION_MAX_AGE", 60 * 60 * 24 * 7)  # 7 days
    SESSION_HTTPS_ONLY: bool = _as_bool("SESSION_HTTPS_ONLY", False)

    # Operator account
    TASKBOARD_USERNAME: str = os.getenv("TASKBOARD_USERNAME", "admin").strip()
    TASKBOARD_PASSWORD_HASH: str = (
        os.getenv("TASKBOARD_PASSWORD_HASH") or _default_password_hash()
    ).strip().lower()

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_TO_FILE: bool = _as_bool("LOG_TO_FILE", True)


settings = Settings()
