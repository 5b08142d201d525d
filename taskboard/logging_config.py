# taskboard/logging_config.py
import logging
import logging.config
from pathlib import Path

from taskboard.config import settings

BASE_DIR = Path(__file__).resolve().parent.parent
LOG_DIR = BASE_DIR / "logs"
LOG_FILE = LOG_DIR / "app.log"


def build_logging_config(level: str = "INFO", to_file: bool = True) -> dict:
    handlers = ["console", "file"] if to_file else ["console"]
    access_handlers = ["access_file"] if to_file else ["console"]

    cfg = {
        "version": 1,
        "disable_existing_loggers": False,

        "formatters": {
            "standard": {
                "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            },
            "access": {
                "format": "%(asctime)s | %(levelname)s | uvicorn.access | %(message)s",
            },
        },

        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "level": level,
            },
        },

        "loggers": {
            # Uvicorn core logs
            "uvicorn": {"handlers": handlers, "level": "INFO", "propagate": False},
            "uvicorn.error": {"handlers": handlers, "level": "INFO", "propagate": False},
            "uvicorn.access": {"handlers": access_handlers, "level": "INFO", "propagate": False},
            # FastAPI / app logs
            "fastapi": {"handlers": handlers, "level": level, "propagate": False},
            "taskboard": {"handlers": handlers, "level": level, "propagate": False},
        },

        "root": {"handlers": handlers, "level": level},
    }

    if to_file:
        cfg["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "standard",
            "filename": str(LOG_FILE),
            "maxBytes": 5 * 1024 * 1024,  # 5 MB
            "backupCount": 5,
            "encoding": "utf-8",
            "level": level,
        }
        cfg["handlers"]["access_file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "access",
            "filename": str(LOG_FILE),
            "maxBytes": 5 * 1024 * 1024,
            "backupCount": 5,
            "encoding": "utf-8",
            "level": "INFO",
        }
    return cfg


def setup_logging(level: str | None = None, to_file: bool | None = None) -> None:
    level = (level or settings.LOG_LEVEL).upper()
    to_file = settings.LOG_TO_FILE if to_file is None else to_file
    if to_file:
        LOG_DIR.mkdir(exist_ok=True)
    logging.config.dictConfig(build_logging_config(level, to_file))
    logging.getLogger("taskboard").info("Logging initialized (level=%s, file=%s)", level, to_file)
