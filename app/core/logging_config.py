import logging
import logging.config
import os
from app.core.config import settings

ROTATING_FILE = "logging.handlers.RotatingFileHandler"
MAX_BYTES = 10485760  # 10MB


def _file_handler(name: str, level: str) -> dict:
    return {
        "class": ROTATING_FILE,
        "level": level,
        "formatter": "detailed",
        "filename": os.path.join(settings.LOG_DIR, f"{name}.log"),
        "maxBytes": MAX_BYTES,
        "backupCount": 10,
        "encoding": "utf-8",
    }


def setup_logging():
    """Console plus rotating files under LOG_DIR.

    app.log gets everything at LOG_LEVEL, error.log only errors, attendance.log
    the engine's schedule fallbacks and review flags, celery.log the workers.
    """
    os.makedirs(settings.LOG_DIR, exist_ok=True)
    engine_level = "DEBUG" if settings.DEBUG else "INFO"

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "detailed": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(module)s - %(funcName)s:%(lineno)d - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": settings.LOG_LEVEL,
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
            "app_file": _file_handler("app", settings.LOG_LEVEL),
            "error_file": _file_handler("error", "ERROR"),
            "attendance_file": _file_handler("attendance", engine_level),
            "celery_file": _file_handler("celery", "INFO"),
        },
        "loggers": {
            "": {
                "level": settings.LOG_LEVEL,
                "handlers": ["console", "app_file", "error_file"],
            },
            "app.services.hr.attendance": {
                "level": engine_level,
                "handlers": ["attendance_file"],
                "propagate": True,
            },
            "celery": {
                "level": "INFO",
                "handlers": ["celery_file", "console"],
                "propagate": False,
            },
            "sqlalchemy.engine": {
                "level": "WARNING",
                "handlers": ["app_file"],
                "propagate": False,
            },
        },
    }

    logging.config.dictConfig(logging_config)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured: level {settings.LOG_LEVEL}, directory {settings.LOG_DIR}")
