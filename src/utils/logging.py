"""Logging configuration for the application."""

import logging
import os
import sys
from collections.abc import Iterable

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Library loggers that should propagate to root instead of printing themselves
_PROPAGATING_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "celery")


def _parse_level(level: str) -> int:
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")
    return numeric_level


def _set_logger_levels(names: Iterable[str], level: int) -> None:
    for name in names:
        logging.getLogger(name).setLevel(level)


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "false").strip().lower() == "true"


def configure_logging() -> None:
    """Configure application-wide logging to stdout only.

    Env vars:
      - LOG_LEVEL: DEBUG/INFO/WARNING/ERROR/CRITICAL (default INFO)
      - LOG_UVICORN_ACCESS: true/false (default false)
      - LOG_SQL: true/false, log SQL statements at INFO (default false)
    """
    level_name = os.environ.get("LOG_LEVEL", "INFO")
    level = _parse_level(level_name)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Hard reset: exactly one stdout handler
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(handler)

    for name in _PROPAGATING_LOGGERS:
        lib_logger = logging.getLogger(name)
        lib_logger.handlers.clear()
        lib_logger.propagate = True

    if not _env_flag("LOG_UVICORN_ACCESS"):
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    sql_level = logging.INFO if _env_flag("LOG_SQL") else logging.WARNING
    logging.getLogger("sqlalchemy.engine").setLevel(sql_level)

    _set_logger_levels(("kombu", "httpx", "multipart"), level=max(level, logging.INFO))

    logging.getLogger(__name__).info("Logging configured: level=%s", level_name.upper())
