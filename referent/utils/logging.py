"""Logging configuration for the API and the console session."""

import logging
import os
import sys
from collections.abc import Iterable

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

# Outbound HTTP libraries log every connection at DEBUG
HTTP_LOGGERS = ("urllib3", "httpx", "charset_normalizer")


def _parse_level(level: str) -> int:
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")
    return numeric_level


def _route_through_root(names: Iterable[str]) -> None:
    for name in names:
        lib_logger = logging.getLogger(name)
        lib_logger.handlers.clear()
        lib_logger.propagate = True


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "false").strip().lower() == "true"


def configure_logging(level_name: str | None = None) -> None:
    """Send all logging to stdout through a single root handler.

    Env vars:
      - LOG_LEVEL: DEBUG/INFO/WARNING/ERROR/CRITICAL (default INFO)
      - LOG_UVICORN_ACCESS: true/false (default false)

    :param level_name: Level to use instead of LOG_LEVEL.
    :raises ValueError: If the level name is not a logging level.
    """
    level_name = (level_name or os.environ.get("LOG_LEVEL", "INFO")).upper()
    level = _parse_level(level_name)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(handler)

    _route_through_root(UVICORN_LOGGERS)
    if not _env_flag("LOG_UVICORN_ACCESS"):
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.INFO))

    logging.getLogger(__name__).info(f"Logging configured: level={level_name}")
