"""
Logging for PayNote.

main.py calls configure_logging() once when the app starts, with
the LOG_LEVEL setting. Services and routers only ever call
get_logger(__name__); every logger they get hangs off the
"paynote" logger, so one handler there covers the whole app.

Until configure_logging() runs (in tests, or when a service is
used from a script) the "paynote" logger stays quiet.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

APP_LOGGER_NAME = "paynote"

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def _resolve_level(level: int | str | None) -> int:
    """Turn "debug", "20" or logging.DEBUG into a level number; INFO otherwise."""
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        name = level.strip().upper()
        if name.isdigit():
            return int(name)
        value = logging.getLevelName(name)
        if isinstance(value, int):
            return value
    return logging.INFO


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """Send PayNote's log records to ``stream``. Later calls do nothing."""
    global _configured
    if _configured:
        return

    app_logger = logging.getLogger(APP_LOGGER_NAME)
    for handler in list(app_logger.handlers):
        if isinstance(handler, logging.NullHandler):
            app_logger.removeHandler(handler)

    resolved = _resolve_level(level)
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
    app_logger.addHandler(handler)
    app_logger.setLevel(resolved)
    # uvicorn configures the root logger too
    app_logger.propagate = False

    _configured = True


def get_logger(name: str) -> logging.Logger:
    app_logger = logging.getLogger(APP_LOGGER_NAME)
    if not _configured and not app_logger.handlers:
        app_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
