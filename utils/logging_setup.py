"""Logging for ExpensePal.

Streamlit re-executes ``app.py`` on every interaction, so the handler is
attached once per process and later calls are no-ops. Modules take their
logger from ``get_logger("expensepal.<module>")``; nothing is printed until
``app.py`` calls ``configure_logging``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

LOGGER_NAME = "expensepal"
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
_CONFIGURED = False


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = os.getenv("EXPENSEPAL_LOG_LEVEL", "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: int | str | None = None, *, stream: IO[str] = sys.stderr) -> None:
    """Send ``expensepal.*`` records to ``stream`` at ``level``.

    ``level`` defaults to ``EXPENSEPAL_LOG_LEVEL``, then INFO. Unknown level
    names also fall back to INFO.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers = [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(_resolve_level(level))
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    root = logging.getLogger(LOGGER_NAME)
    if not _CONFIGURED and not root.handlers:
        root.addHandler(logging.NullHandler())
    return logging.getLogger(name)
