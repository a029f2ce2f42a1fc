"""Pytest configuration.

Puts the repository root on sys.path so ``models``, ``views`` and ``utils``
import the same way they do under ``streamlit run app.py``.
"""

import logging
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from models.ledger import seed_ledger  # noqa: E402

FIXED_NOW = 1734000000.0


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def ledger(clock):
    return seed_ledger(clock=clock)


@pytest.fixture(autouse=True)
def reset_logging(monkeypatch):
    """Undo ``configure_logging`` so caplog keeps seeing records between tests."""
    from utils import logging_setup

    logger = logging.getLogger(logging_setup.LOGGER_NAME)
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    monkeypatch.setattr(logging_setup, "_CONFIGURED", False)
    logger.handlers = []
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate
