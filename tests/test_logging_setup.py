import io
import logging

import pytest

from utils import logging_setup


@pytest.fixture
def fresh_logger(reset_logging):
    return reset_logging


def test_get_logger_is_silent_until_configured(fresh_logger):
    logging_setup.get_logger("expensepal.ledger")

    assert any(isinstance(h, logging.NullHandler) for h in fresh_logger.handlers)


def test_configure_logging_attaches_one_stream_handler(fresh_logger):
    stream = io.StringIO()

    logging_setup.configure_logging("DEBUG", stream=stream)
    logging_setup.configure_logging("ERROR", stream=stream)
    logging_setup.get_logger("expensepal.ledger").debug("added transaction")

    stream_handlers = [h for h in fresh_logger.handlers if isinstance(h, logging.StreamHandler)]
    assert len(stream_handlers) == 1
    assert fresh_logger.level == logging.DEBUG
    assert not fresh_logger.propagate
    assert "added transaction" in stream.getvalue()


def test_level_from_environment(fresh_logger, monkeypatch):
    monkeypatch.setenv("EXPENSEPAL_LOG_LEVEL", "warning")

    logging_setup.configure_logging(stream=io.StringIO())

    assert fresh_logger.level == logging.WARNING


def test_unknown_level_name_falls_back_to_info(fresh_logger):
    logging_setup.configure_logging("chatty", stream=io.StringIO())

    assert fresh_logger.level == logging.INFO
