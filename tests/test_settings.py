import logging

import pytest

from models.settings import DEFAULT_NOTIFY_WORKERS, DEFAULT_TIMEOUT_S, get_settings
from utils.constants import CALENDAR_EVENTS_URL

ENV_VARS = [
    "EXPENSEPAL_CALENDAR_URL",
    "EXPENSEPAL_CALENDAR_TOKEN",
    "EXPENSEPAL_CALENDAR_TIMEOUT",
    "EXPENSEPAL_NOTIFY_WORKERS",
    "EXPENSEPAL_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_disable_notifications():
    settings = get_settings()

    assert settings["calendar_url"] == CALENDAR_EVENTS_URL
    assert settings["calendar_token"] is None
    assert settings["calendar_timeout_s"] == DEFAULT_TIMEOUT_S
    assert settings["notify_workers"] == DEFAULT_NOTIFY_WORKERS
    assert settings["log_level"] == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("EXPENSEPAL_CALENDAR_URL", "https://calendar.example.org/events")
    monkeypatch.setenv("EXPENSEPAL_CALENDAR_TOKEN", " ya29.token ")
    monkeypatch.setenv("EXPENSEPAL_CALENDAR_TIMEOUT", "2.5")
    monkeypatch.setenv("EXPENSEPAL_NOTIFY_WORKERS", "4")
    monkeypatch.setenv("EXPENSEPAL_LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings["calendar_url"] == "https://calendar.example.org/events"
    assert settings["calendar_token"] == "ya29.token"
    assert settings["calendar_timeout_s"] == 2.5
    assert settings["notify_workers"] == 4
    assert settings["log_level"] == "DEBUG"


def test_bad_numbers_fall_back_to_defaults(monkeypatch, caplog):
    monkeypatch.setenv("EXPENSEPAL_CALENDAR_TIMEOUT", "soon")
    monkeypatch.setenv("EXPENSEPAL_NOTIFY_WORKERS", "-3")

    with caplog.at_level(logging.WARNING, logger="expensepal.settings"):
        settings = get_settings()

    assert settings["calendar_timeout_s"] == DEFAULT_TIMEOUT_S
    assert settings["notify_workers"] == DEFAULT_NOTIFY_WORKERS
    assert "EXPENSEPAL_CALENDAR_TIMEOUT" in caplog.text
