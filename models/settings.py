"""Settings management models."""
import os
from utils.constants import CALENDAR_EVENTS_URL
from utils.logging_setup import get_logger

logger = get_logger("expensepal.settings")

DEFAULT_TIMEOUT_S = 10.0
DEFAULT_NOTIFY_WORKERS = 2


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r, not a number; using %s", name, raw, default)
        return default
    if value <= 0:
        logger.warning("Ignoring %s=%r, must be positive; using %s", name, raw, default)
        return default
    return value


def get_settings() -> dict:
    """Get application settings from the environment."""
    token = (os.getenv("EXPENSEPAL_CALENDAR_TOKEN") or "").strip()
    return {
        "calendar_url": (os.getenv("EXPENSEPAL_CALENDAR_URL") or "").strip() or CALENDAR_EVENTS_URL,
        "calendar_token": token or None,
        "calendar_timeout_s": _float_env("EXPENSEPAL_CALENDAR_TIMEOUT", DEFAULT_TIMEOUT_S),
        "notify_workers": max(1, int(_float_env("EXPENSEPAL_NOTIFY_WORKERS", DEFAULT_NOTIFY_WORKERS))),
        "log_level": (os.getenv("EXPENSEPAL_LOG_LEVEL") or "INFO").strip().upper(),
    }
