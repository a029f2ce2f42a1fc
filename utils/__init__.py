"""Utilities package."""
from .constants import CATEGORIES, CATEGORY_LABELS, DEFAULT_CATEGORY, SCREENS, DEFAULT_SCREEN
from .helpers import category_label, local_date_iso, parse_amount, format_amount, format_signed_amount, format_total
from .logging_setup import configure_logging, get_logger

__all__ = [
    "CATEGORIES",
    "CATEGORY_LABELS",
    "DEFAULT_CATEGORY",
    "SCREENS",
    "DEFAULT_SCREEN",
    "category_label",
    "local_date_iso",
    "parse_amount",
    "format_amount",
    "format_signed_amount",
    "format_total",
    "configure_logging",
    "get_logger",
]
