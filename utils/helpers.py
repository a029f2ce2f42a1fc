"""Helper utility functions."""
import datetime as dt
import math
import re
from .constants import CATEGORY_LABELS

AMOUNT_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def category_label(cat: str) -> str:
    """Get display label for category."""
    c = (cat or "").strip()
    return CATEGORY_LABELS.get(c, c.capitalize())


def local_date_iso(now: dt.datetime | None = None) -> str:
    """Today's date in the local timezone as YYYY-MM-DD."""
    now = now or dt.datetime.now()
    return now.date().isoformat()


def parse_amount(value) -> float | None:
    """Parse a signed amount, returning None when it is not a finite number."""
    if value is None or isinstance(value, bool):
        return None
    text = str(value).strip()
    if not AMOUNT_PATTERN.fullmatch(text):
        return None
    amount = float(text)
    if not math.isfinite(amount):
        return None
    return amount


def _plain_number(value: float) -> str:
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_amount(amount: float) -> str:
    """Format a transaction amount for a list row, e.g. '+ $500' or '- $5'."""
    if amount > 0:
        return f"+ ${_plain_number(amount)}"
    return f"- ${_plain_number(abs(amount))}"


def format_signed_amount(amount: float) -> str:
    """Format an amount the way it appears in calendar events, e.g. '+$500' or '$-5'."""
    sign = "+" if amount > 0 else ""
    return f"{sign}${_plain_number(amount)}"


def format_total(value: float) -> str:
    """Format a total for the summary panel."""
    return f"${value:.2f}"
