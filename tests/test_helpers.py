import datetime as dt

import pytest

from utils.helpers import (
    category_label,
    format_amount,
    format_signed_amount,
    format_total,
    local_date_iso,
    parse_amount,
)


@pytest.mark.parametrize(
    "value, expected",
    [("-50", -50.0), ("100", 100.0), (" 12.25 ", 12.25), (7, 7.0), ("1e2", 100.0), ("+.5", 0.5), ("3.", 3.0)],
)
def test_parse_amount_accepts_numbers(value, expected):
    assert parse_amount(value) == expected


@pytest.mark.parametrize("value", [None, "", "abc", "NaN", "-inf", True, "1_000", "١٢", "12.5.1", "e5"])
def test_parse_amount_rejects_non_numbers(value):
    assert parse_amount(value) is None


def test_category_label():
    assert category_label("daily") == "Daily"
    assert category_label("monthly") == "Monthly"
    assert category_label("quarterly") == "Quarterly"


def test_format_amount_for_rows():
    assert format_amount(500) == "+ $500"
    assert format_amount(-5) == "- $5"
    assert format_amount(-12.5) == "- $12.5"
    assert format_amount(0) == "- $0"


def test_format_signed_amount_for_events():
    assert format_signed_amount(500) == "+$500"
    assert format_signed_amount(-100) == "$-100"


def test_format_total():
    assert format_total(-42) == "$-42.00"
    assert format_total(4150) == "$4150.00"


def test_local_date_iso():
    assert local_date_iso(dt.datetime(2024, 12, 11, 23, 59)) == "2024-12-11"
