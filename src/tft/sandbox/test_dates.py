"""Local calendar-date parsing and arithmetic."""
from datetime import date, datetime

import pytest

from tft.dates import (
    add_days,
    days_between,
    format_date,
    is_valid_date_range,
    is_valid_date_string,
    parse_local_date,
)
from tft.errors import DateParseError


def test_parse_keeps_calendar_day():
    """No UTC shift: Jan 1 stays Jan 1."""
    assert parse_local_date("2024-01-01") == date(2024, 1, 1)
    assert parse_local_date("2024-12-31") == date(2024, 12, 31)
    assert parse_local_date(" 2024-02-29 ") == date(2024, 2, 29)


def test_parse_passes_dates_through():
    assert parse_local_date(date(2024, 3, 1)) == date(2024, 3, 1)
    assert parse_local_date(datetime(2024, 3, 1, 23, 30)) == date(2024, 3, 1)


def test_parse_rejects_malformed():
    for bad in ["", "   ", "01-15-2024", "2024/01/15", "not-a-date", "2024-1-15",
                "2024-01-1", "2024-01-150", "2023-02-29", "2024-13-01", "2024-00-10"]:
        with pytest.raises(DateParseError):
            parse_local_date(bad)


def test_parse_rejects_non_strings():
    for bad in [None, 20240101, 1.5]:
        with pytest.raises(DateParseError):
            parse_local_date(bad)


def test_is_valid_date_string():
    assert is_valid_date_string("2024-01-15")
    assert is_valid_date_string("2023-06-01")
    assert not is_valid_date_string("")
    assert not is_valid_date_string("2024/01/15")
    assert not is_valid_date_string("2024-1-15")
    assert not is_valid_date_string("2023-02-29")


def test_is_valid_date_range():
    assert is_valid_date_range("2024-01-01", "2024-01-15")
    assert is_valid_date_range("2024-01-15", "2024-01-15")
    assert not is_valid_date_range("2024-01-15", "2024-01-01")
    assert not is_valid_date_range("invalid", "2024-01-15")
    assert not is_valid_date_range("2024-01-01", "invalid")
    assert not is_valid_date_range("", "")


def test_add_days_boundaries():
    assert add_days(date(2024, 1, 25), 10) == date(2024, 2, 4)
    assert add_days(date(2024, 12, 25), 10) == date(2025, 1, 4)
    assert add_days(date(2024, 2, 28), 1) == date(2024, 2, 29)


def test_add_days_leap_year_limits():
    assert add_days(date(2024, 1, 1), 60) == date(2024, 3, 1)
    assert add_days(date(2024, 1, 1), 90) == date(2024, 3, 31)
    assert add_days(date(2023, 1, 1), 60) == date(2023, 3, 2)


def test_days_between_is_signed():
    assert days_between(date(2024, 1, 1), date(2024, 1, 11)) == 10
    assert days_between(date(2024, 1, 11), date(2024, 1, 1)) == -10
    assert days_between(date(2024, 1, 1), date(2024, 1, 1)) == 0
    assert days_between(date(2024, 2, 1), date(2024, 3, 1)) == 29


def test_format_date():
    assert format_date(date(2025, 2, 3)) == "Mon, Feb 03, 2025"
    assert format_date(date(2025, 2, 3), "%Y-%m-%d") == "2025-02-03"
