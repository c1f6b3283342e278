"""Local calendar-date helpers.

Every date in this package is a plain ``datetime.date``. Strings are split
into year/month/day fields directly, never routed through a timestamp, so a
value like ``2024-01-01`` cannot drift to Dec 31 through a UTC conversion.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta

from tft.errors import DateParseError

_ISO_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")

DEFAULT_DISPLAY_FORMAT = "%a, %b %d, %Y"


def parse_local_date(value: str | date) -> date:
    """Parse a ``YYYY-MM-DD`` string into a calendar date.

    ``date`` instances pass through; a ``datetime`` keeps only its own
    year/month/day. Anything else raises :class:`DateParseError`.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise DateParseError(value, f"expected a string, got {type(value).__name__}")
    text = value.strip()
    if not text:
        raise DateParseError(value, "empty date")
    match = _ISO_DATE.match(text)
    if not match:
        raise DateParseError(value)
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as e:
        raise DateParseError(value, str(e)) from e


def is_valid_date_string(value: str) -> bool:
    """True if ``value`` is a real calendar date in strict YYYY-MM-DD form."""
    try:
        parse_local_date(value)
    except DateParseError:
        return False
    return isinstance(value, str)


def is_valid_date_range(start: str, end: str) -> bool:
    """True if both ends parse and ``end`` is on or after ``start``."""
    try:
        return parse_local_date(end) >= parse_local_date(start)
    except DateParseError:
        return False


def add_days(start: date, days: int) -> date:
    """Add calendar days."""
    return start + timedelta(days=days)


def days_between(start: date, end: date) -> int:
    """Signed number of whole calendar days from ``start`` to ``end``."""
    return (end - start).days


def format_date(value: date, fmt: str = DEFAULT_DISPLAY_FORMAT) -> str:
    return value.strftime(fmt)
