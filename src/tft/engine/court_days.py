"""Washington court calendar.

Answers whether a date is a court business day and rolls a deadline forward
to the next one, per CRLJ 6(a) time computation and the legal holidays of
RCW 1.16.050.

The last day of a period is included unless it is a Saturday, a Sunday or a
legal holiday, in which case the period runs to the end of the next day that
is none of those.
"""

from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass
from datetime import date, timedelta
from functools import lru_cache

from tft.dates import parse_local_date
from tft.errors import CourtCalendarError

logger = logging.getLogger(__name__)

MONDAY, THURSDAY, SATURDAY, SUNDAY = 0, 3, 5, 6

# No real calendar has this many non-court days in a row.
MAX_ROLLFORWARD_DAYS = 14


@dataclass(frozen=True)
class Holiday:
    name: str
    date: date
    nominal: date | None = None  # set when the weekend rule moved the holiday

    @property
    def is_observed_shift(self) -> bool:
        return self.nominal is not None and self.nominal != self.date


def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> date:
    """Date of the ``n``th ``weekday`` (Monday=0) in a month."""
    first = date(year, month, 1)
    offset = (weekday - first.weekday()) % 7
    return first + timedelta(days=offset + (n - 1) * 7)


def last_weekday_of_month(year: int, month: int, weekday: int) -> date:
    """Date of the last ``weekday`` (Monday=0) in a month."""
    last = date(year, month, calendar.monthrange(year, month)[1])
    back = (last.weekday() - weekday) % 7
    return last - timedelta(days=back)


def observed_date(nominal: date) -> date:
    """Saturday holidays are observed Friday, Sunday holidays Monday."""
    if nominal.weekday() == SATURDAY:
        return nominal - timedelta(days=1)
    if nominal.weekday() == SUNDAY:
        return nominal + timedelta(days=1)
    return nominal


@lru_cache(maxsize=64)
def washington_holidays(year: int) -> tuple[Holiday, ...]:
    """Observed Washington legal holidays for ``year``, in calendar order.

    Sunday is also a legal holiday under RCW 1.16.050; it is handled by the
    weekend test in :func:`is_court_day` rather than listed here.
    """
    fixed = [
        ("New Year's Day", date(year, 1, 1)),
        ("Juneteenth", date(year, 6, 19)),
        ("Independence Day", date(year, 7, 4)),
        ("Veterans Day", date(year, 11, 11)),
        ("Christmas Day", date(year, 12, 25)),
    ]
    holidays = [Holiday(name, observed_date(nominal), nominal) for name, nominal in fixed]

    # Floating holidays always land on a weekday
    thanksgiving = nth_weekday_of_month(year, 11, THURSDAY, 4)
    holidays += [
        Holiday("Martin Luther King Jr. Day", nth_weekday_of_month(year, 1, MONDAY, 3)),
        Holiday("Presidents' Day", nth_weekday_of_month(year, 2, MONDAY, 3)),
        Holiday("Memorial Day", last_weekday_of_month(year, 5, MONDAY)),
        Holiday("Labor Day", nth_weekday_of_month(year, 9, MONDAY, 1)),
        Holiday("Thanksgiving Day", thanksgiving),
        Holiday("Native American Heritage Day", thanksgiving + timedelta(days=1)),
    ]
    return tuple(sorted(holidays, key=lambda h: h.date))


def holiday_name(day: date) -> str | None:
    """Name of the legal holiday observed on ``day``, if any."""
    day = parse_local_date(day)
    # Only the date's own year is consulted, so a Saturday New Year's
    # observed on Dec 31 does not close the courts that day.
    for holiday in washington_holidays(day.year):
        if holiday.date == day:
            return holiday.name
    return None


def is_legal_holiday(day: date) -> bool:
    return holiday_name(day) is not None


def is_court_day(day: date) -> bool:
    """A court day is a weekday that is not a legal holiday."""
    day = parse_local_date(day)
    if day.weekday() in (SATURDAY, SUNDAY):
        return False
    return not is_legal_holiday(day)


def get_next_court_day(day: date) -> date:
    """Return ``day`` if it is a court day, else the next court day after it."""
    day = parse_local_date(day)
    current = day
    for _ in range(MAX_ROLLFORWARD_DAYS):
        if is_court_day(current):
            if current != day:
                logger.debug("Rolled %s forward to court day %s", day, current)
            return current
        current += timedelta(days=1)
    raise CourtCalendarError(
        f"No court day within {MAX_ROLLFORWARD_DAYS} days of {day}; holiday table is broken"
    )
