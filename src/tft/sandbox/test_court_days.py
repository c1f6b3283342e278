"""Court calendar: holidays, court days, rollforward (CRLJ 6(a), RCW 1.16.050)."""
from datetime import date, datetime, timedelta
from unittest import mock

import pytest

from tft.engine.court_days import (
    get_next_court_day,
    holiday_name,
    is_court_day,
    is_legal_holiday,
    last_weekday_of_month,
    nth_weekday_of_month,
    washington_holidays,
)
from tft.errors import CourtCalendarError

from .fixtures import d

# (input, expected next court day, why)
ROLLFORWARD_TABLE = [
    # Weekdays stay put
    ("2024-01-08", "2024-01-08", "Monday"),
    ("2024-01-09", "2024-01-09", "Tuesday"),
    ("2024-01-10", "2024-01-10", "Wednesday"),
    ("2024-01-11", "2024-01-11", "Thursday"),
    ("2024-01-12", "2024-01-12", "Friday"),
    # Weekends
    ("2024-01-20", "2024-01-22", "Saturday to Monday"),
    ("2024-01-21", "2024-01-22", "Sunday to Monday"),
    # Each holiday
    ("2025-01-01", "2025-01-02", "New Year's Day"),
    ("2024-01-15", "2024-01-16", "MLK Day, 3rd Monday of January"),
    ("2024-02-19", "2024-02-20", "Presidents' Day, 3rd Monday of February"),
    ("2024-05-27", "2024-05-28", "Memorial Day, last Monday of May"),
    ("2024-06-19", "2024-06-20", "Juneteenth"),
    ("2024-07-04", "2024-07-05", "Independence Day"),
    ("2024-09-02", "2024-09-03", "Labor Day, 1st Monday of September"),
    ("2024-11-11", "2024-11-12", "Veterans Day"),
    ("2024-11-28", "2024-12-02", "Thanksgiving through Native American Heritage Day and weekend"),
    ("2024-11-29", "2024-12-02", "Native American Heritage Day through weekend"),
    ("2024-12-25", "2024-12-26", "Christmas Day"),
    # Weekend observance
    ("2026-07-03", "2026-07-06", "July 4 on Saturday, observed Friday"),
    ("2027-07-05", "2027-07-06", "July 4 on Sunday, observed Monday"),
    ("2021-12-24", "2021-12-27", "Christmas on Saturday, observed Friday"),
    ("2022-12-26", "2022-12-27", "Christmas on Sunday, observed Monday"),
    ("2023-11-10", "2023-11-13", "Veterans Day on Saturday, observed Friday"),
    ("2023-01-02", "2023-01-03", "New Year's on Sunday, observed Monday"),
    ("2022-06-20", "2022-06-21", "Juneteenth on Sunday, observed Monday"),
    ("2021-12-31", "2021-12-31", "Friday Dec 31 before a Saturday New Year's is a court day"),
    # Cascading
    ("2024-01-13", "2024-01-16", "Saturday before MLK Day"),
    ("2026-07-04", "2026-07-06", "Saturday after Friday-observed holiday"),
    ("2024-12-28", "2024-12-30", "weekend after Christmas"),
    ("2025-02-15", "2025-02-18", "Saturday before Presidents' Day"),
    ("2025-08-30", "2025-09-02", "Saturday before Labor Day"),
]


def test_rollforward_table():
    """Every branch: weekday, weekend, each holiday, observed holiday, cascades."""
    for given, expected, why in ROLLFORWARD_TABLE:
        result = get_next_court_day(d(given))
        assert result == d(expected), f"{given} ({why}): expected {expected}, got {result}"


def test_rollforward_lands_on_court_day_and_is_idempotent():
    day = date(2024, 1, 1)
    while day <= date(2027, 12, 31):
        rolled = get_next_court_day(day)
        assert is_court_day(rolled), f"{day} rolled to non-court day {rolled}"
        assert rolled >= day
        assert get_next_court_day(rolled) == rolled, f"not idempotent at {day}"
        day += timedelta(days=1)


def test_rollforward_ignores_time_of_day():
    assert get_next_court_day(datetime(2024, 12, 25, 23, 59)) == date(2024, 12, 26)
    assert is_court_day(datetime(2024, 1, 9, 0, 1))


def test_rollforward_bound_is_fatal():
    with mock.patch("tft.engine.court_days.is_court_day", return_value=False):
        with pytest.raises(CourtCalendarError):
            get_next_court_day(date(2024, 1, 9))


def test_weekends_are_not_court_days():
    assert not is_court_day(d("2024-01-06"))  # Saturday
    assert not is_court_day(d("2024-01-07"))  # Sunday
    assert is_court_day(d("2024-01-05"))      # Friday


def test_nominal_weekend_holiday_is_not_itself_a_holiday():
    # July 4, 2026 is a Saturday; the holiday is the Friday before
    assert not is_legal_holiday(d("2026-07-04"))
    assert is_legal_holiday(d("2026-07-03"))
    assert holiday_name(d("2026-07-03")) == "Independence Day"


def test_holiday_names():
    assert holiday_name(d("2025-02-17")) == "Presidents' Day"
    assert holiday_name(d("2024-11-29")) == "Native American Heritage Day"
    assert holiday_name(d("2021-12-31")) is None
    assert holiday_name(d("2024-01-09")) is None


def test_holiday_table_2025():
    expected = {
        "New Year's Day": "2025-01-01",
        "Martin Luther King Jr. Day": "2025-01-20",
        "Presidents' Day": "2025-02-17",
        "Memorial Day": "2025-05-26",
        "Juneteenth": "2025-06-19",
        "Independence Day": "2025-07-04",
        "Labor Day": "2025-09-01",
        "Veterans Day": "2025-11-11",
        "Thanksgiving Day": "2025-11-27",
        "Native American Heritage Day": "2025-11-28",
        "Christmas Day": "2025-12-25",
    }
    table = {h.name: h.date for h in washington_holidays(2025)}
    assert len(table) == 11
    for name, day in expected.items():
        assert table[name] == d(day), f"{name}: {table[name]} != {day}"


def test_holiday_table_is_sorted_and_marks_observed_shift():
    holidays = washington_holidays(2026)
    assert [h.date for h in holidays] == sorted(h.date for h in holidays)
    july4 = next(h for h in holidays if h.name == "Independence Day")
    assert july4.is_observed_shift
    assert july4.nominal == d("2026-07-04")
    mlk = next(h for h in holidays if h.name == "Martin Luther King Jr. Day")
    assert not mlk.is_observed_shift


def test_nth_and_last_weekday_of_month():
    assert nth_weekday_of_month(2024, 1, 0, 3) == d("2024-01-15")
    assert nth_weekday_of_month(2025, 2, 0, 3) == d("2025-02-17")
    assert nth_weekday_of_month(2024, 11, 3, 4) == d("2024-11-28")
    assert nth_weekday_of_month(2024, 9, 0, 1) == d("2024-09-02")
    assert last_weekday_of_month(2024, 5, 0) == d("2024-05-27")
    assert last_weekday_of_month(2025, 5, 0) == d("2025-05-26")
    # May 31, 2021 is itself the last Monday
    assert last_weekday_of_month(2021, 5, 0) == d("2021-05-31")
