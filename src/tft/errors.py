"""Error taxonomy for the time-for-trial calculator."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tft.engine.validation import ValidationReport


class TimeForTrialError(Exception):
    """Base class for every error raised by this package."""


class InvalidInputError(TimeForTrialError):
    """A required case field is missing or has the wrong shape."""


class DateParseError(TimeForTrialError):
    """A date string is not a real calendar date in YYYY-MM-DD form."""

    def __init__(self, value: object, reason: str = "expected YYYY-MM-DD"):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid date {value!r}: {reason}")


class CaseValidationError(TimeForTrialError):
    """The case facts break one or more date-ordering rules."""

    def __init__(self, report: ValidationReport):
        self.report = report
        failures = "; ".join(r.details or r.name for r in report.failures)
        super().__init__(f"Case failed validation: {failures}")


class CourtCalendarError(TimeForTrialError, RuntimeError):
    """Rollforward ran past its bound. Indicates a broken holiday table."""
