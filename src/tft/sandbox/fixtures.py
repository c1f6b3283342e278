"""Shared case builders for sandbox tests."""
from datetime import date

from tft.dates import parse_local_date
from tft.models import CaseFacts, CustodyStatus, ExclusionPeriod, ResetEvent

TODAY = date(2025, 1, 15)


def d(text: str) -> date:
    """Shorthand: '2024-01-01' -> date(2024, 1, 1)."""
    return parse_local_date(text)


def reset(on: str, type: str = "waiver", notes: str = "") -> ResetEvent:
    return ResetEvent(type=type, date=on, notes=notes)


def exclusion(start: str, end: str, type: str = "continuance", notes: str = "") -> ExclusionPeriod:
    return ExclusionPeriod(type=type, start_date=start, end_date=end, notes=notes)


def make_case(arraignment: str = "2024-01-01", custody: CustodyStatus = CustodyStatus.DETAINED,
              **overrides) -> CaseFacts:
    base = {
        "arraignment_date": arraignment,
        "custody_status": custody,
        "release_date": None,
        "resets": [],
        "exclusions": [],
        "scheduled_trial_date": None,
        "use_cure_period": False,
    }
    base.update(overrides)
    return CaseFacts(**base)
