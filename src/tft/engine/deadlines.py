"""Time-for-trial deadline engine (CrRLJ 3.3).

Derives the effective commencement date, the excluded time, the base and
final trial deadlines, the optional cure deadline, and whether a scheduled
trial date is timely. Pure computation: the same facts always give the same
result, and nothing is stored between calls.

Order of the rules matters:

1. The latest reset, if any, replaces the arraignment as commencement date.
2. Base limit is 60 days detained, 90 days not detained. A detained
   defendant released before day 60 gets the 90-day limit.
3. Base deadline = commencement + limit + excluded days.
4. The trial must be allowed at least 30 days after the last excluded
   period ends. This comparison uses raw calendar dates.
5. The result rolls forward to a court day.
6. The cure period, when elected, is added to the rolled deadline and rolled
   again.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date

from tft.dates import add_days, days_between
from tft.engine.court_days import get_next_court_day
from tft.engine.validation import validate_case
from tft.errors import CaseValidationError
from tft.models import (
    CalculatedExclusionPeriod,
    CalculationResult,
    CaseFacts,
    CustodyStatus,
    ExclusionPeriod,
    ResetEvent,
)

logger = logging.getLogger(__name__)

DETAINED_TIME_LIMIT = 60
NOT_DETAINED_TIME_LIMIT = 90
MINIMUM_DAYS_AFTER_EXCLUSION = 30
DETAINED_CURE_DAYS = 14
NOT_DETAINED_CURE_DAYS = 28


def effective_commencement_date(initial: date, resets: Iterable[ResetEvent]) -> date:
    """Most recent reset date, or ``initial`` when there are no resets.

    Each reset restarts the clock at zero, so only the latest one matters.
    """
    latest = max((r.date for r in resets), default=None)
    return latest if latest is not None else initial


def calculate_excluded_days(
    commencement: date, exclusions: Iterable[ExclusionPeriod]
) -> tuple[int, list[CalculatedExclusionPeriod]]:
    """Total excluded days and the per-period breakdown.

    Days are counted inclusively. Periods starting before ``commencement`` are
    dropped whole, not clipped. Overlapping periods are each counted in full.
    """
    total = 0
    periods: list[CalculatedExclusionPeriod] = []
    for exclusion in exclusions:
        if exclusion.start_date < commencement:
            logger.debug(
                "Dropping %s exclusion starting %s, before commencement %s",
                exclusion.type or "untyped", exclusion.start_date, commencement,
            )
            continue
        days = days_between(exclusion.start_date, exclusion.end_date) + 1
        total += days
        periods.append(CalculatedExclusionPeriod(
            type=exclusion.type,
            start_date=exclusion.start_date,
            end_date=exclusion.end_date,
            days=days,
        ))
    return total, periods


def latest_exclusion_end_date(exclusions: Iterable[ExclusionPeriod]) -> date | None:
    return max((e.end_date for e in exclusions), default=None)


def base_time_limit(custody: CustodyStatus, commencement: date,
                    release_date: date | None = None) -> tuple[int, bool]:
    """Return ``(limit_days, was_released)``.

    Release strictly before the 60-day mark extends the limit to 90 days.
    Release on day 60 itself does not.
    """
    if custody != CustodyStatus.DETAINED:
        return NOT_DETAINED_TIME_LIMIT, False
    if release_date is not None and release_date < add_days(commencement, DETAINED_TIME_LIMIT):
        return NOT_DETAINED_TIME_LIMIT, True
    return DETAINED_TIME_LIMIT, False


def cure_period_days(custody: CustodyStatus) -> int:
    return DETAINED_CURE_DAYS if custody == CustodyStatus.DETAINED else NOT_DETAINED_CURE_DAYS


def calculate(facts: CaseFacts, today: date | None = None, strict: bool = False) -> CalculationResult:
    """Compute every deadline for a case.

    With ``strict`` the date-ordering checks run first and any failure raises
    CaseValidationError. Otherwise out-of-order dates are computed with the
    fallback semantics above.
    """
    if strict:
        report = validate_case(facts)
        if not report.all_passed:
            raise CaseValidationError(report)

    today = today or date.today()

    initial = facts.arraignment_date
    commencement = effective_commencement_date(initial, facts.resets)
    logger.debug("Commencement %s (initial %s, %d resets)", commencement, initial, len(facts.resets))

    limit, was_released = base_time_limit(facts.custody_status, commencement, facts.release_date)

    excluded_days, excluded_periods = calculate_excluded_days(commencement, facts.exclusions)
    logger.debug("Excluded %d days across %d periods", excluded_days, len(excluded_periods))

    base_deadline = add_days(commencement, limit + excluded_days)

    final_deadline = base_deadline
    thirty_day_rule_applied = False
    latest_end = latest_exclusion_end_date(facts.exclusions)
    if latest_end is not None:
        minimum = add_days(latest_end, MINIMUM_DAYS_AFTER_EXCLUSION)
        if minimum > final_deadline:
            final_deadline = minimum
            thirty_day_rule_applied = True

    final_deadline = get_next_court_day(final_deadline)
    logger.debug("Base deadline %s, final deadline %s", base_deadline, final_deadline)

    cure_days = 0
    cure_deadline = None
    if facts.use_cure_period:
        cure_days = cure_period_days(facts.custody_status)
        cure_deadline = get_next_court_day(add_days(final_deadline, cure_days))
        logger.debug("Cure period of %d days ends %s", cure_days, cure_deadline)

    is_timely = None
    days_until_deadline = None
    if facts.scheduled_trial_date is not None:
        applicable = cure_deadline if facts.use_cure_period and cure_deadline else final_deadline
        is_timely = facts.scheduled_trial_date <= applicable
        days_until_deadline = days_between(today, applicable)

    return CalculationResult(
        initial_commencement_date=initial,
        effective_commencement_date=commencement,
        base_time_limit=limit,
        was_released=was_released,
        excluded_days=excluded_days,
        excluded_periods=excluded_periods,
        base_deadline=base_deadline,
        thirty_day_rule_applied=thirty_day_rule_applied,
        final_deadline=final_deadline,
        use_cure_period=facts.use_cure_period,
        cure_days=cure_days,
        cure_deadline=cure_deadline,
        scheduled_trial_date=facts.scheduled_trial_date,
        is_timely=is_timely,
        days_until_deadline=days_until_deadline,
        resets=list(facts.resets),
    )
