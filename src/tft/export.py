"""Plain-text summary of a calculation, for pasting into notes or email."""

from __future__ import annotations

from datetime import datetime

from tft.dates import DEFAULT_DISPLAY_FORMAT, format_date
from tft.models import CalculationResult, CaseFacts, CustodyStatus
from tft.rules.loader import RuleBook


def generate_export_text(facts: CaseFacts, result: CalculationResult, rules: RuleBook | None = None,
                         date_format: str = DEFAULT_DISPLAY_FORMAT,
                         generated_at: datetime | None = None) -> str:
    rules = rules or RuleBook()
    generated_at = generated_at or datetime.now()

    def fmt(d):
        return format_date(d, date_format)

    custody = ("Detained in Jail" if facts.custody_status == CustodyStatus.DETAINED
               else "Not Detained in Jail")

    lines = [
        "WA CrRLJ 3.3 TIME FOR TRIAL CALCULATION",
        "=" * 50,
        "",
        f"Generated: {generated_at.strftime('%Y-%m-%d %H:%M')}",
        "",
        f"Arraignment Date: {fmt(facts.arraignment_date)}",
        f"Custody Status: {custody}",
        f"Base Time Limit: {result.base_time_limit} days",
        "",
    ]

    if result.resets:
        lines.append("COMMENCEMENT DATE RESETS:")
        for i, reset in enumerate(result.resets, start=1):
            lines.append(f"  {i}. {rules.reset_label(reset.type)} - {fmt(reset.date)}")
        lines.append("")

    if result.excluded_periods:
        lines.append("EXCLUDED PERIODS:")
        for i, period in enumerate(result.excluded_periods, start=1):
            lines.append(f"  {i}. {rules.exclusion_label(period.type)}")
            lines.append(f"     {fmt(period.start_date)} to {fmt(period.end_date)} ({period.days} days)")
        lines.append("")
        lines.append(f"Total Excluded Days: {result.excluded_days}")
        lines.append("")

    lines.append(f"TRIAL DEADLINE: {fmt(result.applicable_deadline)}")
    if result.use_cure_period:
        lines.append(f"(Includes {result.cure_days}-day cure period)")

    if result.scheduled_trial_date is not None:
        lines.append("")
        lines.append(f"Scheduled Trial: {fmt(result.scheduled_trial_date)}")
        lines.append(f"Status: {'TIMELY' if result.is_timely else 'UNTIMELY'}")

    return "\n".join(lines) + "\n"
