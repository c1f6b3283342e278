"""Time for Trial CLI.

Usage:
    tft calc case.yaml
    tft calc case.json --today 2025-01-15 --json
    tft export case.yaml
    tft validate case.yaml
    tft check 2025-02-17
    tft holidays 2025

Case files are YAML or JSON:

    arraignment_date: 2024-12-03
    custody_status: detained        # or not-detained
    release_date: 2025-01-10        # optional
    resets:
      - {type: waiver, date: 2025-01-02}
    exclusions:
      - {type: competency, start_date: 2025-01-05, end_date: 2025-01-20}
    scheduled_trial_date: 2025-03-01
    use_cure_period: false
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from tft.config import get_settings, setup_logging
from tft.dates import format_date, parse_local_date
from tft.errors import CaseValidationError, DateParseError, InvalidInputError

app = typer.Typer(name="tft", help="CrRLJ 3.3 time-for-trial deadline calculator for Washington courts")
console = Console()
logger = logging.getLogger(__name__)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    settings = get_settings()
    setup_logging(settings.log_level, verbose=verbose)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _fail(message: str) -> None:
    console.print(f"[red]{message}[/red]")
    raise typer.Exit(1)


def _load_case(case_file: Path):
    from tft.models import CaseFacts

    try:
        return CaseFacts.load(case_file)
    except (InvalidInputError, DateParseError) as e:
        _fail(f"Cannot read {case_file}: {e}")


def _parse_option_date(value: Optional[str], option: str) -> Optional[date]:
    if not value:
        return None
    try:
        return parse_local_date(value)
    except DateParseError as e:
        _fail(f"{option}: {e}")


def _rule_book():
    from tft.rules.loader import load_rule_book

    settings = get_settings()
    return load_rule_book(settings.rules_path, settings.rule_file)


def _print_validation(report) -> None:
    for r in report.results:
        if r.passed:
            continue
        color = "yellow" if r.severity == "warning" else "red"
        console.print(f"  [{color}]{r.check_id}[/{color}] {r.details or r.name}")


# ---------------------------------------------------------------------------
# tft calc
# ---------------------------------------------------------------------------

@app.command()
def calc(
    case_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="YAML or JSON case file"),
    today: Optional[str] = typer.Option(None, help="Treat this date (YYYY-MM-DD) as today"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    allow_invalid: bool = typer.Option(False, "--allow-invalid",
                                       help="Calculate even when date-ordering checks fail"),
):
    """Calculate the trial deadline for a case."""
    from tft.engine.deadlines import calculate
    from tft.engine.validation import validate_case

    settings = get_settings()
    facts = _load_case(case_file)
    today_date = _parse_option_date(today, "--today")

    report = validate_case(facts)
    if not report.all_passed and not allow_invalid:
        console.print("[red]Please fix the following issues:[/red]")
        _print_validation(report)
        console.print("\nRe-run with [bold]--allow-invalid[/bold] to calculate anyway.")
        raise typer.Exit(1)

    result = calculate(facts, today=today_date)

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
        return

    if report.warnings or not report.all_passed:
        _print_validation(report)

    rules = _rule_book()

    def fmt(d):
        return format_date(d, settings.date_display_format) if d else ""

    table = Table(title=f"{rules.name or 'Time for Trial'} - Calculation")
    table.add_column("Component")
    table.add_column("Details")
    table.add_column("Citation", style="dim")

    table.add_row("Initial Commencement Date", fmt(result.initial_commencement_date), "")
    if result.effective_commencement_date != result.initial_commencement_date:
        table.add_row("Effective Commencement Date", fmt(result.effective_commencement_date),
                      "CrRLJ 3.3(c)(2)")
    custody = "detained in jail" if facts.custody_status.value == "detained" else "not detained in jail"
    limit_note = f"{result.base_time_limit} days ({custody})"
    if result.was_released:
        limit_note = f"{result.base_time_limit} days (released before 60-day limit)"
    limit_key = "not-detained" if result.base_time_limit == 90 else "detained"
    table.add_row("Base Time Limit", limit_note, rules.citations.get(limit_key, ""))

    for period in result.excluded_periods:
        table.add_row(
            f"  Excluded: {rules.exclusion_label(period.type)}",
            f"{fmt(period.start_date)} to {fmt(period.end_date)} ({period.days} days)",
            rules.exclusion_types[period.type].citation if period.type in rules.exclusion_types else "",
        )
    table.add_row("Total Excluded Days", str(result.excluded_days), "")
    table.add_row("Base Deadline", fmt(result.base_deadline), "")
    table.add_row(
        "30-Day Minimum",
        "[yellow]Applied (extends deadline)[/yellow]" if result.thirty_day_rule_applied
        else "[dim]Not needed[/dim]",
        rules.citations.get("after-exclusion", ""),
    )
    table.add_row("[bold]Final Trial Deadline[/bold]", f"[bold]{fmt(result.final_deadline)}[/bold]",
                  rules.citations.get("court-day", ""))
    if result.use_cure_period:
        table.add_row("[bold]Cure Period Deadline[/bold]",
                      f"[bold]{fmt(result.cure_deadline)}[/bold] (+{result.cure_days} days)",
                      rules.citations.get("cure-period", ""))

    console.print(table)

    if result.scheduled_trial_date is not None:
        status = "[green]✓ TIMELY[/green]" if result.is_timely else "[red bold]✗ UNTIMELY[/red bold]"
        console.print(f"\nScheduled Trial: {fmt(result.scheduled_trial_date)}  {status}")
        days = result.days_until_deadline
        color = "red" if days < 0 else "yellow" if days <= 7 else "green"
        console.print(f"Days Until Deadline: [{color}]{days}[/{color}]")


# ---------------------------------------------------------------------------
# tft export
# ---------------------------------------------------------------------------

@app.command()
def export(
    case_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="YAML or JSON case file"),
    today: Optional[str] = typer.Option(None, help="Treat this date (YYYY-MM-DD) as today"),
):
    """Print a plain-text summary of the calculation."""
    from tft.engine.deadlines import calculate
    from tft.export import generate_export_text

    settings = get_settings()
    facts = _load_case(case_file)
    try:
        result = calculate(facts, today=_parse_option_date(today, "--today"), strict=True)
    except CaseValidationError as e:
        _fail(str(e))
    typer.echo(generate_export_text(facts, result, _rule_book(), settings.date_display_format), nl=False)


# ---------------------------------------------------------------------------
# tft validate
# ---------------------------------------------------------------------------

@app.command()
def validate(case_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="YAML or JSON case file")):
    """Run the date-ordering checks on a case file."""
    from tft.engine.validation import validate_case

    report = validate_case(_load_case(case_file))

    table = Table(title=f"Validation - {case_file.name}")
    table.add_column("Check", style="dim")
    table.add_column("Name")
    table.add_column("Result")
    table.add_column("Details")
    for r in report.results:
        if r.passed:
            verdict = "[green]PASS[/green]"
        elif r.severity == "warning":
            verdict = "[yellow]WARN[/yellow]"
        else:
            verdict = "[red bold]FAIL[/red bold]"
        table.add_row(r.check_id, r.name, verdict, r.details)
    console.print(table)

    if not report.all_passed:
        raise typer.Exit(1)


# ---------------------------------------------------------------------------
# tft check / tft holidays
# ---------------------------------------------------------------------------

@app.command()
def check(day: str = typer.Argument(..., help="Date to check (YYYY-MM-DD)")):
    """Is a date a court day? If not, when is the next one?"""
    from tft.engine.court_days import get_next_court_day, holiday_name, is_court_day

    settings = get_settings()
    target = _parse_option_date(day, "DATE")
    if is_court_day(target):
        console.print(f"[green]{format_date(target, settings.date_display_format)} is a court day.[/green]")
        return

    reason = holiday_name(target) or "weekend"
    next_day = get_next_court_day(target)
    console.print(f"[yellow]{format_date(target, settings.date_display_format)} is not a court day "
                  f"({reason}).[/yellow]")
    console.print(f"Next court day: [bold]{format_date(next_day, settings.date_display_format)}[/bold]")


@app.command()
def holidays(year: int = typer.Argument(..., min=1, max=9999, help="Calendar year")):
    """List observed Washington legal holidays for a year."""
    from tft.engine.court_days import washington_holidays

    settings = get_settings()
    table = Table(title=f"Washington Legal Holidays - {year}")
    table.add_column("Holiday")
    table.add_column("Observed")
    table.add_column("Note", style="dim")
    for h in washington_holidays(year):
        note = f"falls on {format_date(h.nominal, '%A')}" if h.is_observed_shift else ""
        table.add_row(h.name, format_date(h.date, settings.date_display_format), note)
    console.print(table)


if __name__ == "__main__":
    app()
