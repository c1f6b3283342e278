"""Date-ordering checks for case facts.

The deadline engine computes anyway when these fail (see deadlines.py for the
fallback semantics); callers that want to refuse bad input run these first.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from tft.models import CaseFacts, CustodyStatus, ExclusionType, ResetType

_RESET_TYPES = {t.value for t in ResetType}
_EXCLUSION_TYPES = {t.value for t in ExclusionType}


@dataclass
class ValidationResult:
    check_id: str
    name: str
    passed: bool
    severity: str  # error, warning
    details: str = ""


@dataclass
class ValidationReport:
    all_passed: bool = True
    results: list[ValidationResult] = field(default_factory=list)
    errors: int = 0
    warnings: int = 0

    def add(self, result: ValidationResult) -> None:
        self.results.append(result)
        if not result.passed:
            if result.severity == "warning":
                self.warnings += 1
            else:
                self.all_passed = False
                self.errors += 1

    @property
    def failures(self) -> list[ValidationResult]:
        return [r for r in self.results if not r.passed and r.severity != "warning"]


def validate_case(facts: CaseFacts) -> ValidationReport:
    """Run every check against ``facts``. Numbering of resets and exclusions is 1-based."""
    report = ValidationReport()
    arraigned = facts.arraignment_date

    # TFT-001: release not before arraignment
    release_ok = facts.release_date is None or facts.release_date >= arraigned
    report.add(ValidationResult(
        check_id="TFT-001",
        name="Release Date After Arraignment",
        passed=release_ok,
        severity="error",
        details="" if release_ok else "Release date cannot be before arraignment date",
    ))

    # TFT-002: resets not before arraignment
    for i, reset in enumerate(facts.resets, start=1):
        if reset.date < arraigned:
            report.add(ValidationResult(
                check_id="TFT-002",
                name="Reset Date After Arraignment",
                passed=False,
                severity="error",
                details=f"Reset Event {i}: Date cannot be before arraignment",
            ))

    for i, exclusion in enumerate(facts.exclusions, start=1):
        # TFT-003: exclusion start not before arraignment
        if exclusion.start_date < arraigned:
            report.add(ValidationResult(
                check_id="TFT-003",
                name="Exclusion Start After Arraignment",
                passed=False,
                severity="error",
                details=f"Excluded Period {i}: Start date cannot be before arraignment",
            ))
        # TFT-004: exclusion end on or after start
        if exclusion.end_date < exclusion.start_date:
            report.add(ValidationResult(
                check_id="TFT-004",
                name="Exclusion End After Start",
                passed=False,
                severity="error",
                details=f"Excluded Period {i}: End date must be on or after start date",
            ))

    # TFT-005: release date only matters while detained
    if facts.release_date is not None and facts.custody_status != CustodyStatus.DETAINED:
        report.add(ValidationResult(
            check_id="TFT-005",
            name="Release Date Requires Detention",
            passed=False,
            severity="warning",
            details="Release date is ignored when the defendant was not detained",
        ))

    # TFT-006: categories outside the rule's lists pass through as display text
    for i, reset in enumerate(facts.resets, start=1):
        if reset.type and reset.type not in _RESET_TYPES:
            report.add(ValidationResult(
                check_id="TFT-006",
                name="Known Reset Category",
                passed=False,
                severity="warning",
                details=f"Reset Event {i}: unrecognized type {reset.type!r}",
            ))
    for i, exclusion in enumerate(facts.exclusions, start=1):
        if exclusion.type and exclusion.type not in _EXCLUSION_TYPES:
            report.add(ValidationResult(
                check_id="TFT-006",
                name="Known Exclusion Category",
                passed=False,
                severity="warning",
                details=f"Excluded Period {i}: unrecognized type {exclusion.type!r}",
            ))

    # Passing entries for per-item checks that found nothing
    check_ids_seen = {r.check_id for r in report.results}
    for cid, cname in [
        ("TFT-002", "All Reset Dates After Arraignment"),
        ("TFT-003", "All Exclusions Start After Arraignment"),
        ("TFT-004", "All Exclusion Ranges Ordered"),
    ]:
        if cid not in check_ids_seen:
            report.add(ValidationResult(check_id=cid, name=cname, passed=True, severity="info"))

    return report
