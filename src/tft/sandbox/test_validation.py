"""Date-ordering checks on case facts."""
from tft.engine.validation import validate_case
from tft.models import CustodyStatus

from .fixtures import exclusion, make_case, reset


def _failed_ids(report):
    return [r.check_id for r in report.results if not r.passed]


def test_clean_case_passes():
    facts = make_case(release_date="2024-01-20", resets=[reset("2024-01-10")],
                      exclusions=[exclusion("2024-01-12", "2024-01-15")])
    report = validate_case(facts)
    assert report.all_passed
    assert report.errors == 0
    assert report.warnings == 0
    assert {r.check_id for r in report.results} == {"TFT-001", "TFT-002", "TFT-003", "TFT-004"}


def test_release_before_arraignment():
    report = validate_case(make_case(release_date="2023-12-31"))
    assert not report.all_passed
    assert _failed_ids(report) == ["TFT-001"]


def test_reset_before_arraignment_is_numbered():
    report = validate_case(make_case(resets=[reset("2024-01-05"), reset("2023-12-15")]))
    assert _failed_ids(report) == ["TFT-002"]
    assert report.failures[0].details.startswith("Reset Event 2:")


def test_exclusion_before_arraignment_and_reversed():
    report = validate_case(make_case(exclusions=[exclusion("2023-12-20", "2024-01-05"),
                                                 exclusion("2024-02-10", "2024-02-01")]))
    assert sorted(_failed_ids(report)) == ["TFT-003", "TFT-004"]
    assert report.errors == 2
    details = [r.details for r in report.failures]
    assert "Excluded Period 1: Start date cannot be before arraignment" in details
    assert "Excluded Period 2: End date must be on or after start date" in details


def test_release_without_detention_only_warns():
    report = validate_case(make_case(custody=CustodyStatus.NOT_DETAINED, release_date="2024-01-20"))
    assert report.all_passed
    assert report.warnings == 1
    assert "TFT-005" in _failed_ids(report)
    assert report.failures == []


def test_unknown_category_only_warns():
    facts = make_case(resets=[reset("2024-01-10", "continuance")],
                      exclusions=[exclusion("2024-01-12", "2024-01-15", "vacation")])
    report = validate_case(facts)
    assert report.all_passed
    assert report.warnings == 2
