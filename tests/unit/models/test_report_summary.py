"""Tests for report summary model."""

import pytest
from pydantic import ValidationError

from jahia.zencrepes_reporter.models.report_summary import ReportSummary


def test_report_summary_addition() -> None:
    """Summaries add up field by field."""
    total = ReportSummary(
        tests_run=3, tests_failed=1, duration_seconds=1.5
    ) + ReportSummary(tests_run=4, tests_failed=0, duration_seconds=2.0)

    assert total == ReportSummary(tests_run=7, tests_failed=1, duration_seconds=3.5)


def test_report_summary_allows_more_failures_than_tests() -> None:
    """tests_failed isn't checked against tests_run."""
    summary = ReportSummary(tests_run=1, tests_failed=2, duration_seconds=0)
    assert summary.tests_failed == 2


def test_report_summary_rejects_negative_tests() -> None:
    """tests_run can't be negative."""
    with pytest.raises(ValidationError) as exc_info:
        ReportSummary(tests_run=-1, tests_failed=0, duration_seconds=0)
    assert "tests_run" in str(exc_info.value)
