"""Tests for report loading and aggregation."""

from pathlib import Path

import pytest

from jahia.zencrepes_reporter.errors import ReportParseError
from jahia.zencrepes_reporter.models.report_summary import ReportSummary
from jahia.zencrepes_reporter.parsers.junit import JUnitParser
from jahia.zencrepes_reporter.parsers.mocha import MochaParser
from jahia.zencrepes_reporter.report_loader import (
    ReportType,
    create_parser,
    find_report_files,
    load_report,
)


def test_create_parser() -> None:
    """create_parser maps report types to parsers."""
    assert isinstance(create_parser(ReportType.XML), JUnitParser)
    assert isinstance(create_parser("json"), MochaParser)


def test_create_parser_unknown_type() -> None:
    """create_parser rejects unknown report types."""
    with pytest.raises(ValueError):
        create_parser("yaml")


def test_find_report_files_single_file(tmp_path: Path) -> None:
    """find_report_files returns a file path as-is, whatever its extension."""
    report = tmp_path / "results.txt"
    report.write_text("<testsuite/>")

    assert find_report_files(report, ".xml") == [report]


def test_find_report_files_directory(tmp_path: Path) -> None:
    """find_report_files searches recursively for the extension."""
    (tmp_path / "nested").mkdir()
    (tmp_path / "b.xml").write_text("<testsuite/>")
    (tmp_path / "nested" / "a.xml").write_text("<testsuite/>")
    (tmp_path / "ignored.json").write_text("{}")

    files = find_report_files(tmp_path, ".xml")

    assert files == [tmp_path / "b.xml", tmp_path / "nested" / "a.xml"]


def test_find_report_files_missing_path(tmp_path: Path) -> None:
    """find_report_files raises ReportParseError for a missing path."""
    with pytest.raises(ReportParseError, match="Report path not found"):
        find_report_files(tmp_path / "missing", ".xml")


def test_find_report_files_empty_directory(tmp_path: Path) -> None:
    """find_report_files raises ReportParseError when nothing matches."""
    (tmp_path / "report.json").write_text("{}")

    with pytest.raises(ReportParseError, match="No .xml report found"):
        find_report_files(tmp_path, ".xml")


def test_load_report_aggregates_xml_files(tmp_path: Path) -> None:
    """load_report sums every XML report of a directory."""
    (tmp_path / "one.xml").write_text(
        '<testsuite tests="3" failures="1" time="1.5"/>'
    )
    (tmp_path / "two.xml").write_text(
        '<testsuites><testsuite tests="2" failures="0" time="2"/></testsuites>'
    )

    summary = load_report(ReportType.XML, tmp_path)

    assert summary == ReportSummary(tests_run=5, tests_failed=1, duration_seconds=3.5)


def test_load_report_json_file(tmp_path: Path) -> None:
    """load_report parses a single mocha report."""
    report = tmp_path / "mochawesome.json"
    report.write_text('{"stats": {"tests": 5, "failures": 0, "duration": 12300}}')

    summary = load_report("json", report)

    assert summary == ReportSummary(
        tests_run=5, tests_failed=0, duration_seconds=12.3
    )


def test_load_report_malformed_file(tmp_path: Path) -> None:
    """load_report propagates parse errors."""
    (tmp_path / "good.json").write_text('{"stats": {"tests": 1, "failures": 0}}')
    (tmp_path / "bad.json").write_text("not json")

    with pytest.raises(ReportParseError, match="bad.json"):
        load_report(ReportType.JSON, tmp_path)
