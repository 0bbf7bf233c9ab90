"""Load test reports from disk and aggregate them into a single summary."""

import logging
from enum import Enum
from pathlib import Path

from jahia.zencrepes_reporter.errors import ReportParseError
from jahia.zencrepes_reporter.models.report_summary import ReportSummary
from jahia.zencrepes_reporter.parsers.base import ReportParser
from jahia.zencrepes_reporter.parsers.junit import JUnitParser
from jahia.zencrepes_reporter.parsers.mocha import MochaParser

logger = logging.getLogger(__name__)


class ReportType(str, Enum):
    """Supported report formats."""

    XML = "xml"
    JSON = "json"


def create_parser(report_type: ReportType | str) -> ReportParser:
    """Create the parser handling the given report format."""
    report_type = ReportType(report_type)
    if report_type is ReportType.XML:
        return JUnitParser()
    return MochaParser()


def find_report_files(report_path: Path, extension: str) -> list[Path]:
    """List report files under report_path.

    A file is returned as-is. A directory is searched recursively for files
    ending with extension, in sorted order.

    Raises:
        ReportParseError: If the path doesn't exist or holds no report

    """
    if report_path.is_file():
        return [report_path]

    if not report_path.is_dir():
        raise ReportParseError(f"Report path not found: {report_path}")

    files = sorted(
        path
        for path in report_path.rglob(f"*{extension}")
        if path.is_file()
    )
    if not files:
        raise ReportParseError(
            f"No {extension} report found in directory: {report_path}"
        )
    return files


def load_report(report_type: ReportType | str, report_path: Path) -> ReportSummary:
    """Load and aggregate every report found at report_path.

    Args:
        report_type: Format of the reports (xml or json)
        report_path: Report file, or directory containing report files

    Returns:
        Summary with counts and durations summed over all files

    Raises:
        ReportParseError: If no report is found or a report is malformed

    """
    parser = create_parser(report_type)
    files = find_report_files(report_path, parser.extension)
    logger.info(f"Found {len(files)} report file(s) in {report_path}")

    summary = ReportSummary(tests_run=0, tests_failed=0, duration_seconds=0.0)
    for report_file in files:
        try:
            content = report_file.read_bytes()
        except OSError as e:
            raise ReportParseError(f"Unable to read {report_file}: {e}") from e

        file_summary = parser.parse(content, report_file)
        logger.info(
            f"{report_file}: {file_summary.tests_run} tests, "
            f"{file_summary.tests_failed} failures, "
            f"{file_summary.duration_seconds:.3f}s"
        )
        summary += file_summary

    logger.info(
        f"Report totals: {summary.tests_run} tests, "
        f"{summary.tests_failed} failures, {summary.duration_seconds:.3f}s"
    )
    return summary
