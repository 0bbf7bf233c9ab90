"""JUnit XML report parser."""

import xml.etree.ElementTree as ET
from pathlib import Path

from jahia.zencrepes_reporter.errors import ReportParseError
from jahia.zencrepes_reporter.models.report_summary import ReportSummary
from jahia.zencrepes_reporter.parsers.base import ReportParser


class JUnitParser(ReportParser):
    """Parser for ``<testsuites>``/``<testsuite>`` documents."""

    extension = ".xml"

    def parse(self, content: bytes, source: Path) -> ReportSummary:
        """Sum tests, failures, errors and time over every suite of the file."""
        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            raise ReportParseError(f"Invalid XML in {source}: {e}") from e

        if root.tag == "testsuite":
            suites = [root]
        elif root.tag == "testsuites":
            suites = root.findall("testsuite")
        else:
            raise ReportParseError(
                f"Unexpected root element <{root.tag}> in {source}"
            )

        summary = ReportSummary(tests_run=0, tests_failed=0, duration_seconds=0.0)
        for suite in suites:
            try:
                summary += self._parse_suite(suite)
            except ValueError as e:
                raise ReportParseError(f"Invalid testsuite in {source}: {e}") from e
        return summary

    def _parse_suite(self, suite: ET.Element) -> ReportSummary:
        """Read the counters of a suite, counting testcases when absent."""
        cases = suite.findall("testcase")

        tests = suite.get("tests")
        tests_run = int(tests) if tests is not None else len(cases)

        failures = suite.get("failures")
        errors = suite.get("errors")
        if failures is None and errors is None:
            tests_failed = sum(
                1
                for case in cases
                if case.find("failure") is not None or case.find("error") is not None
            )
        else:
            tests_failed = int(failures or 0) + int(errors or 0)

        return ReportSummary(
            tests_run=tests_run,
            tests_failed=tests_failed,
            duration_seconds=float(suite.get("time") or 0),
        )
