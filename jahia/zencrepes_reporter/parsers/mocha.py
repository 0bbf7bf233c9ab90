"""Mocha / mochawesome JSON report parser."""

from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from jahia.zencrepes_reporter.errors import ReportParseError
from jahia.zencrepes_reporter.models.report_summary import ReportSummary
from jahia.zencrepes_reporter.parsers.base import ReportParser


class MochaStats(BaseModel):
    """``stats`` block written by the mocha JSON and mochawesome reporters."""

    tests: int = Field(..., ge=0, description="Number of tests executed")
    failures: int = Field(..., description="Number of failed tests")
    duration: float = Field(default=0, description="Execution time in ms")


class MochaReport(BaseModel):
    """Top-level mocha report, only ``stats`` is read."""

    stats: MochaStats


class MochaParser(ReportParser):
    """Parser for mocha JSON reports."""

    extension = ".json"

    def parse(self, content: bytes, source: Path) -> ReportSummary:
        """Read the ``stats`` block, converting milliseconds to seconds."""
        try:
            report = MochaReport.model_validate_json(content)
        except ValidationError as e:
            raise ReportParseError(f"Invalid mocha report {source}: {e}") from e

        return ReportSummary(
            tests_run=report.stats.tests,
            tests_failed=report.stats.failures,
            duration_seconds=report.stats.duration / 1000,
        )
