"""Aggregated outcome of one or more test reports."""

from pydantic import BaseModel, ConfigDict, Field


class ReportSummary(BaseModel):
    """Totals extracted from the ingested reports.

    ``tests_failed <= tests_run`` is expected but not enforced.
    """

    model_config = ConfigDict(frozen=True)

    tests_run: int = Field(..., ge=0, description="Number of tests executed")
    tests_failed: int = Field(..., description="Number of failed tests")
    duration_seconds: float = Field(..., description="Execution time in seconds")

    def __add__(self, other: "ReportSummary") -> "ReportSummary":
        """Sum two summaries field by field."""
        return ReportSummary(
            tests_run=self.tests_run + other.tests_run,
            tests_failed=self.tests_failed + other.tests_failed,
            duration_seconds=self.duration_seconds + other.duration_seconds,
        )
