"""Abstract base class for test report parsers."""

from abc import ABC, abstractmethod
from pathlib import Path

from jahia.zencrepes_reporter.models.report_summary import ReportSummary


class ReportParser(ABC):
    """Turns a single report file into a summary."""

    #: File extension searched for when the report path is a directory
    extension: str

    @abstractmethod
    def parse(self, content: bytes, source: Path) -> ReportSummary:
        """Parse the content of one report file.

        Args:
            content: Raw file content
            source: Path the content was read from, used in error messages

        Returns:
            Summary of the tests contained in the file

        Raises:
            ReportParseError: If the content is malformed

        """
