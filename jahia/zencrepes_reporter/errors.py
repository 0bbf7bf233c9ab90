"""Errors raised while building and delivering a test run event."""


class ReporterError(Exception):
    """Base class for all reporter failures."""


class ReportParseError(ReporterError):
    """No report file matched, or a report could not be parsed."""


class DependencyParseError(ReporterError):
    """The dependency list supplied on the command line is invalid."""


class ManifestReadError(ReporterError):
    """The version manifest could not be read."""


class ManifestParseError(ReporterError):
    """The version manifest is not valid JSON or misses required fields."""


class DeliveryError(ReporterError):
    """The event could not be posted to the webhook."""

    def __init__(self, message: str, cause: BaseException) -> None:
        """Keep the underlying transport failure around."""
        super().__init__(message)
        self.cause = cause
