"""Assemble the event sent to the webhook."""

import logging
from datetime import UTC, datetime

from jahia.zencrepes_reporter.identity import derive_id
from jahia.zencrepes_reporter.models.event import Event
from jahia.zencrepes_reporter.models.report_summary import ReportSummary
from jahia.zencrepes_reporter.models.version_manifest import Resolution

logger = logging.getLogger(__name__)


def utc_timestamp(now: datetime | None = None) -> str:
    """Format a UTC ISO-8601 timestamp with milliseconds and a ``Z`` suffix."""
    now = now or datetime.now(UTC)
    return now.astimezone(UTC).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


def build_event(
    name: str,
    version: str,
    resolution: Resolution,
    summary: ReportSummary,
    url: str = "",
    created_at: str | None = None,
) -> Event:
    """Build the event describing a test run.

    The id is derived from the caller supplied version and the resolved
    dependencies, while the event records the resolved version.

    Args:
        name: Name of the element being tested
        version: Version passed on the command line
        resolution: Effective version and dependencies
        summary: Aggregated report totals
        url: Url associated with the run
        created_at: Timestamp override, defaults to now

    Returns:
        Event ready to be signed and sent

    """
    event_id = derive_id(name, version, resolution.dependencies)
    logger.info(f"Derived id {event_id} for {name} {version}")

    return Event(
        id=event_id,
        name=name,
        version=resolution.version,
        dependencies=resolution.dependencies,
        created_at=created_at or utc_timestamp(),
        state="PASS" if summary.tests_failed == 0 else "FAIL",
        url=url,
        run_total=summary.tests_run,
        run_success=summary.tests_run - summary.tests_failed,
        run_failure=summary.tests_failed,
        run_duration=summary.duration_seconds,
    )
