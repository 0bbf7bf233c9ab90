"""Data models for reports, manifests and events."""

from jahia.zencrepes_reporter.models.dependency import Dependency, parse_dependencies
from jahia.zencrepes_reporter.models.event import Event, RunState
from jahia.zencrepes_reporter.models.report_summary import ReportSummary
from jahia.zencrepes_reporter.models.version_manifest import (
    ModuleVersion,
    PlatformVersion,
    Resolution,
    VersionManifest,
)

__all__ = [
    "Dependency",
    "Event",
    "ModuleVersion",
    "PlatformVersion",
    "ReportSummary",
    "Resolution",
    "RunState",
    "VersionManifest",
    "parse_dependencies",
]
