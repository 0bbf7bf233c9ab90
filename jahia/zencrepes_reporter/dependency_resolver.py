"""Resolve the effective version and dependencies of the tested element."""

import logging
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from jahia.zencrepes_reporter.errors import ManifestParseError, ManifestReadError
from jahia.zencrepes_reporter.models.dependency import Dependency
from jahia.zencrepes_reporter.models.version_manifest import (
    Resolution,
    VersionManifest,
)

logger = logging.getLogger(__name__)

PLATFORM_DEPENDENCY_NAME = "Jahia"


def load_version_manifest(manifest_path: Path) -> VersionManifest:
    """Load the version manifest generated by the module tooling.

    Raises:
        ManifestReadError: If the file can't be read
        ManifestParseError: If the file isn't valid JSON or misses fields

    """
    try:
        content = manifest_path.read_bytes()
    except OSError as e:
        raise ManifestReadError(
            f"Unable to read version file {manifest_path}: {e}"
        ) from e

    try:
        return VersionManifest.model_validate_json(content)
    except ValidationError as e:
        raise ManifestParseError(
            f"Invalid version file {manifest_path}: {e}"
        ) from e


def resolve_dependencies(
    dependencies: Sequence[Dependency],
    version: str,
    manifest_path: Path | None = None,
) -> Resolution:
    """Merge caller supplied dependencies with the version manifest, if any.

    Without a manifest, version and dependencies are returned unchanged. With
    one, the dependencies become: the caller's, then the platform as
    ``{version}-{build}``, then the manifest's; and the version becomes the
    manifest's module version.

    Args:
        dependencies: Dependencies passed on the command line
        version: Version passed on the command line
        manifest_path: Optional path to the version manifest

    Returns:
        Effective version and dependencies

    """
    if manifest_path is None:
        return Resolution(version=version, dependencies=tuple(dependencies))

    manifest = load_version_manifest(manifest_path)
    platform = Dependency(
        name=PLATFORM_DEPENDENCY_NAME,
        version=f"{manifest.jahia.version}-{manifest.jahia.build}",
    )
    resolution = Resolution(
        version=manifest.module.version,
        dependencies=(*dependencies, platform, *manifest.dependencies),
    )
    logger.info(
        f"Version file {manifest_path}: version {resolution.version}, "
        f"{len(resolution.dependencies)} dependencies"
    )
    return resolution
