"""Stable identifier of a tested element and its runtime dependencies.

The id is a UUIDv5 over the concatenation of the normalized name, version and
every dependency (sorted by raw name, then raw version). Normalization drops
all non-alphanumeric characters, so versions such as ``1.0.0`` and ``100``
produce the same id.
"""

import re
import uuid
from collections.abc import Sequence

from jahia.zencrepes_reporter.models.dependency import Dependency

UUID_NAMESPACE = uuid.UUID("c72d8f12-1818-4cb9-bead-44634c441c11")

_NON_ALPHANUMERIC = re.compile(r"[^0-9a-zA-Z]")


def normalize(value: str) -> str:
    """Strip every non ASCII alphanumeric character and lower-case the rest."""
    return _NON_ALPHANUMERIC.sub("", value).lower()


def sort_dependencies(dependencies: Sequence[Dependency]) -> list[Dependency]:
    """Return a new list sorted by name, then version (raw string order)."""
    return sorted(dependencies, key=lambda d: (d.name, d.version))


def derive_id(name: str, version: str, dependencies: Sequence[Dependency]) -> str:
    """Derive the element id from its name, version and dependencies.

    Args:
        name: Name of the element being tested
        version: Version as given by the caller (never the manifest version)
        dependencies: Dependencies in any order; the input is left untouched

    Returns:
        UUID string

    """
    id_str = normalize(name) + normalize(version)
    for dependency in sort_dependencies(dependencies):
        id_str += normalize(dependency.name) + normalize(dependency.version)
    return str(uuid.uuid5(UUID_NAMESPACE, id_str))
