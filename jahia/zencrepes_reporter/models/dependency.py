"""Runtime dependency of the element being tested."""

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from jahia.zencrepes_reporter.errors import DependencyParseError


class Dependency(BaseModel):
    """Named, versioned unit the tested element depends on."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Dependency name (e.g., module ID)")
    version: str = Field(..., description="Dependency version")


_DEPENDENCY_LIST = TypeAdapter(list[Dependency])


def parse_dependencies(raw: str) -> list[Dependency]:
    """Parse a JSON array of ``{"name": ..., "version": ...}`` objects.

    Raises:
        DependencyParseError: If the value is not valid JSON or an entry
            misses a field

    """
    try:
        return _DEPENDENCY_LIST.validate_json(raw)
    except ValidationError as e:
        raise DependencyParseError(f"Invalid dependencies {raw!r}: {e}") from e
