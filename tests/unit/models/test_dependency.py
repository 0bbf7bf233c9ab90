"""Tests for dependency models."""

import pytest
from pydantic import ValidationError

from jahia.zencrepes_reporter.errors import DependencyParseError
from jahia.zencrepes_reporter.models.dependency import Dependency, parse_dependencies


def test_dependency_is_frozen() -> None:
    """Dependency can't be modified once created."""
    dependency = Dependency(name="Jahia", version="8.1.3.0")
    with pytest.raises(ValidationError):
        dependency.name = "other"  # type: ignore[misc]


def test_parse_dependencies_empty() -> None:
    """parse_dependencies accepts the default empty array."""
    assert parse_dependencies("[]") == []


def test_parse_dependencies_keeps_order_and_duplicates() -> None:
    """parse_dependencies keeps entries as given."""
    result = parse_dependencies(
        '[{"name": "b", "version": "1"}, {"name": "a", "version": "2"},'
        ' {"name": "b", "version": "1"}]'
    )
    assert result == [
        Dependency(name="b", version="1"),
        Dependency(name="a", version="2"),
        Dependency(name="b", version="1"),
    ]


def test_parse_dependencies_invalid_json() -> None:
    """parse_dependencies rejects malformed JSON."""
    with pytest.raises(DependencyParseError, match="Invalid dependencies"):
        parse_dependencies("[{name: 'a'}")


def test_parse_dependencies_missing_version() -> None:
    """parse_dependencies rejects entries without a version."""
    with pytest.raises(DependencyParseError) as exc_info:
        parse_dependencies('[{"name": "a"}]')
    assert "version" in str(exc_info.value)
