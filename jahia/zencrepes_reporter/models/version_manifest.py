"""Version manifest written by the module tooling, and what it resolves to."""

from pydantic import BaseModel, ConfigDict, Field

from jahia.zencrepes_reporter.models.dependency import Dependency


class PlatformVersion(BaseModel):
    """Platform version and build the module was tested against."""

    version: str = Field(..., description="Platform version")
    build: str = Field(..., description="Platform build number")


class ModuleVersion(BaseModel):
    """Version of the module under test."""

    version: str = Field(..., description="Module version")


class VersionManifest(BaseModel):
    """Content of the JSON file passed with ``--version-filepath``."""

    model_config = ConfigDict(frozen=True)

    jahia: PlatformVersion
    module: ModuleVersion
    dependencies: list[Dependency] = Field(
        ..., description="Modules deployed alongside the tested module"
    )


class Resolution(BaseModel):
    """Version and dependency list recorded in the event."""

    model_config = ConfigDict(frozen=True)

    version: str = Field(..., description="Effective version of the element")
    dependencies: tuple[Dependency, ...] = Field(
        ..., description="Effective dependencies, in insertion order"
    )
