"""Test run event posted to the ZenCrepes webhook."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from jahia.zencrepes_reporter.models.dependency import Dependency

RunState = Literal["PASS", "FAIL"]


class Event(BaseModel):
    """State node describing one test run.

    Serialized with camelCase keys (``createdAt``, ``runTotal``, ...), in
    declaration order.
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    id: str = Field(..., description="UUID derived from name/version/deps")
    name: str = Field(..., description="Name of the element being tested")
    version: str = Field(..., description="Version of the element being tested")
    dependencies: tuple[Dependency, ...] = Field(
        ..., description="Runtime dependencies, in insertion order"
    )
    created_at: str = Field(..., description="ISO-8601 creation timestamp")
    state: RunState = Field(..., description="PASS when no test failed")
    url: str = Field(..., description="Url associated with the run")
    run_total: int = Field(..., description="Number of tests executed")
    run_success: int = Field(..., description="Number of passing tests")
    run_failure: int = Field(..., description="Number of failed tests")
    run_duration: float = Field(..., description="Execution time in seconds")

    def to_json(self) -> str:
        """Return the compact wire form of the event."""
        return self.model_dump_json(by_alias=True)
