"""
Common model base classes.

Wire-facing models serialize with camelCase keys for the agent layer while
Python code keeps snake_case attribute names.

Dependencies: pydantic
System role: Shared serialization conventions
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that accepts snake_case or camelCase and dumps camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_wire(self) -> dict:
        """Serialize to the camelCase JSON-compatible dict surfaced to callers."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
