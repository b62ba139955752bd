"""
Metadata filter variants.

A filter is either absent, an equality constraint on year, or a closed year
range. The request-level range shape allows missing bounds; `build_filter`
collapses a half-open request to no constraint so the ambiguous case never
reaches a store.

Dependencies: pydantic
System role: Query predicate over chunk metadata
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from letters_rag.models.chunk import ChunkMetadata
from letters_rag.models.common import CamelModel


class NoFilter(BaseModel):
    """Matches every chunk."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["none"] = "none"

    def matches(self, metadata: ChunkMetadata) -> bool:
        return True

    def to_vector_filter(self) -> dict[str, Any] | None:
        return None

    def describe(self) -> str:
        return "all years"


class YearEquals(BaseModel):
    """Matches chunks from exactly one year."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["eq"] = "eq"
    year: int

    def matches(self, metadata: ChunkMetadata) -> bool:
        return metadata.year == self.year

    def to_vector_filter(self) -> dict[str, Any] | None:
        return {"year": {"$eq": self.year}}

    def describe(self) -> str:
        return str(self.year)


class YearRange(BaseModel):
    """Matches chunks with start <= year <= end."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["range"] = "range"
    start: int
    end: int

    def matches(self, metadata: ChunkMetadata) -> bool:
        return self.start <= metadata.year <= self.end

    def to_vector_filter(self) -> dict[str, Any] | None:
        return {"$and": [{"year": {"$gte": self.start}}, {"year": {"$lte": self.end}}]}

    def describe(self) -> str:
        return f"{self.start}-{self.end}"


MetadataFilter = Annotated[Union[NoFilter, YearEquals, YearRange], Field(discriminator="kind")]


class YearRangeRequest(CamelModel):
    """Caller-supplied year range; both bounds are required for it to constrain."""

    start: int | None = None
    end: int | None = None


def build_filter(
    year: int | None = None,
    year_range: YearRangeRequest | None = None,
) -> NoFilter | YearEquals | YearRange:
    """
    Build a filter from caller parameters.

    Args:
        year: Exact year constraint
        year_range: Range constraint; ignored unless both bounds are present

    Returns:
        The filter variant; NoFilter when nothing constrains
    """
    if year is not None:
        return YearEquals(year=year)
    if year_range is not None and year_range.start is not None and year_range.end is not None:
        return YearRange(start=year_range.start, end=year_range.end)
    return NoFilter()
