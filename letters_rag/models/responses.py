"""
Operation request/response schemas.

Shapes returned to the agent/tool layer by the three retrieval operations.
All serialize with camelCase keys via `to_wire()`.

Dependencies: pydantic
System role: Retrieval API contracts
"""

from pydantic import Field

from letters_rag.models.chunk import ChunkMetadata
from letters_rag.models.common import CamelModel
from letters_rag.models.filters import YearRangeRequest
from letters_rag.models.insight import Insight


class SearchResultItem(CamelModel):
    """Single ranked search hit."""

    content: str
    metadata: ChunkMetadata
    relevance_score: float
    rank: int = Field(ge=1)


class ContextualResultItem(SearchResultItem):
    """Ranked hit enriched with a short summary."""

    summary: str


class SearchResponse(CamelModel):
    """Response of the plain document search."""

    success: bool
    results: list[SearchResultItem] = Field(default_factory=list)
    total_results: int = 0
    query: str
    year_filter: int | str | None = None
    error: str | None = None


class ContextualSearchResponse(CamelModel):
    """Response of the context-aware search."""

    success: bool
    results: list[ContextualResultItem] = Field(default_factory=list)
    total_results: int = 0
    original_query: str
    enhanced_query: str
    error: str | None = None


class TopicInsightsResponse(CamelModel):
    """Response of the topic insight extraction."""

    success: bool
    insights: list[Insight] = Field(default_factory=list)
    summary: str = ""
    error: str | None = None


class SearchRequest(CamelModel):
    """Request body for document search."""

    query: str = Field(min_length=1, description="Search query")
    year_filter: int | None = Field(default=None, description="Restrict to a single year")
    max_results: int = Field(default=5, description="Maximum number of results")


class ContextualSearchRequest(CamelModel):
    """Request body for contextual search."""

    query: str = Field(min_length=1, description="Main search query")
    context: str | None = Field(default=None, description="Prior conversation context")
    topics: list[str] | None = Field(default=None, description="Topics to focus on")
    year_range: YearRangeRequest | None = Field(default=None, description="Closed year range")


class TopicInsightsRequest(CamelModel):
    """Request body for topic insights."""

    topic: str = Field(description="One of the investment topics")
    keywords: list[str] | None = Field(default=None, description="Extra refinement keywords")
    include_quotes: bool = Field(default=True, description="Include extracted quotes in output")
