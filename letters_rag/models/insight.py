"""
Insight domain model.

A derived, attributable, length-bounded view of one ranked chunk. Always
reconstructible from its source chunk; never stored.

Dependencies: pydantic
System role: Presentation unit for topic insights
"""

from pydantic import Field

from letters_rag.models.common import CamelModel


class Insight(CamelModel):
    """Attributable insight extracted from a ranked chunk."""

    principle: str = Field(description="Human-readable topic label")
    explanation: str = Field(description="Chunk content truncated to the explanation budget")
    quote: str | None = Field(default=None, description="First double-quoted span, if any")
    year: int = Field(description="Letter year")
    source: str = Field(description="Attribution string for the source letter")
    relevance: float = Field(ge=0.0, le=1.0, description="Relevance rounded to two decimals")
