"""
Retrieval pipeline settings.

Chunking parameters, result limits and the empirically chosen scoring and
truncation thresholds. The thresholds are defaults, not invariants.

Dependencies: pydantic, pydantic_settings
System role: Retrieval tuning configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RetrievalSettings(BaseSettings):
    """Settings for chunking, ranking and insight extraction."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RETRIEVAL_",
        case_sensitive=False,
        extra="ignore",
    )

    # Chunking settings
    chunk_size: int = Field(default=1000, description="Target chunk size in characters", ge=1)
    chunk_overlap: int = Field(default=200, description="Overlap between consecutive chunks", ge=0)

    # Result limits
    default_limit: int = Field(default=5, description="Default number of search results", ge=1)
    contextual_limit: int = Field(default=6, description="Results fetched for contextual search", ge=1)
    topic_fetch_limit: int = Field(default=8, description="Candidates scored for topic insights", ge=1)
    max_insights: int = Field(default=5, description="Insights returned per topic", ge=1)

    # Insight extraction
    explanation_chars: int = Field(default=300, description="Explanation character budget", ge=1)

    # Lexical scoring, normalized mode
    term_weight: float = Field(default=0.1, description="Weight per query-term occurrence")
    phrase_bonus: float = Field(default=0.8, description="Bonus for the verbatim query phrase")

    # Lexical scoring, raw mode
    raw_term_weight: float = Field(default=1.0, description="Raw weight per term occurrence")
    raw_phrase_bonus: float = Field(default=10.0, description="Raw verbatim phrase bonus")
    raw_presence_bonus: float = Field(default=2.0, description="Raw bonus per term present")

    min_term_length: int = Field(default=3, description="Query terms shorter than this are dropped", ge=1)
