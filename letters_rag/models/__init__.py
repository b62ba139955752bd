"""
Domain models and schemas.

Exports: Chunk, ChunkMetadata, ScoredChunk, filters, Insight, documents and
operation responses.
"""

from letters_rag.models.chunk import Chunk, ChunkMetadata, DocumentType, ScoredChunk, ScoringMode
from letters_rag.models.document import (
    IngestionResult,
    SourceDocument,
    StoreStats,
    StoreValidationResult,
)
from letters_rag.models.filters import (
    MetadataFilter,
    NoFilter,
    YearEquals,
    YearRange,
    YearRangeRequest,
    build_filter,
)
from letters_rag.models.insight import Insight
from letters_rag.models.responses import (
    ContextualResultItem,
    ContextualSearchResponse,
    SearchResponse,
    SearchResultItem,
    TopicInsightsResponse,
)

__all__ = [
    "Chunk",
    "ChunkMetadata",
    "DocumentType",
    "ScoredChunk",
    "ScoringMode",
    "SourceDocument",
    "IngestionResult",
    "StoreStats",
    "StoreValidationResult",
    "MetadataFilter",
    "NoFilter",
    "YearEquals",
    "YearRange",
    "YearRangeRequest",
    "build_filter",
    "Insight",
    "SearchResultItem",
    "ContextualResultItem",
    "SearchResponse",
    "ContextualSearchResponse",
    "TopicInsightsResponse",
]
