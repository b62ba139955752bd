"""
Core business logic module.

Contains the chunker, ranking engine, query composer, insight extractor,
ingestion pipeline and the exception hierarchy.
"""

from letters_rag.core.exceptions import (
    ChunkingError,
    ConfigurationError,
    DocumentProcessingError,
    IndexNotReadyError,
    LettersRagException,
    RetrievalError,
    VectorStoreError,
)

__all__ = [
    "LettersRagException",
    "ConfigurationError",
    "DocumentProcessingError",
    "ChunkingError",
    "VectorStoreError",
    "IndexNotReadyError",
    "RetrievalError",
]
