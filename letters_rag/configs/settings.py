"""
Unified application settings.

One Settings object carries the store selection and the retrieval tuning.
Cross-section consistency is checked when settings load, so a bad
combination fails at startup instead of on the first request.

Dependencies: pydantic_settings, letters_rag.configs
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field, model_validator

from letters_rag.configs.base import BaseSettings
from letters_rag.configs.retrieval import RetrievalSettings
from letters_rag.configs.vector_store import VectorStoreSettings


class Settings(BaseSettings):
    """Store selection plus retrieval tuning."""

    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)
    retrieval: RetrievalSettings = Field(default_factory=RetrievalSettings)

    @model_validator(mode="after")
    def _check_chunking(self) -> "Settings":
        if self.retrieval.chunk_overlap >= self.retrieval.chunk_size:
            raise ValueError(
                f"RETRIEVAL_CHUNK_OVERLAP ({self.retrieval.chunk_overlap}) must be smaller "
                f"than RETRIEVAL_CHUNK_SIZE ({self.retrieval.chunk_size})"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """
    Load settings from the environment and `.env` once per process.

    Returns:
        Settings: Cached settings instance
    """
    return Settings()
