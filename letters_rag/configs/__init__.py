"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from letters_rag.configs.retrieval import RetrievalSettings
from letters_rag.configs.settings import Settings, get_settings
from letters_rag.configs.vector_store import VectorStoreSettings

__all__ = ["Settings", "get_settings", "RetrievalSettings", "VectorStoreSettings"]
