"""
Dependency injection container.

Factory functions for FastAPI dependencies. The index store and the
retrieval service are created once and shared for the process lifetime.

Dependencies: letters_rag.configs, letters_rag.application, letters_rag.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from letters_rag.application.retrieval_service import RetrievalService
from letters_rag.boundary.vdb.index_store import IndexStore
from letters_rag.configs import Settings, get_settings
from letters_rag.core.chunker import TextChunker
from letters_rag.core.ingestion import IngestionPipeline


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings
        self._store = None
        self._retrieval_service = None
        self._ingestion_pipeline = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def store(self) -> IndexStore:
        """Get cached index store."""
        if self._store is None:
            from letters_rag.boundary.vdb.vector_store_factory import get_index_store
            self._store = get_index_store(self.settings)
        return self._store

    @property
    def retrieval_service(self) -> RetrievalService:
        """Get cached retrieval service."""
        if self._retrieval_service is None:
            self._retrieval_service = RetrievalService(
                store=self.store,
                settings=self.settings.retrieval,
            )
        return self._retrieval_service

    @property
    def ingestion_pipeline(self) -> IngestionPipeline:
        """Get cached ingestion pipeline writing into the shared store."""
        if self._ingestion_pipeline is None:
            retrieval = self.settings.retrieval
            self._ingestion_pipeline = IngestionPipeline(
                store=self.store,
                chunker=TextChunker(
                    chunk_size=retrieval.chunk_size,
                    chunk_overlap=retrieval.chunk_overlap,
                ),
            )
        return self._ingestion_pipeline

    def clear(self) -> None:
        """Clear all cached instances."""
        self._store = None
        self._retrieval_service = None
        self._ingestion_pipeline = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_index_store_dependency() -> IndexStore:
    """
    Get the shared index store.

    Returns:
        IndexStore: Store selected via VECTOR_STORE_STORE_TYPE
    """
    return get_service_cache().store


def get_retrieval_service() -> RetrievalService:
    """
    Get retrieval service instance.

    Returns:
        RetrievalService: Service bound to the shared index store
    """
    return get_service_cache().retrieval_service


def get_ingestion_pipeline() -> IngestionPipeline:
    """
    Get ingestion pipeline instance.

    Returns:
        IngestionPipeline: Pipeline writing into the shared index store
    """
    return get_service_cache().ingestion_pipeline
