"""Dependency injection for API routes."""

from .dependencies import (
    ServiceCache,
    get_index_store_dependency,
    get_ingestion_pipeline,
    get_retrieval_service,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "ServiceCache",
    "get_index_store_dependency",
    "get_ingestion_pipeline",
    "get_retrieval_service",
    "get_service_cache",
    "get_settings_dependency",
]
