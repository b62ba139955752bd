"""
Observability module.

Provides logging configuration for the retrieval pipeline.
"""

from letters_rag.observability.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
