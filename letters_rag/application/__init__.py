"""
Application services.

Exposes the retrieval operations consumed by the agent and HTTP layers.
"""

from letters_rag.application.retrieval_service import RetrievalService

__all__ = ["RetrievalService"]
