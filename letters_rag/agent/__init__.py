"""Agent tool layer over the retrieval service."""

from letters_rag.agent.tools import create_retrieval_tools

__all__ = ["create_retrieval_tools"]
