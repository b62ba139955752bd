"""
Exception hierarchy for the letters retrieval pipeline.

Configuration errors abort startup. Store and chunking errors are raised
below the service boundary and turned into `success=False` responses by
RetrievalService; ingestion records them per document.

Dependencies: None
System role: Typed failures with structured context for logs
"""

from typing import Any


class LettersRagException(Exception):
    """Base exception for all retrieval pipeline errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(LettersRagException):
    """Raised when required connection parameters are missing or inconsistent."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            setting: Name of the offending setting
            details: Additional context
        """
        details = details or {}
        if setting:
            details["setting"] = setting
        super().__init__(message, details)


class DocumentProcessingError(LettersRagException):
    """Base exception for document processing errors."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document processing error.

        Args:
            message: Error message
            source: Identifier of the document that failed
            details: Additional context
        """
        details = details or {}
        if source:
            details["source"] = source
        super().__init__(message, details)


class ChunkingError(DocumentProcessingError):
    """Raised when a document cannot be split into chunks."""

    pass


class VectorStoreError(LettersRagException):
    """Raised when index store operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (initialize, ingest, query, describe)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class IndexNotReadyError(VectorStoreError):
    """Raised when the remote index is missing, not initialized, or never became ready."""

    pass


class RetrievalError(LettersRagException):
    """Raised when retrieval operations fail."""

    def __init__(
        self,
        message: str,
        query: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize retrieval error.

        Args:
            message: Error message
            query: Query text that failed (truncated for logging)
            details: Additional context
        """
        details = details or {}
        if query:
            details["query_preview"] = query[:50]
        super().__init__(message, details)
