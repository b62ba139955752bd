"""
Google Generative AI embeddings with a fixed output dimension.

The remote index is created with one dimension and every vector written or
queried must match it. This wrapper pins `output_dimensionality` on every
embed call and rejects vectors of any other length.

Dependencies: langchain_google_genai
System role: Embedding dimension consistency for S3 Vectors compatibility
"""

import logging
from typing import List

from langchain_google_genai import GoogleGenerativeAIEmbeddings

from letters_rag.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class FixedDimensionEmbeddings(GoogleGenerativeAIEmbeddings):
    """GoogleGenerativeAIEmbeddings that always requests and enforces one dimension."""

    _output_dimensionality: int = 1024

    def __init__(
        self,
        model: str = "models/gemini-embedding-001",
        output_dimensionality: int = 1024,
        **kwargs,
    ) -> None:
        """
        Initialize embeddings with fixed output dimensionality.

        Args:
            model: Google embedding model ID
            output_dimensionality: Dimension of every returned vector
            **kwargs: Additional arguments for GoogleGenerativeAIEmbeddings
        """
        super().__init__(model=model, **kwargs)
        self._output_dimensionality = output_dimensionality
        logger.info(
            f"{__name__}:__init__ - Initialized with model={model}, "
            f"output_dimensionality={output_dimensionality}"
        )

    @property
    def dimension(self) -> int:
        return self._output_dimensionality

    def _verify(self, vector: List[float]) -> List[float]:
        if len(vector) != self._output_dimensionality:
            raise ConfigurationError(
                "Embedding model returned an unexpected dimension",
                setting="embedding_dimension",
                details={"returned": len(vector), "expected": self._output_dimensionality},
            )
        return vector

    def embed_documents(self, texts: List[str], **kwargs) -> List[List[float]]:
        """Embed letter chunks at the pinned dimension."""
        kwargs.setdefault("task_type", "RETRIEVAL_DOCUMENT")
        kwargs["output_dimensionality"] = self._output_dimensionality
        vectors = super().embed_documents(texts, **kwargs)
        return [self._verify(vector) for vector in vectors]

    def embed_query(self, text: str, **kwargs) -> List[float]:
        """Embed a composed query at the pinned dimension."""
        kwargs.setdefault("task_type", "RETRIEVAL_QUERY")
        kwargs["output_dimensionality"] = self._output_dimensionality
        return self._verify(super().embed_query(text, **kwargs))
