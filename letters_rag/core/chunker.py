"""
Text chunking using RecursiveCharacterTextSplitter.

Splits a letter's full text into overlapping spans, preferring paragraph
breaks, then line breaks, sentence ends, word boundaries and finally raw
characters. Separators stay at the end of the span they close, so a
sentence keeps its full stop. Span order is document order and becomes
`chunk_index`.

Dependencies: langchain_text_splitters
System role: First stage of document ingestion
"""

from langchain_text_splitters import RecursiveCharacterTextSplitter

from letters_rag.core.exceptions import ChunkingError, ConfigurationError
from letters_rag.models.chunk import Chunk, ChunkMetadata
from letters_rag.models.document import SourceDocument

SEPARATORS = ["\n\n", "\n", ". ", " ", ""]


class TextChunker:
    """Split documents into contiguous, overlapping chunks."""

    def __init__(
        self,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
    ) -> None:
        """
        Initialize chunker with splitter configuration.

        Args:
            chunk_size: Target maximum span length in characters
            chunk_overlap: Characters shared between adjacent spans

        Raises:
            ConfigurationError: When overlap is not smaller than the span size
        """
        if chunk_overlap >= chunk_size:
            raise ConfigurationError(
                f"chunk_overlap ({chunk_overlap}) must be smaller than chunk_size ({chunk_size})",
                setting="chunk_overlap",
            )
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self._splitter = RecursiveCharacterTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            separators=SEPARATORS,
            length_function=len,
            keep_separator="end",
        )

    def split(self, full_text: str) -> list[str]:
        """
        Split text into ordered spans.

        Args:
            full_text: Raw document text

        Returns:
            list[str]: Spans in left-to-right order; empty for blank input
        """
        if not full_text or not full_text.strip():
            return []
        return [span for span in self._splitter.split_text(full_text) if span.strip()]

    def chunk_document(self, document: SourceDocument) -> list[Chunk]:
        """
        Split a document and attach positional metadata.

        Args:
            document: Source letter

        Returns:
            list[Chunk]: Chunks numbered 0..N-1, each with total_chunks == N

        Raises:
            ChunkingError: When the splitter fails
        """
        try:
            spans = self.split(document.text)
        except Exception as e:
            raise ChunkingError(
                f"Failed to split document: {e}",
                source=document.source,
            ) from e

        total = len(spans)
        return [
            Chunk(
                content=span,
                metadata=ChunkMetadata(
                    source=document.source,
                    year=document.year,
                    chunk_index=index,
                    total_chunks=total,
                    document_type=document.document_type,
                ),
            )
            for index, span in enumerate(spans)
        ]


def split_text(full_text: str, target_size: int = 1000, overlap: int = 200) -> list[str]:
    """Split text with a one-off chunker."""
    return TextChunker(chunk_size=target_size, chunk_overlap=overlap).split(full_text)
