"""
Chunk domain model.

A chunk is an immutable, addressable span of a source letter carrying
provenance metadata. Chunks are created once during ingestion and never
mutated.

Dependencies: pydantic
System role: Unit of retrievable text
"""

from enum import Enum

from pydantic import ConfigDict, Field, model_validator

from letters_rag.models.common import CamelModel


class DocumentType(str, Enum):
    """Kind of source document a chunk was cut from."""

    SHAREHOLDER_LETTER = "shareholder_letter"


class ScoringMode(str, Enum):
    """Lexical scoring variants supported by the local store."""

    RAW = "raw"
    NORMALIZED = "normalized"


class ChunkMetadata(CamelModel):
    """Positional and document metadata attached to every chunk."""

    model_config = ConfigDict(frozen=True)

    source: str = Field(min_length=1, description="Document identifier")
    year: int = Field(description="Letter year")
    chunk_index: int = Field(ge=0, description="Position of the chunk within its document")
    total_chunks: int = Field(ge=1, description="Number of chunks the document was split into")
    document_type: DocumentType = Field(default=DocumentType.SHAREHOLDER_LETTER)

    @model_validator(mode="after")
    def _check_index_bounds(self) -> "ChunkMetadata":
        if self.chunk_index >= self.total_chunks:
            raise ValueError(
                f"chunk_index {self.chunk_index} out of range for total_chunks {self.total_chunks}"
            )
        return self


class Chunk(CamelModel):
    """Immutable unit of retrievable text."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(min_length=1, description="Chunk text content")
    metadata: ChunkMetadata = Field(description="Chunk provenance metadata")

    @property
    def chunk_id(self) -> str:
        """Deterministic identifier: source plus position."""
        return f"{self.metadata.source}#{self.metadata.chunk_index}"


class ScoredChunk(CamelModel):
    """
    A chunk paired with its ranking score.

    `score` is always higher-is-better. Remote results also carry the raw
    service distance so relevance can be mapped back into [0, 1].
    """

    model_config = ConfigDict(frozen=True)

    chunk: Chunk
    score: float
    distance: float | None = None
