"""
Shared test fixtures and configuration for entire test suite.

Provides: chunk factories, seeded local stores, S3 Vectors client mocks, fake embeddings
Dependencies: pytest, langchain_core
System role: Test infrastructure and fixture management
"""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError
from langchain_core.embeddings import DeterministicFakeEmbedding

from letters_rag.boundary.vdb.local_lexical_store import LocalLexicalStore
from letters_rag.boundary.vdb.sample_corpus import SAMPLE_CHUNKS
from letters_rag.models.chunk import Chunk, ChunkMetadata

EMBEDDING_SIZE = 8


def make_chunk(
    content: str,
    year: int = 2023,
    source: str | None = None,
    index: int = 0,
    total: int = 1,
) -> Chunk:
    """Build a chunk with sensible metadata defaults."""
    return Chunk(
        content=content,
        metadata=ChunkMetadata(
            source=source or f"{year}-letter",
            year=year,
            chunk_index=index,
            total_chunks=total,
        ),
    )


def client_error(code: str, operation: str = "GetIndex") -> ClientError:
    """Build a botocore ClientError with the given error code."""
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


@pytest.fixture
def bitcoin_chunk() -> Chunk:
    return make_chunk("Bitcoin produces nothing and is purely speculative", year=2023)


@pytest.fixture
def fair_prices_chunk() -> Chunk:
    return make_chunk("We buy wonderful businesses at fair prices", year=2022)


@pytest.fixture
def example_store(bitcoin_chunk: Chunk, fair_prices_chunk: Chunk) -> LocalLexicalStore:
    """
    Local store holding the two-chunk end-to-end corpus.

    Returns:
        LocalLexicalStore: 2023 bitcoin chunk followed by 2022 fair prices chunk
    """
    store = LocalLexicalStore()
    store.ingest([bitcoin_chunk, fair_prices_chunk])
    return store


@pytest.fixture
def sample_store() -> LocalLexicalStore:
    """Local store seeded with the bundled sample letters."""
    store = LocalLexicalStore()
    store.ingest(SAMPLE_CHUNKS)
    return store


@pytest.fixture
def fake_embeddings() -> DeterministicFakeEmbedding:
    return DeterministicFakeEmbedding(size=EMBEDDING_SIZE)


@pytest.fixture
def mock_s3vectors_client() -> MagicMock:
    """
    Create mock boto3 s3vectors client.

    Returns:
        MagicMock: Client whose index already exists with the test dimension
    """
    client = MagicMock()
    client.get_index.return_value = {"index": {"indexName": "letters", "dimension": EMBEDDING_SIZE}}
    client.query_vectors.return_value = {"vectors": []}
    client.list_vectors.return_value = {"vectors": []}
    return client
