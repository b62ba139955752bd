"""
Document ingestion pipeline.

Chunks and stores letters one at a time. A failure while splitting or
storing one document is logged and recorded, and processing continues with
the next document; the batch only fails when nothing was stored at all.
Aggregates are computed from the per-document outcomes, never from the
order in which they completed.

Dependencies: letters_rag.core.chunker, letters_rag.boundary.vdb
System role: Ingestion orchestration (coordinates only)
"""

import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass

from pydantic import ValidationError

from letters_rag.boundary.vdb.index_store import IndexStore
from letters_rag.core.chunker import TextChunker
from letters_rag.core.ranking import RankingEngine
from letters_rag.models.document import IngestionResult, SourceDocument, StoreValidationResult

logger = logging.getLogger(__name__)

DEFAULT_TEST_QUERY = "Warren Buffett investment philosophy"
SAMPLE_PREVIEW_CHARS = 200


@dataclass(frozen=True)
class DocumentOutcome:
    """Result of ingesting a single document."""

    source: str
    chunks_stored: int
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class IngestionPipeline:
    """Orchestrate document ingestion: chunk -> store, isolated per document."""

    def __init__(self, store: IndexStore, chunker: TextChunker | None = None) -> None:
        """
        Initialize pipeline.

        Args:
            store: Index store receiving the chunks
            chunker: Text chunker (default sizes if None)
        """
        self._store = store
        self._chunker = chunker or TextChunker()

    def ingest_document(self, document: SourceDocument) -> DocumentOutcome:
        """
        Chunk and store one document, capturing any failure.

        Args:
            document: Source letter

        Returns:
            DocumentOutcome: Stored chunk count or the error message
        """
        try:
            chunks = self._chunker.chunk_document(document)
            if not chunks:
                logger.warning(f"{__name__}:ingest_document - {document.source} produced no chunks")
                return DocumentOutcome(source=document.source, chunks_stored=0)
            stored = self._store.ingest(chunks)
        except Exception as e:
            logger.error(
                f"{__name__}:ingest_document - Error processing {document.source}: {type(e).__name__}: {e}",
                exc_info=True,
            )
            return DocumentOutcome(source=document.source, chunks_stored=0, error=str(e))

        logger.info(f"{__name__}:ingest_document - Processed {document.source}: {stored} chunks stored")
        return DocumentOutcome(source=document.source, chunks_stored=stored)

    def ingest_text(self, filename: str, text: str, clean: bool = False) -> DocumentOutcome:
        """
        Build a document from a file name and its text, then ingest it.

        A file name that yields no usable source (e.g. ".pdf") is recorded as
        a failed outcome keyed by the raw file name.
        """
        try:
            document = SourceDocument.from_filename(filename, text, clean=clean)
        except ValidationError as e:
            logger.error(f"{__name__}:ingest_text - Rejected {filename!r}: {e.error_count()} validation errors")
            return DocumentOutcome(source=filename, chunks_stored=0, error=str(e))
        return self.ingest_document(document)

    def ingest_texts(self, letters: Iterable[tuple[str, str]], clean: bool = False) -> IngestionResult:
        """
        Ingest (filename, text) pairs sequentially.

        Args:
            letters: File names with their extracted text
            clean: Normalize whitespace and strip symbols before chunking

        Returns:
            IngestionResult: Aggregate counts, with rejected file names in failed_sources
        """
        start_time = time.perf_counter()
        outcomes = [self.ingest_text(filename, text, clean=clean) for filename, text in letters]
        return self.aggregate(outcomes, elapsed_ms=(time.perf_counter() - start_time) * 1000)

    def ingest(self, documents: Iterable[SourceDocument]) -> IngestionResult:
        """
        Ingest a batch of documents sequentially.

        Args:
            documents: Letters to ingest

        Returns:
            IngestionResult: Aggregate counts; success iff at least one chunk was stored
        """
        start_time = time.perf_counter()
        outcomes = [self.ingest_document(document) for document in documents]
        return self.aggregate(outcomes, elapsed_ms=(time.perf_counter() - start_time) * 1000)

    @staticmethod
    def aggregate(outcomes: Iterable[DocumentOutcome], elapsed_ms: float | None = None) -> IngestionResult:
        """
        Fold per-document outcomes into a batch result, independent of their order.

        documents_processed counts distinct sources that stored at least one
        chunk, so two documents sharing a source count once. total_chunks sums
        every successful outcome.
        """
        outcomes = list(outcomes)
        stored_sources = {o.source for o in outcomes if not o.failed and o.chunks_stored > 0}
        total_chunks = sum(o.chunks_stored for o in outcomes if not o.failed)
        failed_sources = sorted(o.source for o in outcomes if o.failed)

        if elapsed_ms is not None:
            logger.info(
                f"{__name__}:aggregate - documents={len(stored_sources)} chunks={total_chunks} "
                f"failed={len(failed_sources)} elapsed_ms={elapsed_ms:.1f}"
            )

        if total_chunks == 0:
            return IngestionResult(
                success=False,
                documents_processed=0,
                total_chunks=0,
                message="Document ingestion failed",
                error="No documents were processed",
                failed_sources=failed_sources,
            )

        return IngestionResult(
            success=True,
            documents_processed=len(stored_sources),
            total_chunks=total_chunks,
            message=(
                f"Successfully processed {len(stored_sources)} documents into {total_chunks} chunks"
            ),
            failed_sources=failed_sources,
        )

    def validate(self, test_query: str = DEFAULT_TEST_QUERY, limit: int = 3) -> StoreValidationResult:
        """
        Probe the store with a test query.

        Args:
            test_query: Query expected to hit the corpus
            limit: Number of results to request

        Returns:
            StoreValidationResult: Failure when the store returns nothing or errors
        """
        try:
            results = RankingEngine(self._store).search(test_query, limit)
        except Exception as e:
            logger.error(f"{__name__}:validate - {type(e).__name__}: {e}")
            return StoreValidationResult(
                success=False,
                results_found=0,
                message="Vector store validation failed",
                error=str(e),
            )

        if not results:
            return StoreValidationResult(
                success=False,
                results_found=0,
                message="Vector store validation failed",
                error="No results found for test query - vector store may be empty",
            )

        return StoreValidationResult(
            success=True,
            results_found=len(results),
            message=f"Vector store validation successful - found {len(results)} results",
            sample_result=results[0].chunk.content[:SAMPLE_PREVIEW_CHARS] + "...",
        )
