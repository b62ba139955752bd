"""
S3 Vectors index store for production retrieval.

Delegates ingest and similarity queries to an Amazon S3 Vectors index.
A stable namespace is written into every vector key and metadata record and
AND-ed into every query filter, so one physical index can hold several
logical corpora without collision.

Before first use `initialize()` makes sure the index exists with the
configured dimension. A freshly created index is polled with exponential
backoff until the service reports it, bounded by a timeout; running out of
time is fatal for initialization.

Metadata Keys:
- Filterable: namespace, source, year, chunkIndex, totalChunks, documentType
- Non-filterable: content

Dependencies: boto3, langchain_core.embeddings, tenacity
System role: Remote vector index adapter
"""

import logging
from collections.abc import Sequence
from typing import Any

import boto3
from botocore.exceptions import ClientError
from langchain_core.embeddings import Embeddings
from pydantic import ValidationError
from tenacity import (
    Retrying,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    stop_after_delay,
    wait_exponential,
    wait_exponential_jitter,
)

from letters_rag.boundary.vdb.index_store import IndexStore
from letters_rag.core.exceptions import ConfigurationError, IndexNotReadyError, VectorStoreError
from letters_rag.models.chunk import Chunk, ChunkMetadata, ScoredChunk, ScoringMode
from letters_rag.models.document import StoreStats
from letters_rag.models.filters import NoFilter, YearEquals, YearRange

logger = logging.getLogger(__name__)

# S3 Vectors accepts at most 500 vectors per PutVectors call
PUT_BATCH_SIZE = 500
LIST_PAGE_SIZE = 500
NOT_FOUND_CODES = {"NotFoundException", "ResourceNotFoundException"}


def _error_code(error: ClientError) -> str:
    return error.response.get("Error", {}).get("Code", "")


class S3VectorsIndexStore(IndexStore):
    """
    S3 Vectors store behind the index store contract.

    Embeds text with an injected LangChain `Embeddings` and queries by cosine
    distance. Reported `distance` is the raw service value; `score` is
    `1 - distance` so higher is better.
    """

    backend_name = "s3"
    is_remote = True

    def __init__(
        self,
        vectors_bucket: str,
        index_name: str,
        namespace: str,
        embeddings: Embeddings,
        dimension: int,
        region: str = "us-east-1",
        distance_metric: str = "cosine",
        readiness_timeout: float = 120.0,
        readiness_initial_wait: float = 1.0,
        readiness_max_wait: float = 15.0,
        client: Any | None = None,
    ) -> None:
        """
        Initialize the adapter. Does not contact the service.

        Args:
            vectors_bucket: S3 Vectors bucket name
            index_name: Index name within the bucket
            namespace: Logical corpus key
            embeddings: Embedding model; must emit `dimension`-long vectors
            dimension: Expected index dimension
            region: AWS region for S3 Vectors
            distance_metric: Metric used when the index has to be created
            readiness_timeout: Seconds to wait for a new index to appear
            readiness_initial_wait: First backoff interval in seconds
            readiness_max_wait: Backoff ceiling in seconds
            client: Pre-built boto3 `s3vectors` client (tests inject a mock)

        Raises:
            ConfigurationError: When a required connection parameter is empty
        """
        for name, value in (
            ("vectors_bucket", vectors_bucket),
            ("index_name", index_name),
            ("namespace", namespace),
        ):
            if not value:
                raise ConfigurationError(f"{name} is required for the S3 Vectors store", setting=name)
        if dimension < 1:
            raise ConfigurationError("dimension must be positive", setting="dimension")

        self._bucket = vectors_bucket
        self._index_name = index_name
        self._namespace = namespace
        self._embeddings = embeddings
        self._dimension = dimension
        self._distance_metric = distance_metric
        self._readiness_timeout = readiness_timeout
        self._readiness_initial_wait = readiness_initial_wait
        self._readiness_max_wait = readiness_max_wait
        self._client = client or boto3.client("s3vectors", region_name=region)
        self._ready = False

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def is_ready(self) -> bool:
        return self._ready

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """
        Ensure the index exists with the expected dimension.

        Raises:
            ConfigurationError: Existing index has a different dimension
            IndexNotReadyError: Created index did not become ready in time
            VectorStoreError: Service call failed
        """
        if self._ready:
            return

        index = self._describe_index()
        if index is None:
            logger.info(
                f"{__name__}:initialize - Creating index {self._index_name} "
                f"(dimension={self._dimension}, metric={self._distance_metric})"
            )
            self._create_index()
            index = self._wait_until_ready()

        actual = index.get("dimension")
        if actual is not None and int(actual) != self._dimension:
            raise ConfigurationError(
                "Index dimension does not match the embedding model",
                setting="embedding_dimension",
                details={"index": self._index_name, "index_dimension": actual, "expected": self._dimension},
            )

        self._ready = True
        logger.info(f"{__name__}:initialize - Index {self._index_name} is ready (namespace={self._namespace})")

    def _describe_index(self) -> dict[str, Any] | None:
        """Return the index description, or None if it does not exist."""
        try:
            response = self._client.get_index(vectorBucketName=self._bucket, indexName=self._index_name)
        except ClientError as e:
            if _error_code(e) in NOT_FOUND_CODES:
                return None
            raise VectorStoreError(
                message="Failed to describe S3 Vectors index",
                operation="initialize",
                details={"error": str(e), "index": self._index_name},
            ) from e
        return response.get("index", {})

    def _create_index(self) -> None:
        try:
            self._client.create_index(
                vectorBucketName=self._bucket,
                indexName=self._index_name,
                dataType="float32",
                dimension=self._dimension,
                distanceMetric=self._distance_metric,
                metadataConfiguration={"nonFilterableMetadataKeys": ["content"]},
            )
        except ClientError as e:
            if _error_code(e) == "ConflictException":
                # Created concurrently by another process
                return
            raise VectorStoreError(
                message="Failed to create S3 Vectors index",
                operation="initialize",
                details={"error": str(e), "index": self._index_name},
            ) from e

    def _probe_index(self) -> dict[str, Any]:
        index = self._describe_index()
        if index is None:
            raise IndexNotReadyError(
                f"Index {self._index_name} not yet available",
                operation="initialize",
            )
        return index

    def _wait_until_ready(self) -> dict[str, Any]:
        """Poll with exponential backoff until the index is visible or the timeout passes."""
        retrying = Retrying(
            retry=retry_if_exception_type(IndexNotReadyError),
            stop=stop_after_delay(self._readiness_timeout),
            wait=wait_exponential(
                multiplier=self._readiness_initial_wait,
                max=self._readiness_max_wait,
            ),
            before_sleep=lambda retry_state: logger.warning(
                f"{__name__}:_wait_until_ready - Index not ready, attempt {retry_state.attempt_number}"
            ),
            reraise=True,
        )
        try:
            return retrying(self._probe_index)
        except IndexNotReadyError as e:
            raise IndexNotReadyError(
                f"Index {self._index_name} did not become ready within {self._readiness_timeout}s",
                operation="initialize",
                details={"index": self._index_name, "timeout_seconds": self._readiness_timeout},
            ) from e

    def _require_ready(self, operation: str) -> None:
        if not self._ready:
            raise IndexNotReadyError(
                "S3 Vectors store used before initialize()",
                operation=operation,
                details={"index": self._index_name},
            )

    # ------------------------------------------------------------------
    # Ingest
    # ------------------------------------------------------------------

    def ingest(self, chunks: Sequence[Chunk]) -> int:
        """
        Embed and upsert chunks under this store's namespace.

        Vector keys are deterministic (`namespace/source#index`) so
        re-ingesting a document overwrites its previous vectors.

        Raises:
            IndexNotReadyError: Store not initialized
            ConfigurationError: Embedding dimension differs from the index
            VectorStoreError: Upload failed after retries
        """
        self._require_ready("ingest")
        if not chunks:
            return 0

        embeddings = self._embeddings.embed_documents([chunk.content for chunk in chunks])
        entries = []
        for chunk, vector in zip(chunks, embeddings):
            self._check_dimension(vector)
            entries.append(
                {
                    "key": self._vector_key(chunk),
                    "data": {"float32": [float(v) for v in vector]},
                    "metadata": self._to_metadata(chunk),
                }
            )

        for start in range(0, len(entries), PUT_BATCH_SIZE):
            batch = entries[start : start + PUT_BATCH_SIZE]
            try:
                self._put_with_retry(batch)
            except ClientError as e:
                raise VectorStoreError(
                    message="Failed to upsert vectors to S3 Vectors",
                    operation="ingest",
                    details={"error": str(e), "vector_count": len(batch)},
                ) from e

        logger.info(f"{__name__}:ingest - Stored {len(entries)} vectors (namespace={self._namespace})")
        return len(entries)

    @retry(
        retry=retry_if_exception_type(ClientError),
        stop=stop_after_attempt(3),
        wait=wait_exponential_jitter(initial=1, max=10, jitter=1),
        before_sleep=lambda retry_state: logger.warning(
            f"{__name__}:_put_with_retry - Retry {retry_state.attempt_number}/3 after service error"
        ),
        reraise=True,
    )
    def _put_with_retry(self, batch: list[dict[str, Any]]) -> None:
        self._client.put_vectors(
            vectorBucketName=self._bucket,
            indexName=self._index_name,
            vectors=batch,
        )

    def _check_dimension(self, vector: Sequence[float]) -> None:
        if len(vector) != self._dimension:
            raise ConfigurationError(
                "Embedding dimension does not match the index",
                setting="embedding_dimension",
                details={"embedding_dimension": len(vector), "expected": self._dimension},
            )

    def _vector_key(self, chunk: Chunk) -> str:
        return f"{self._namespace}/{chunk.chunk_id}"

    def _to_metadata(self, chunk: Chunk) -> dict[str, Any]:
        metadata = chunk.metadata.model_dump(mode="json", by_alias=True)
        metadata["namespace"] = self._namespace
        metadata["content"] = chunk.content
        return metadata

    # ------------------------------------------------------------------
    # Query
    # ------------------------------------------------------------------

    def query(
        self,
        text: str,
        limit: int,
        filter: NoFilter | YearEquals | YearRange | None = None,
        mode: ScoringMode = ScoringMode.NORMALIZED,
    ) -> list[ScoredChunk]:
        """
        Similarity search within the namespace.

        `mode` only applies to lexical stores and is ignored here.

        Raises:
            IndexNotReadyError: Store not initialized
            VectorStoreError: Query failed after retries
        """
        self._require_ready("query")
        if limit < 1:
            return []

        vector = self._embeddings.embed_query(text)
        self._check_dimension(vector)

        try:
            response = self._query_with_retry(
                vector=[float(v) for v in vector],
                top_k=limit,
                filter_dict=self._build_filter(filter),
            )
        except ClientError as e:
            raise VectorStoreError(
                message="Failed to query vectors from S3 Vectors",
                operation="query",
                details={"error": str(e), "query_preview": text[:50]},
            ) from e

        results = []
        for match in response.get("vectors", []):
            chunk = self._from_metadata(match.get("metadata") or {})
            if chunk is None:
                continue
            distance = float(match.get("distance", 1.0))
            results.append(ScoredChunk(chunk=chunk, score=1.0 - distance, distance=distance))

        results.sort(key=lambda item: item.score, reverse=True)
        logger.info(f"{__name__}:query - Found {len(results)} results", extra={"k": limit})
        return results[:limit]

    @retry(
        retry=retry_if_exception_type(ClientError),
        stop=stop_after_attempt(3),
        wait=wait_exponential_jitter(initial=1, max=10, jitter=1),
        before_sleep=lambda retry_state: logger.warning(
            f"{__name__}:_query_with_retry - Retry {retry_state.attempt_number}/3 after service error"
        ),
        reraise=True,
    )
    def _query_with_retry(
        self,
        vector: list[float],
        top_k: int,
        filter_dict: dict[str, Any],
    ) -> dict[str, Any]:
        return self._client.query_vectors(
            vectorBucketName=self._bucket,
            indexName=self._index_name,
            topK=top_k,
            queryVector={"float32": vector},
            filter=filter_dict,
            returnMetadata=True,
            returnDistance=True,
        )

    def _build_filter(self, filter: NoFilter | YearEquals | YearRange | None) -> dict[str, Any]:
        """AND the namespace constraint with the caller's metadata filter."""
        namespace_clause = {"namespace": {"$eq": self._namespace}}
        extra = filter.to_vector_filter() if filter is not None else None
        if not extra:
            return namespace_clause
        clauses = [namespace_clause]
        clauses.extend(extra["$and"] if "$and" in extra else [extra])
        return {"$and": clauses}

    def _from_metadata(self, metadata: dict[str, Any]) -> Chunk | None:
        content = metadata.get("content")
        if not content:
            logger.warning(f"{__name__}:_from_metadata - Skipping vector without content")
            return None
        try:
            return Chunk(
                content=content,
                metadata=ChunkMetadata(
                    source=metadata.get("source", ""),
                    year=int(metadata.get("year", 0)),
                    chunk_index=int(metadata.get("chunkIndex", 0)),
                    total_chunks=int(metadata.get("totalChunks", 1)),
                    document_type=metadata.get("documentType", "shareholder_letter"),
                ),
            )
        except (ValidationError, TypeError, ValueError) as e:
            logger.warning(f"{__name__}:_from_metadata - Skipping vector with invalid metadata: {e}")
            return None

    # ------------------------------------------------------------------
    # Stats
    # ------------------------------------------------------------------

    def _iter_namespace_vectors(self):
        prefix = f"{self._namespace}/"
        next_token: str | None = None
        while True:
            kwargs: dict[str, Any] = {
                "vectorBucketName": self._bucket,
                "indexName": self._index_name,
                "maxResults": LIST_PAGE_SIZE,
                "returnMetadata": True,
            }
            if next_token:
                kwargs["nextToken"] = next_token
            try:
                response = self._client.list_vectors(**kwargs)
            except ClientError as e:
                raise VectorStoreError(
                    message="Failed to list vectors from S3 Vectors",
                    operation="describe",
                    details={"error": str(e)},
                ) from e
            for vector in response.get("vectors", []):
                if vector.get("key", "").startswith(prefix):
                    yield vector
            next_token = response.get("nextToken")
            if not next_token:
                break

    def count(self) -> int:
        self._require_ready("describe")
        return sum(1 for _ in self._iter_namespace_vectors())

    def describe(self) -> StoreStats:
        self._require_ready("describe")
        total = 0
        sources: set[str] = set()
        for vector in self._iter_namespace_vectors():
            total += 1
            source = (vector.get("metadata") or {}).get("source")
            if source:
                sources.add(source)
        logger.info(f"{__name__}:describe - namespace={self._namespace} vectors={total}")
        return StoreStats(
            backend=self.backend_name,
            namespace=self._namespace,
            total_chunks=total,
            sources=sorted(sources),
        )
