"""
Index store factory for selecting between local lexical (dev) and S3 Vectors (prod).

Depends on VECTOR_STORE_STORE_TYPE environment variable.
Provides consistent interface regardless of underlying implementation.

Dependencies: letters_rag.boundary.vdb, letters_rag.configs
System role: Index store instantiation and selection
"""

import logging

from langchain_core.embeddings import Embeddings

from letters_rag.boundary.vdb.index_store import IndexStore
from letters_rag.boundary.vdb.local_lexical_store import LocalLexicalStore
from letters_rag.boundary.vdb.sample_corpus import SAMPLE_CHUNKS
from letters_rag.configs import Settings, get_settings
from letters_rag.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def build_local_store(settings: Settings) -> LocalLexicalStore:
    """Create an in-memory lexical store with scoring weights from settings."""
    retrieval = settings.retrieval
    store = LocalLexicalStore(
        term_weight=retrieval.term_weight,
        phrase_bonus=retrieval.phrase_bonus,
        raw_term_weight=retrieval.raw_term_weight,
        raw_phrase_bonus=retrieval.raw_phrase_bonus,
        raw_presence_bonus=retrieval.raw_presence_bonus,
        min_term_length=retrieval.min_term_length,
    )
    if settings.vector_store.load_sample_corpus:
        store.ingest(SAMPLE_CHUNKS)
    return store


def build_s3_store(settings: Settings, embeddings: Embeddings | None = None, client=None):
    """
    Create and initialize an S3 Vectors store.

    Args:
        settings: Application settings
        embeddings: Embedding model (defaults to Gemini at the configured dimension)
        client: Optional pre-built boto3 client

    Returns:
        S3VectorsIndexStore: Initialized, queryable store

    Raises:
        ConfigurationError: Missing bucket/index or dimension mismatch
        IndexNotReadyError: Index creation did not finish in time
    """
    from letters_rag.boundary.vdb.s3_vectors_store import S3VectorsIndexStore

    config = settings.vector_store
    if not config.vectors_bucket:
        raise ConfigurationError(
            "VECTOR_STORE_VECTORS_BUCKET must be set for the s3 store",
            setting="vectors_bucket",
        )

    if embeddings is None:
        from letters_rag.boundary.vdb.embeddings_wrapper import FixedDimensionEmbeddings

        embeddings = FixedDimensionEmbeddings(
            model=config.embedding_model,
            output_dimensionality=config.embedding_dimension,
        )

    store = S3VectorsIndexStore(
        vectors_bucket=config.vectors_bucket,
        index_name=config.index_name,
        namespace=config.namespace,
        embeddings=embeddings,
        dimension=config.embedding_dimension,
        region=config.aws_region,
        distance_metric=config.distance_metric,
        readiness_timeout=config.readiness_timeout_seconds,
        readiness_initial_wait=config.readiness_initial_wait,
        readiness_max_wait=config.readiness_max_wait,
        client=client,
    )
    store.initialize()
    return store


def get_index_store(settings: Settings | None = None) -> IndexStore:
    """
    Factory function to get an index store based on configuration.

    Returns:
        IndexStore: LocalLexicalStore or initialized S3VectorsIndexStore

    Raises:
        ConfigurationError: If the store type is invalid or the s3 store is misconfigured
    """
    settings = settings or get_settings()
    store_type = settings.vector_store.store_type.lower()

    if store_type == "local":
        logger.info(f"{__name__}:get_index_store - Creating local lexical store (dev mode)")
        return build_local_store(settings)

    elif store_type == "s3":
        logger.info(f"{__name__}:get_index_store - Creating S3 Vectors store (production mode)")
        return build_s3_store(settings)

    else:
        raise ConfigurationError(
            f"Invalid VECTOR_STORE_STORE_TYPE: {store_type}. "
            f"Must be 'local' (dev) or 's3' (production).",
            setting="store_type",
        )
