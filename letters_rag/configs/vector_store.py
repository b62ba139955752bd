"""
Vector store configuration settings.

Selects the index backend and carries the S3 Vectors connection parameters,
embedding model settings and the readiness-wait policy used when the remote
index has to be created.

Dependencies: pydantic, pydantic_settings
System role: Index store configuration for retrieval
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class VectorStoreSettings(BaseSettings):
    """Index store configuration (in-memory lexical for dev, S3 Vectors for prod)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VECTOR_STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    store_type: str = Field(
        default="local",
        description="Index store type: 'local' for in-memory lexical, 's3' for S3 Vectors",
    )
    vectors_bucket: str = Field(default="", description="S3 Vectors bucket name")
    index_name: str = Field(default="shareholder-letters", description="S3 Vectors index name")
    namespace: str = Field(
        default="berkshire-hathaway-letters",
        description="Logical corpus key; isolates corpora sharing one physical index",
    )
    aws_region: str = Field(default="us-east-1", description="AWS region for S3 Vectors")

    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Google Gemini embedding model ID",
    )
    embedding_dimension: int = Field(
        default=1024,
        description="Embedding vector dimension; must match the remote index",
        ge=1,
    )
    distance_metric: str = Field(default="cosine", description="Index distance metric")

    readiness_timeout_seconds: float = Field(
        default=120.0,
        description="Upper bound on waiting for a newly created index to become queryable",
        gt=0,
    )
    readiness_initial_wait: float = Field(default=1.0, description="First poll backoff in seconds")
    readiness_max_wait: float = Field(default=15.0, description="Maximum poll backoff in seconds")

    load_sample_corpus: bool = Field(
        default=False,
        description="Preload the bundled sample letter chunks into the local store",
    )
