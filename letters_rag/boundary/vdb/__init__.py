"""
Index store boundary layer.

Provides the index store contract and its backends:
- LocalLexicalStore: in-memory term-overlap scoring
- S3VectorsIndexStore: Amazon S3 Vectors (import from s3_vectors_store; pulls in boto3)

Dependencies: boto3, langchain_core
System role: Index store adapters for retrieval
"""

from letters_rag.boundary.vdb.index_store import IndexStore
from letters_rag.boundary.vdb.local_lexical_store import LocalLexicalStore

__all__ = [
    "IndexStore",
    "LocalLexicalStore",
]
