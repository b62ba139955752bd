"""
Index store contract.

One capability contract shared by the remote vector index and the local
lexical store so the ranking engine and everything above it are
backend-agnostic.

Dependencies: letters_rag.models
System role: Polymorphic store interface
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from letters_rag.models.chunk import Chunk, ScoredChunk, ScoringMode
from letters_rag.models.document import StoreStats
from letters_rag.models.filters import NoFilter, YearEquals, YearRange


class IndexStore(ABC):
    """Place to query for chunks similar to a text."""

    #: Short backend tag reported in stats and logs
    backend_name: str = "abstract"
    #: Whether calls cross a network boundary and should run off the event loop
    is_remote: bool = False

    def initialize(self) -> None:
        """Prepare the store for use. No-op unless the backend needs setup."""

    @abstractmethod
    def ingest(self, chunks: Sequence[Chunk]) -> int:
        """
        Add chunks to the store.

        Args:
            chunks: Chunks to store

        Returns:
            int: Number of chunks stored
        """

    @abstractmethod
    def query(
        self,
        text: str,
        limit: int,
        filter: NoFilter | YearEquals | YearRange | None = None,
        mode: ScoringMode = ScoringMode.NORMALIZED,
    ) -> list[ScoredChunk]:
        """
        Return up to `limit` chunks ranked by descending score.

        Args:
            text: Composed query text
            limit: Maximum number of results
            filter: Metadata predicate applied before truncation
            mode: Scoring mode for backends that support more than one

        Returns:
            list[ScoredChunk]: Ranked results; empty when nothing matches
        """

    @abstractmethod
    def count(self) -> int:
        """Number of chunks held by the store."""

    @abstractmethod
    def describe(self) -> StoreStats:
        """Summary statistics for the stored corpus."""
