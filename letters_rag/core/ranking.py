"""
Ranking engine.

Pure orchestration over an index store: clamps the limit, delegates scoring
and filtering to the store, then re-asserts the ordering, filter and length
guarantees on whatever the backend returned. Performs no mutation and keeps
no reference to results between calls.

Dependencies: letters_rag.boundary.vdb
System role: RAG retrieval ranking logic
"""

import logging

from letters_rag.boundary.vdb.index_store import IndexStore
from letters_rag.models.chunk import ScoredChunk, ScoringMode
from letters_rag.models.filters import NoFilter, YearEquals, YearRange

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 5


def clamp_limit(limit: int | None, default: int = DEFAULT_LIMIT) -> int:
    """Replace a missing or non-positive limit with the default."""
    if limit is None or limit < 1:
        return default
    return limit


class RankingEngine:
    """Backend-agnostic ranked search over an injected index store."""

    def __init__(self, store: IndexStore, default_limit: int = DEFAULT_LIMIT) -> None:
        """
        Initialize the engine with its store.

        Args:
            store: Index store to query
            default_limit: Limit used when callers pass a non-positive value
        """
        self._store = store
        self._default_limit = default_limit

    @property
    def store(self) -> IndexStore:
        return self._store

    def search(
        self,
        composed_query: str,
        limit: int | None = None,
        filter: NoFilter | YearEquals | YearRange | None = None,
        mode: ScoringMode = ScoringMode.NORMALIZED,
    ) -> list[ScoredChunk]:
        """
        Rank chunks for a composed query.

        Args:
            composed_query: Text from the query composer
            limit: Maximum number of results (non-positive -> default)
            filter: Metadata predicate; None matches everything
            mode: Scoring mode requested from lexical stores

        Returns:
            list[ScoredChunk]: Non-increasing scores, length <= limit, all matching filter
        """
        limit = clamp_limit(limit, self._default_limit)
        candidates = self._store.query(composed_query, limit, filter, mode)

        if filter is not None:
            candidates = [item for item in candidates if filter.matches(item.chunk.metadata)]
        ranked = sorted(candidates, key=lambda item: item.score, reverse=True)[:limit]

        logger.info(
            f"{__name__}:search - backend={self._store.backend_name} "
            f"limit={limit} results={len(ranked)}"
        )
        return ranked
