"""
In-memory lexical index store.

Holds every chunk in process memory and scores them against the query by
term overlap. Never suspends and never touches the network. Contents do not
survive a restart.

Scoring, for query terms (lower-cased, whitespace split, terms shorter than
`min_term_length` dropped):
- raw mode: occurrences * raw_term_weight
  + raw_phrase_bonus if the whole query appears verbatim
  + raw_presence_bonus per term present at least once (unbounded)
- normalized mode: occurrences * term_weight
  + phrase_bonus if the whole query appears verbatim, clamped to [0, 1]

Chunks scoring zero share nothing with the query and are never returned.

Dependencies: letters_rag.models
System role: Development / offline index store
"""

import logging
from collections.abc import Sequence

from letters_rag.boundary.vdb.index_store import IndexStore
from letters_rag.models.chunk import Chunk, ScoredChunk, ScoringMode
from letters_rag.models.document import StoreStats
from letters_rag.models.filters import NoFilter, YearEquals, YearRange

logger = logging.getLogger(__name__)


class LocalLexicalStore(IndexStore):
    """Term-overlap scoring over an in-memory chunk list."""

    backend_name = "local"
    is_remote = False

    def __init__(
        self,
        term_weight: float = 0.1,
        phrase_bonus: float = 0.8,
        raw_term_weight: float = 1.0,
        raw_phrase_bonus: float = 10.0,
        raw_presence_bonus: float = 2.0,
        min_term_length: int = 3,
    ) -> None:
        """
        Initialize an empty store with scoring weights.

        Args:
            term_weight: Normalized-mode weight per term occurrence
            phrase_bonus: Normalized-mode verbatim phrase bonus
            raw_term_weight: Raw-mode weight per term occurrence
            raw_phrase_bonus: Raw-mode verbatim phrase bonus
            raw_presence_bonus: Raw-mode bonus per term present
            min_term_length: Shorter query terms are discarded
        """
        self._chunks: list[Chunk] = []
        self._term_weight = term_weight
        self._phrase_bonus = phrase_bonus
        self._raw_term_weight = raw_term_weight
        self._raw_phrase_bonus = raw_phrase_bonus
        self._raw_presence_bonus = raw_presence_bonus
        self._min_term_length = min_term_length

    def ingest(self, chunks: Sequence[Chunk]) -> int:
        """Append chunks in order; ingestion order breaks score ties."""
        self._chunks.extend(chunks)
        logger.info(f"{__name__}:ingest - Stored {len(chunks)} chunks (total={len(self._chunks)})")
        return len(chunks)

    def query(
        self,
        text: str,
        limit: int,
        filter: NoFilter | YearEquals | YearRange | None = None,
        mode: ScoringMode = ScoringMode.NORMALIZED,
    ) -> list[ScoredChunk]:
        """Score all chunks, drop non-matches, filter, stable-sort descending, then truncate."""
        if not self._chunks or limit < 1:
            return []

        terms = self.tokenize(text)
        phrase = text.lower().strip()

        scored = [
            ScoredChunk(chunk=chunk, score=self.score(chunk.content, terms, phrase, mode))
            for chunk in self._chunks
        ]
        # chunks sharing no term or phrase with the query are not candidates
        scored = [item for item in scored if item.score > 0]
        if filter is not None:
            scored = [item for item in scored if filter.matches(item.chunk.metadata)]

        # sorted() is stable, so equal scores keep ingestion order
        ranked = sorted(scored, key=lambda item: item.score, reverse=True)
        return ranked[:limit]

    def tokenize(self, text: str) -> list[str]:
        """Lower-case, split on whitespace, drop short terms."""
        return [term for term in text.lower().split() if len(term) >= self._min_term_length]

    def score(self, content: str, terms: list[str], phrase: str, mode: ScoringMode) -> float:
        """
        Score one chunk's content.

        Args:
            content: Chunk text
            terms: Tokenized query terms
            phrase: Lower-cased, stripped query for the verbatim bonus
            mode: Raw (unbounded) or normalized ([0, 1])

        Returns:
            float: Chunk score
        """
        content_lower = content.lower()
        occurrences = sum(content_lower.count(term) for term in terms)
        has_phrase = bool(phrase) and phrase in content_lower

        if mode is ScoringMode.RAW:
            present = sum(1 for term in terms if term in content_lower)
            return (
                occurrences * self._raw_term_weight
                + (self._raw_phrase_bonus if has_phrase else 0.0)
                + present * self._raw_presence_bonus
            )

        score = occurrences * self._term_weight + (self._phrase_bonus if has_phrase else 0.0)
        return min(max(score, 0.0), 1.0)

    def count(self) -> int:
        return len(self._chunks)

    def describe(self) -> StoreStats:
        sources = sorted({chunk.metadata.source for chunk in self._chunks})
        return StoreStats(backend=self.backend_name, total_chunks=len(self._chunks), sources=sources)

    def clear(self) -> None:
        """Drop every stored chunk."""
        self._chunks = []
