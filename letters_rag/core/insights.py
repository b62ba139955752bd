"""
Insight extraction.

Turns ranked chunks into bounded, attributable insights and short
summaries. Relevance is mapped into [0, 1]: remote results use
`max(0, 1 - distance)`, lexical results use their normalized score.

Dependencies: letters_rag.models, letters_rag.core.topics
System role: Presentation of retrieval results with provenance
"""

import re
from collections.abc import Iterable

from letters_rag.core.topics import InvestmentTopic, topic_label
from letters_rag.models.chunk import ScoredChunk
from letters_rag.models.insight import Insight

EXPLANATION_CHARS = 300
MAX_INSIGHTS = 5
ELLIPSIS = "..."
SOURCE_SUFFIX = "Shareholder Letter"

_QUOTE_RE = re.compile(r'"([^"]+)"')
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_MIN_SENTENCE_CHARS = 20


def truncate(content: str, limit: int = EXPLANATION_CHARS) -> str:
    """Cut to `limit` characters, appending an ellipsis only when something was cut."""
    if len(content) <= limit:
        return content
    return content[:limit] + ELLIPSIS


def extract_quote(content: str) -> str | None:
    """First double-quoted span, or None when there is none."""
    match = _QUOTE_RE.search(content)
    return match.group(1) if match else None


def relevance(scored: ScoredChunk) -> float:
    """Map a store-native score into [0, 1], rounded to two decimals."""
    if scored.distance is not None:
        value = max(0.0, 1.0 - scored.distance)
    else:
        value = scored.score
    return round(min(max(value, 0.0), 1.0), 2)


def summarize(content: str) -> str:
    """
    Summarize a chunk as its first two sentence-like fragments.

    Fragments are split on `.`, `!` and `?`; fragments of 20 characters or
    fewer are dropped. An ellipsis marks that more sentences existed.
    """
    fragments = (part.strip() for part in _SENTENCE_SPLIT_RE.split(content))
    sentences = [part for part in fragments if len(part) > _MIN_SENTENCE_CHARS]
    summary = ". ".join(sentences[:2])
    return summary + (ELLIPSIS if len(sentences) > 2 else "")


class InsightExtractor:
    """Build insights from ranked chunks."""

    def __init__(
        self,
        explanation_chars: int = EXPLANATION_CHARS,
        max_insights: int = MAX_INSIGHTS,
    ) -> None:
        self._explanation_chars = explanation_chars
        self._max_insights = max_insights

    def extract(self, scored: ScoredChunk, topic: InvestmentTopic | None = None) -> Insight:
        """
        Build one insight.

        Args:
            scored: Ranked chunk with its native score
            topic: Topic the query was built from, if any

        Returns:
            Insight: Attributable, truncated view of the chunk
        """
        content = scored.chunk.content
        metadata = scored.chunk.metadata
        return Insight(
            principle=topic_label(topic),
            explanation=truncate(content, self._explanation_chars),
            quote=extract_quote(content),
            year=metadata.year,
            source=f"{metadata.source} {SOURCE_SUFFIX}",
            relevance=relevance(scored),
        )

    def extract_many(
        self,
        ranked: Iterable[ScoredChunk],
        topic: InvestmentTopic | None = None,
    ) -> list[Insight]:
        """Map every ranked chunk, then keep the highest-relevance few."""
        insights = [self.extract(scored, topic) for scored in ranked]
        insights.sort(key=lambda insight: insight.relevance, reverse=True)
        return insights[: self._max_insights]
