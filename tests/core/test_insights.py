"""Tests for insight extraction and summaries."""

import pytest

from letters_rag.core.insights import (
    InsightExtractor,
    extract_quote,
    relevance,
    summarize,
    truncate,
)
from letters_rag.core.topics import InvestmentTopic
from letters_rag.models.chunk import ScoredChunk
from tests.conftest import make_chunk


class TestTruncate:
    """Test explanation truncation."""

    def test_exact_budget_not_truncated(self) -> None:
        """Should keep content of exactly 300 characters without ellipsis."""
        content = "a" * 300

        assert truncate(content) == content

    def test_over_budget_truncated(self) -> None:
        """Should cut to 300 characters and append an ellipsis."""
        result = truncate("b" * 301)

        assert result == "b" * 300 + "..."

    def test_multibyte_characters(self) -> None:
        """Should count characters, not bytes."""
        result = truncate("é" * 10, limit=4)

        assert result == "éééé..."


class TestExtractQuote:
    """Test quote extraction."""

    def test_first_quoted_span(self) -> None:
        """Should return the first double-quoted span."""
        content = 'He said "be fearful when others are greedy" and "be greedy when others are fearful".'

        assert extract_quote(content) == "be fearful when others are greedy"

    def test_no_quote(self) -> None:
        """Should return None without a quoted span."""
        assert extract_quote("No quotes in this passage.") is None


class TestRelevance:
    """Test relevance mapping."""

    def test_distance_based(self) -> None:
        """Should map cosine distance to 1 - distance."""
        scored = ScoredChunk(chunk=make_chunk("text"), score=0.7654, distance=0.2346)

        assert relevance(scored) == 0.77

    def test_large_distance_floors_at_zero(self) -> None:
        """Should not go below zero for distances above one."""
        scored = ScoredChunk(chunk=make_chunk("text"), score=-0.4, distance=1.4)

        assert relevance(scored) == 0.0

    def test_lexical_score(self) -> None:
        """Should use the normalized score when no distance is present."""
        scored = ScoredChunk(chunk=make_chunk("text"), score=0.333)

        assert relevance(scored) == 0.33

    def test_raw_score_clamped(self) -> None:
        """Should clamp unbounded scores into [0, 1]."""
        scored = ScoredChunk(chunk=make_chunk("text"), score=16.0)

        assert relevance(scored) == 1.0


class TestSummarize:
    """Test contextual result summaries."""

    def test_two_sentences_with_ellipsis(self) -> None:
        """Should join the first two long sentences and mark the rest."""
        content = (
            "Berkshire owns many wonderful businesses. Short one. "
            "We never try to time the market at all! Is this the third long sentence here?"
        )

        assert summarize(content) == (
            "Berkshire owns many wonderful businesses. We never try to time the market at all..."
        )

    def test_no_ellipsis_for_two_sentences(self) -> None:
        """Should not append an ellipsis when nothing more existed."""
        content = "Insurance float has been a key funding source. It costs us less than nothing."

        assert summarize(content) == (
            "Insurance float has been a key funding source. It costs us less than nothing"
        )

    def test_twenty_character_fragment_dropped(self) -> None:
        """Should drop fragments of twenty characters or fewer."""
        assert summarize("a" * 20 + ". " + "b" * 21) == "b" * 21


class TestInsightExtractor:
    """Test insight construction."""

    def test_extract_with_topic(self) -> None:
        """Should label the insight with the topic and attribute the source."""
        chunk = make_chunk('Charlie said "invert, always invert" about risk.', year=2019, source="2019-letter")

        insight = InsightExtractor().extract(
            ScoredChunk(chunk=chunk, score=0.4),
            InvestmentTopic.RISK_MANAGEMENT,
        )

        assert insight.principle == "Risk Management"
        assert insight.quote == "invert, always invert"
        assert insight.year == 2019
        assert insight.source == "2019-letter Shareholder Letter"
        assert insight.relevance == 0.4

    def test_extract_without_topic(self) -> None:
        """Should fall back to the generic principle."""
        insight = InsightExtractor().extract(ScoredChunk(chunk=make_chunk("text"), score=0.1))

        assert insight.principle == "Investment Insight"
        assert insight.quote is None

    def test_explanation_budget_configurable(self) -> None:
        """Should truncate explanations to the configured budget."""
        insight = InsightExtractor(explanation_chars=10).extract(
            ScoredChunk(chunk=make_chunk("x" * 50), score=0.1)
        )

        assert insight.explanation == "x" * 10 + "..."

    def test_extract_many_caps_after_sorting(self) -> None:
        """Should map every chunk then keep the five most relevant."""
        ranked = [
            ScoredChunk(chunk=make_chunk(f"chunk {i}", index=0), score=score)
            for i, score in enumerate([0.1, 0.9, 0.3, 0.8, 0.2, 0.7, 0.6, 0.5])
        ]

        insights = InsightExtractor().extract_many(ranked)

        assert [insight.relevance for insight in insights] == [0.9, 0.8, 0.7, 0.6, 0.5]

    @pytest.mark.parametrize("count", [0, 3])
    def test_extract_many_fewer_than_cap(self, count: int) -> None:
        """Should return every insight when fewer than the cap exist."""
        ranked = [ScoredChunk(chunk=make_chunk(f"chunk {i}"), score=0.5) for i in range(count)]

        assert len(InsightExtractor().extract_many(ranked)) == count
