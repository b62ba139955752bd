"""Tests for the investment topic taxonomy."""

import pytest

from letters_rag.core.topics import (
    DEFAULT_PRINCIPLE,
    DEFAULT_TOPIC_SUMMARY,
    TOPIC_LABELS,
    TOPIC_QUERIES,
    TOPIC_SUMMARIES,
    InvestmentTopic,
    parse_topic,
    topic_label,
    topic_summary,
)


class TestTopicTables:
    """Test lookup table coverage."""

    @pytest.mark.parametrize("table", [TOPIC_QUERIES, TOPIC_LABELS, TOPIC_SUMMARIES])
    def test_tables_cover_every_topic(self, table) -> None:
        """Should define an entry for every enumerated topic."""
        assert set(table) == set(InvestmentTopic)

    def test_tables_are_read_only(self) -> None:
        """Should not allow mutation of the lookup tables."""
        with pytest.raises(TypeError):
            TOPIC_QUERIES[InvestmentTopic.ACQUISITIONS] = "changed"

    def test_eight_topics(self) -> None:
        """Should enumerate the eight investment topics."""
        assert len(InvestmentTopic) == 8


class TestParseTopic:
    """Test topic name resolution."""

    def test_parse_value(self) -> None:
        """Should resolve a topic by its value."""
        assert parse_topic("risk_management") is InvestmentTopic.RISK_MANAGEMENT

    def test_parse_is_case_insensitive(self) -> None:
        """Should ignore case and surrounding whitespace."""
        assert parse_topic(" Economic_Outlook ") is InvestmentTopic.ECONOMIC_OUTLOOK

    def test_parse_enum_passthrough(self) -> None:
        """Should return enum members unchanged."""
        assert parse_topic(InvestmentTopic.ACQUISITIONS) is InvestmentTopic.ACQUISITIONS

    def test_unknown_topic(self) -> None:
        """Should raise ValueError listing the allowed topics."""
        with pytest.raises(ValueError, match="Unknown topic 'crypto'.*investment_philosophy"):
            parse_topic("crypto")


class TestLabelsAndSummaries:
    """Test labels and summaries."""

    def test_label(self) -> None:
        """Should return the human-readable label."""
        assert topic_label(InvestmentTopic.DIVIDEND_POLICY) == "Capital Returns"

    def test_label_fallback(self) -> None:
        """Should fall back to the generic label without a topic."""
        assert topic_label(None) == DEFAULT_PRINCIPLE == "Investment Insight"

    def test_summary(self) -> None:
        """Should return the fixed topic summary."""
        assert topic_summary(InvestmentTopic.RISK_MANAGEMENT) == (
            "Berkshire's approach to risk focuses on avoiding permanent loss of capital"
        )

    def test_summary_fallback(self) -> None:
        """Should fall back to the generic summary without a topic."""
        assert topic_summary(None) == DEFAULT_TOPIC_SUMMARY
