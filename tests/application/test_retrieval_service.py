"""Tests for the retrieval service operations."""

from unittest.mock import MagicMock

import pytest

from letters_rag.application.retrieval_service import RetrievalService
from letters_rag.boundary.vdb.index_store import IndexStore
from letters_rag.boundary.vdb.local_lexical_store import LocalLexicalStore
from letters_rag.configs import RetrievalSettings
from letters_rag.core.exceptions import VectorStoreError
from letters_rag.core.topics import TOPIC_QUERIES, TOPIC_SUMMARIES, InvestmentTopic
from letters_rag.models.chunk import ScoredChunk
from letters_rag.models.filters import YearRangeRequest
from tests.conftest import make_chunk


@pytest.fixture
def failing_store() -> MagicMock:
    store = MagicMock(spec=IndexStore)
    store.backend_name = "mock"
    store.is_remote = False
    store.query.side_effect = VectorStoreError("Failed to query vectors", operation="query")
    return store


@pytest.fixture
def remote_store() -> MagicMock:
    """Remote-flagged store returning one distance-scored match."""
    store = MagicMock(spec=IndexStore)
    store.backend_name = "s3"
    store.is_remote = True
    store.query.return_value = [
        ScoredChunk(
            chunk=make_chunk('Rule number one: "never lose money" and manage risk.', year=2021),
            score=0.75,
            distance=0.25,
        )
    ]
    return store


class TestSearch:
    """Test plain search."""

    @pytest.mark.asyncio
    async def test_end_to_end(self, example_store: LocalLexicalStore) -> None:
        """Should return the 2023 bitcoin chunk ranked first."""
        response = await RetrievalService(example_store).search("bitcoin speculative", max_results=1)

        assert response.success is True
        assert response.total_results == 1
        assert response.results[0].rank == 1
        assert response.results[0].metadata.year == 2023
        assert response.results[0].relevance_score == pytest.approx(0.2)
        assert response.year_filter == "all years"

    @pytest.mark.asyncio
    async def test_year_filter_empty_result(self, example_store: LocalLexicalStore) -> None:
        """Should succeed with an empty result set when the filter excludes every match."""
        response = await RetrievalService(example_store).search("bitcoin speculative", year_filter=2022)

        assert response.success is True
        assert response.results == []
        assert response.total_results == 0
        assert response.year_filter == 2022

    @pytest.mark.asyncio
    async def test_ranks_are_sequential(self, sample_store: LocalLexicalStore) -> None:
        """Should number results from one in score order."""
        response = await RetrievalService(sample_store).search("wonderful businesses management")

        assert [item.rank for item in response.results] == list(range(1, response.total_results + 1))
        scores = [item.relevance_score for item in response.results]
        assert scores == sorted(scores, reverse=True)

    @pytest.mark.asyncio
    async def test_failure_becomes_response(self, failing_store: MagicMock) -> None:
        """Should report store failures without raising."""
        response = await RetrievalService(failing_store).search("bitcoin")

        assert response.success is False
        assert response.error == "Failed to query vectors"
        assert response.results == []

    @pytest.mark.asyncio
    async def test_remote_store(self, remote_store: MagicMock) -> None:
        """Should query a remote store off the event loop."""
        response = await RetrievalService(remote_store).search("never lose money")

        assert response.success is True
        assert response.results[0].relevance_score == 0.75
        remote_store.query.assert_called_once()


class TestContextualSearch:
    """Test context-aware search."""

    @pytest.mark.asyncio
    async def test_enhanced_query_echoed(self, sample_store: LocalLexicalStore) -> None:
        """Should echo the composed query with context first."""
        response = await RetrievalService(sample_store).contextual_search(
            "what about bitcoin",
            context="We discussed productive assets",
            topics=["cryptocurrency"],
        )

        assert response.success is True
        assert response.original_query == "what about bitcoin"
        assert response.enhanced_query == "We discussed productive assets what about bitcoin cryptocurrency"

    @pytest.mark.asyncio
    async def test_taxonomy_topic_expanded(self, sample_store: LocalLexicalStore) -> None:
        """Should expand topic names from the taxonomy to their stubs."""
        response = await RetrievalService(sample_store).contextual_search(
            "volatility",
            topics=["market_timing"],
        )

        assert response.enhanced_query == f"volatility {TOPIC_QUERIES[InvestmentTopic.MARKET_TIMING]}"

    @pytest.mark.asyncio
    async def test_results_carry_summary(self, sample_store: LocalLexicalStore) -> None:
        """Should attach a summary to every result."""
        response = await RetrievalService(sample_store).contextual_search("Bitcoin produces nothing")

        assert response.total_results >= 1
        assert all(item.summary for item in response.results)
        assert response.results[0].summary.startswith("Our policy regarding cryptocurrency remains unchanged")

    @pytest.mark.asyncio
    async def test_limit_six(self, sample_store: LocalLexicalStore) -> None:
        """Should return at most six results."""
        response = await RetrievalService(sample_store).contextual_search("the and our businesses value")

        assert response.total_results <= 6

    @pytest.mark.asyncio
    async def test_year_range_applied(self, sample_store: LocalLexicalStore) -> None:
        """Should restrict results to the closed year range."""
        response = await RetrievalService(sample_store).contextual_search(
            "wonderful businesses",
            year_range=YearRangeRequest(start=2022, end=2022),
        )

        assert response.results
        assert all(item.metadata.year == 2022 for item in response.results)

    @pytest.mark.asyncio
    async def test_half_open_range_unfiltered(self, sample_store: LocalLexicalStore) -> None:
        """Should ignore a range with a missing bound."""
        response = await RetrievalService(sample_store).contextual_search(
            "wonderful businesses",
            year_range={"start": 2022},
        )

        assert {item.metadata.year for item in response.results} == {2022, 2023}

    @pytest.mark.asyncio
    async def test_failure_becomes_response(self, failing_store: MagicMock) -> None:
        """Should report failures with the composed query."""
        response = await RetrievalService(failing_store).contextual_search("bitcoin", context="crypto")

        assert response.success is False
        assert response.enhanced_query == "crypto bitcoin"
        assert response.error


class TestTopicInsights:
    """Test topic insight extraction."""

    @pytest.mark.asyncio
    async def test_insights_for_topic(self, sample_store: LocalLexicalStore) -> None:
        """Should label insights with the topic and return the topic summary."""
        response = await RetrievalService(sample_store).topic_insights("management_evaluation")

        assert response.success is True
        assert 1 <= len(response.insights) <= 5
        assert all(insight.principle == "Management Evaluation" for insight in response.insights)
        assert response.summary == TOPIC_SUMMARIES[InvestmentTopic.MANAGEMENT_EVALUATION]
        relevances = [insight.relevance for insight in response.insights]
        assert relevances == sorted(relevances, reverse=True)

    @pytest.mark.asyncio
    async def test_capped_at_five(self) -> None:
        """Should cap insights at five even when eight candidates score."""
        store = LocalLexicalStore()
        store.ingest([make_chunk(f"{'value ' * (i + 1)}investing", source=f"letter-{i}") for i in range(8)])

        response = await RetrievalService(store).topic_insights(InvestmentTopic.INVESTMENT_PHILOSOPHY)

        assert len(response.insights) == 5

    @pytest.mark.asyncio
    async def test_quotes_included(self, remote_store: MagicMock) -> None:
        """Should include the first quoted span and distance-based relevance."""
        response = await RetrievalService(remote_store).topic_insights("risk_management")

        insight = response.insights[0]
        assert insight.quote == "never lose money"
        assert insight.relevance == 0.75
        assert insight.source == "2021-letter Shareholder Letter"

    @pytest.mark.asyncio
    async def test_quotes_omitted(self, remote_store: MagicMock) -> None:
        """Should drop quotes from the output when not requested."""
        response = await RetrievalService(remote_store).topic_insights(
            "risk_management",
            include_quotes=False,
        )

        assert response.insights[0].quote is None
        assert "quote" not in response.to_wire()["insights"][0]

    @pytest.mark.asyncio
    async def test_keywords_appended(self, remote_store: MagicMock) -> None:
        """Should query with the topic stub followed by keywords."""
        await RetrievalService(remote_store).topic_insights("acquisitions", keywords=["Apple"])

        query_text, limit = remote_store.query.call_args.args[:2]
        assert query_text == f"{TOPIC_QUERIES[InvestmentTopic.ACQUISITIONS]} Apple"
        assert limit == 8

    @pytest.mark.asyncio
    async def test_unknown_topic(self, sample_store: LocalLexicalStore) -> None:
        """Should report an unknown topic as a failed response."""
        response = await RetrievalService(sample_store).topic_insights("crypto")

        assert response.success is False
        assert "Unknown topic" in response.error
        assert response.insights == []

    @pytest.mark.asyncio
    async def test_configured_limits(self, remote_store: MagicMock) -> None:
        """Should use the configured fetch limit and explanation budget."""
        settings = RetrievalSettings(topic_fetch_limit=3, explanation_chars=10)

        response = await RetrievalService(remote_store, settings).topic_insights("risk_management")

        assert remote_store.query.call_args.args[1] == 3
        assert response.insights[0].explanation == "Rule numbe..."


class TestYearRangeValidation:
    """Test inverted year ranges."""

    @pytest.mark.asyncio
    async def test_inverted_range_fails(self, sample_store: LocalLexicalStore) -> None:
        """Should report a range whose start is after its end."""
        response = await RetrievalService(sample_store).contextual_search(
            "wonderful businesses",
            year_range={"start": 2023, "end": 2020},
        )

        assert response.success is False
        assert response.error == "Year range start 2023 is after end 2020"
