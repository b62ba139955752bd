"""
Retrieval service.

The three operations surfaced to the agent/tool layer: plain search,
contextual search and topic insights. Each call is one async unit of work;
remote store calls run in the threadpool, the local store runs inline.
Every failure is converted into a `success=False` response at this
boundary, so callers never handle exceptions on the normal path.

Dependencies: fastapi.concurrency, letters_rag.core, letters_rag.boundary.vdb
System role: Retrieval business logic for agent tools and HTTP routes
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from fastapi.concurrency import run_in_threadpool

from letters_rag.boundary.vdb.index_store import IndexStore
from letters_rag.configs.retrieval import RetrievalSettings
from letters_rag.core.exceptions import LettersRagException, RetrievalError
from letters_rag.core.insights import InsightExtractor, summarize
from letters_rag.core.query_composer import compose, topic_query
from letters_rag.core.ranking import RankingEngine
from letters_rag.core.topics import InvestmentTopic, parse_topic, topic_summary
from letters_rag.models.chunk import ScoredChunk, ScoringMode
from letters_rag.models.filters import NoFilter, YearEquals, YearRange, YearRangeRequest, build_filter
from letters_rag.models.responses import (
    ContextualResultItem,
    ContextualSearchResponse,
    SearchResponse,
    SearchResultItem,
    TopicInsightsResponse,
)

logger = logging.getLogger(__name__)


def _error_message(error: Exception) -> str:
    if isinstance(error, LettersRagException):
        return error.message
    return str(error) or type(error).__name__


def _resolve_topic(value: str) -> "InvestmentTopic | str":
    try:
        return parse_topic(value)
    except ValueError:
        return value


class RetrievalService:
    """Retrieval operations over one injected index store."""

    def __init__(self, store: IndexStore, settings: RetrievalSettings | None = None) -> None:
        """
        Initialize service with its store and tuning settings.

        Args:
            store: Index store owned by the caller for the process lifetime
            settings: Retrieval settings (defaults if None)
        """
        self._settings = settings or RetrievalSettings()
        self._store = store
        self._engine = RankingEngine(store, default_limit=self._settings.default_limit)
        self._extractor = InsightExtractor(
            explanation_chars=self._settings.explanation_chars,
            max_insights=self._settings.max_insights,
        )

    @property
    def store(self) -> IndexStore:
        return self._store

    async def _rank(
        self,
        composed_query: str,
        limit: int,
        filter: NoFilter | YearEquals | YearRange,
    ) -> list[ScoredChunk]:
        if self._store.is_remote:
            return await run_in_threadpool(
                self._engine.search, composed_query, limit, filter, ScoringMode.NORMALIZED
            )
        return self._engine.search(composed_query, limit, filter, ScoringMode.NORMALIZED)

    async def search(
        self,
        query: str,
        year_filter: int | None = None,
        max_results: int = 5,
    ) -> SearchResponse:
        """
        Search the letters, optionally restricted to one year.

        Args:
            query: Search query
            year_filter: Exact year constraint
            max_results: Maximum number of results (non-positive -> default)

        Returns:
            SearchResponse: Ranked results, or success=False with an error message
        """
        logger.info(f"{__name__}:search - START query_len={len(query)} year={year_filter} k={max_results}")
        try:
            filter = build_filter(year=year_filter)
            ranked = await self._rank(query, max_results, filter)
        except Exception as e:
            logger.error(f"{__name__}:search - FAILED: {type(e).__name__}: {e}", exc_info=True)
            return SearchResponse(
                success=False,
                results=[],
                total_results=0,
                query=query,
                error=_error_message(e),
            )

        results = [
            SearchResultItem(
                content=scored.chunk.content,
                metadata=scored.chunk.metadata,
                relevance_score=scored.score,
                rank=rank,
            )
            for rank, scored in enumerate(ranked, start=1)
        ]
        return SearchResponse(
            success=True,
            results=results,
            total_results=len(results),
            query=query,
            year_filter=year_filter if year_filter is not None else "all years",
        )

    async def contextual_search(
        self,
        query: str,
        context: str | None = None,
        topics: Sequence[str] | None = None,
        year_range: YearRangeRequest | Mapping[str, Any] | None = None,
    ) -> ContextualSearchResponse:
        """
        Search with conversation context and topic words folded into the query.

        Topic names from the investment taxonomy expand to their canonical
        keywords; any other topic word is appended as given. A year range
        with a missing bound does not constrain.

        Returns:
            ContextualSearchResponse: Results with summaries and the enhanced query
        """
        enhanced_query = query
        try:
            resolved_topics = [_resolve_topic(topic) for topic in topics or ()]
            enhanced_query = compose(query, context=context, topics=resolved_topics)
            if year_range is not None and not isinstance(year_range, YearRangeRequest):
                year_range = YearRangeRequest.model_validate(year_range)
            filter = build_filter(year_range=year_range)
            if isinstance(filter, YearRange) and filter.start > filter.end:
                raise RetrievalError(
                    f"Year range start {filter.start} is after end {filter.end}",
                    query=query,
                )
            ranked = await self._rank(enhanced_query, self._settings.contextual_limit, filter)
        except Exception as e:
            logger.error(f"{__name__}:contextual_search - FAILED: {type(e).__name__}: {e}", exc_info=True)
            return ContextualSearchResponse(
                success=False,
                results=[],
                total_results=0,
                original_query=query,
                enhanced_query=enhanced_query,
                error=_error_message(e),
            )

        results = [
            ContextualResultItem(
                content=scored.chunk.content,
                metadata=scored.chunk.metadata,
                relevance_score=scored.score,
                rank=rank,
                summary=summarize(scored.chunk.content),
            )
            for rank, scored in enumerate(ranked, start=1)
        ]
        logger.info(f"{__name__}:contextual_search - END results={len(results)}")
        return ContextualSearchResponse(
            success=True,
            results=results,
            total_results=len(results),
            original_query=query,
            enhanced_query=enhanced_query,
        )

    async def topic_insights(
        self,
        topic: "str | InvestmentTopic",
        keywords: Sequence[str] | None = None,
        include_quotes: bool = True,
    ) -> TopicInsightsResponse:
        """
        Extract the most relevant insights for an investment topic.

        Quotes are always extracted; `include_quotes=False` only drops them
        from the output.

        Returns:
            TopicInsightsResponse: Up to `max_insights` insights and the topic summary
        """
        try:
            resolved = parse_topic(topic)
            ranked = await self._rank(
                topic_query(resolved, keywords),
                self._settings.topic_fetch_limit,
                NoFilter(),
            )
            insights = self._extractor.extract_many(ranked, resolved)
        except Exception as e:
            logger.error(f"{__name__}:topic_insights - FAILED: {type(e).__name__}: {e}", exc_info=True)
            return TopicInsightsResponse(
                success=False,
                insights=[],
                summary="",
                error=_error_message(e),
            )

        if not include_quotes:
            insights = [insight.model_copy(update={"quote": None}) for insight in insights]

        return TopicInsightsResponse(
            success=True,
            insights=insights,
            summary=topic_summary(resolved),
        )
