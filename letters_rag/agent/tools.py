"""
Retrieval agent tools.

Defines the three tools a letters agent calls: document search, contextual
search and topic insights. Each tool wraps one RetrievalService operation
and returns the camelCase JSON response, failures included.

Dependencies: langchain_core.tools, letters_rag.application
System role: Tool calling surface for the letters agent
"""

import json
import logging
from typing import TYPE_CHECKING

from langchain_core.tools import BaseTool, tool

if TYPE_CHECKING:
    from letters_rag.application.retrieval_service import RetrievalService

logger = logging.getLogger(__name__)


def create_retrieval_tools(service: "RetrievalService") -> list[BaseTool]:
    """
    Create the retrieval tools bound to a RetrievalService instance.

    Args:
        service: RetrievalService shared for the process lifetime

    Returns:
        list[BaseTool]: document_search, contextual_search, investment_insights
    """

    @tool
    async def document_search(
        query: str,
        year_filter: int | None = None,
        max_results: int = 5,
    ) -> str:
        """Search Berkshire Hathaway shareholder letters for relevant passages.

        Use this tool to find text about Warren Buffett's investment
        philosophy, business strategy and market commentary.

        Args:
            query: Search query to find relevant letter passages
            year_filter: Only return passages from this letter year
            max_results: Number of results to return (default: 5)

        Returns:
            str: JSON search response with ranked passages and metadata
        """
        logger.info(f"{__name__}:document_search - START query_len={len(query)}, year={year_filter}")
        response = await service.search(query, year_filter=year_filter, max_results=max_results)
        logger.info(f"{__name__}:document_search - END results={response.total_results}")
        return json.dumps(response.to_wire())

    @tool
    async def contextual_search(
        query: str,
        context: str | None = None,
        topics: list[str] | None = None,
        year_start: int | None = None,
        year_end: int | None = None,
    ) -> str:
        """Search the letters using conversation context and focus topics.

        Use this tool for follow-up questions where earlier conversation
        changes what the user is asking about.

        Args:
            query: Main search query
            context: Previous conversation context
            topics: Topics to focus on, e.g. risk_management or acquisitions
            year_start: First letter year to include
            year_end: Last letter year to include

        Returns:
            str: JSON response with results, summaries and the enhanced query
        """
        year_range = None
        if year_start is not None or year_end is not None:
            year_range = {"start": year_start, "end": year_end}
        response = await service.contextual_search(
            query,
            context=context,
            topics=topics,
            year_range=year_range,
        )
        logger.info(f"{__name__}:contextual_search - END results={response.total_results}")
        return json.dumps(response.to_wire())

    @tool
    async def investment_insights(
        topic: str,
        keywords: list[str] | None = None,
        include_quotes: bool = True,
    ) -> str:
        """Extract key investment insights on a topic from the letters.

        Args:
            topic: One of investment_philosophy, risk_management,
                market_timing, business_quality, management_evaluation,
                dividend_policy, acquisitions, economic_outlook
            keywords: Extra keywords to refine the search
            include_quotes: Include direct quotes from the letters

        Returns:
            str: JSON response with up to five insights and a topic summary
        """
        response = await service.topic_insights(
            topic,
            keywords=keywords,
            include_quotes=include_quotes,
        )
        logger.info(f"{__name__}:investment_insights - END insights={len(response.insights)}")
        return json.dumps(response.to_wire())

    return [document_search, contextual_search, investment_insights]
