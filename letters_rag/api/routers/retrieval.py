"""
Retrieval API endpoints.

Routes:
- POST /search - Search shareholder letters
- POST /search/contextual - Search with conversation context and topics
- POST /insights - Extract topic insights

Operation failures are reported in the response body (`success=false`),
so every route answers 200 once the request validates.

Dependencies: letters_rag.application.retrieval_service
System role: Retrieval HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from letters_rag.api.deps import get_retrieval_service
from letters_rag.application.retrieval_service import RetrievalService
from letters_rag.models.responses import (
    ContextualSearchRequest,
    ContextualSearchResponse,
    SearchRequest,
    SearchResponse,
    TopicInsightsRequest,
    TopicInsightsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["retrieval"])


@router.post("/search", response_model=SearchResponse, response_model_exclude_none=True)
async def search(
    request: SearchRequest,
    service: RetrievalService = Depends(get_retrieval_service),
) -> SearchResponse:
    """Search the letters, optionally restricted to one year."""
    return await service.search(
        request.query,
        year_filter=request.year_filter,
        max_results=request.max_results,
    )


@router.post(
    "/search/contextual",
    response_model=ContextualSearchResponse,
    response_model_exclude_none=True,
)
async def contextual_search(
    request: ContextualSearchRequest,
    service: RetrievalService = Depends(get_retrieval_service),
) -> ContextualSearchResponse:
    """
    Search with conversation context and focus topics.

    Args:
        request: Query plus optional context, topics and year range
        service: Injected RetrievalService

    Returns:
        ContextualSearchResponse: Results with summaries and the enhanced query
    """
    return await service.contextual_search(
        request.query,
        context=request.context,
        topics=request.topics,
        year_range=request.year_range,
    )


@router.post("/insights", response_model=TopicInsightsResponse, response_model_exclude_none=True)
async def topic_insights(
    request: TopicInsightsRequest,
    service: RetrievalService = Depends(get_retrieval_service),
) -> TopicInsightsResponse:
    """Extract up to five insights for an investment topic."""
    response = await service.topic_insights(
        request.topic,
        keywords=request.keywords,
        include_quotes=request.include_quotes,
    )
    if not response.success:
        logger.warning(f"{__name__}:topic_insights - {response.error}")
    return response
