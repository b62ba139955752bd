"""
Ingestion API endpoints.

Routes:
- POST /ingest - Chunk and store extracted letter texts
- POST /ingest/validate - Probe the store with a test query

Text extraction happens upstream; this router accepts plain text keyed by
the original file name, from which the letter year is parsed.

Dependencies: letters_rag.core.ingestion
System role: Ingestion HTTP API
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel, Field

from letters_rag.api.deps import get_ingestion_pipeline
from letters_rag.core.ingestion import DEFAULT_TEST_QUERY, IngestionPipeline
from letters_rag.models.document import IngestionResult, StoreValidationResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ingest", tags=["ingestion"])


class LetterText(BaseModel):
    """Extracted text of one letter."""

    filename: str = Field(min_length=1, description="Original file name, e.g. 2023ltr.pdf")
    text: str = Field(description="Extracted full text")


class IngestRequest(BaseModel):
    """Request body for letter ingestion."""

    letters: list[LetterText] = Field(description="Letters to ingest")
    clean: bool = Field(default=True, description="Normalize whitespace and strip symbols")


class ValidateRequest(BaseModel):
    """Request body for store validation."""

    test_query: str = Field(default=DEFAULT_TEST_QUERY, min_length=1)


@router.post("", response_model=IngestionResult)
async def ingest_letters(
    request: IngestRequest,
    pipeline: IngestionPipeline = Depends(get_ingestion_pipeline),
) -> IngestionResult:
    """
    Chunk and store letters; one failing letter does not fail the batch.

    Args:
        request: Letters with file names and extracted text
        pipeline: Injected IngestionPipeline

    Returns:
        IngestionResult: Aggregate counts and failed sources
    """
    letters = [(letter.filename, letter.text) for letter in request.letters]
    logger.info(f"{__name__}:ingest_letters - START letters={len(letters)}")
    return await run_in_threadpool(pipeline.ingest_texts, letters, request.clean)


@router.post("/validate", response_model=StoreValidationResult)
async def validate_store(
    request: ValidateRequest,
    pipeline: IngestionPipeline = Depends(get_ingestion_pipeline),
) -> StoreValidationResult:
    """Run a test query against the store."""
    return await run_in_threadpool(pipeline.validate, request.test_query)
