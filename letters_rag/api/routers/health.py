"""
Health check API endpoints.

Routes: GET /health, GET /health/store

Dependencies: letters_rag.boundary
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel

from letters_rag.api.deps import get_index_store_dependency
from letters_rag.boundary.vdb.index_store import IndexStore
from letters_rag.models.document import StoreStats


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/store", response_model=StoreStats)
async def health_check_store(
    store: IndexStore = Depends(get_index_store_dependency),
) -> StoreStats:
    """Index store statistics: backend, namespace and chunk counts."""
    if store.is_remote:
        return await run_in_threadpool(store.describe)
    return store.describe()
