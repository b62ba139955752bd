"""
FastAPI application with assembled routers.

Initializes FastAPI app with the retrieval routers and configures uvicorn server.

Dependencies: fastapi, letters_rag.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from letters_rag import __version__
from letters_rag.api.deps.dependencies import get_service_cache
from letters_rag.configs import get_settings
from letters_rag.observability import configure_logging, get_logger

from .routers import health_router, ingestion_router, retrieval_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Builds the index store and retrieval service before serving requests.
    """
    cache = get_service_cache()
    configure_logging(cache.settings.log_level_number)
    logger = get_logger(__name__)

    # Startup
    logger.info("Pre-warming service cache...")
    _ = cache.retrieval_service
    logger.info(f"Service cache pre-warmed (backend={cache.store.backend_name})")

    yield

    # Shutdown
    cache.clear()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="Shareholder Letters RAG API",
        description="Retrieval over Berkshire Hathaway shareholder letters",
        version=__version__,
        debug=get_settings().debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(retrieval_router, prefix="/api/v1")
    app.include_router(ingestion_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "letters_rag.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
