"""Tests for the retrieval and ingestion HTTP routes."""

import pytest
from fastapi.testclient import TestClient

from letters_rag.api.deps import get_ingestion_pipeline, get_retrieval_service
from letters_rag.api.main import create_app
from letters_rag.application.retrieval_service import RetrievalService
from letters_rag.boundary.vdb.local_lexical_store import LocalLexicalStore
from letters_rag.core.ingestion import IngestionPipeline


@pytest.fixture
def store(example_store) -> LocalLexicalStore:
    return example_store


@pytest.fixture
def client(store: LocalLexicalStore) -> TestClient:
    """TestClient with the service and pipeline bound to a local store."""
    app = create_app()
    app.dependency_overrides[get_retrieval_service] = lambda: RetrievalService(store)
    app.dependency_overrides[get_ingestion_pipeline] = lambda: IngestionPipeline(store)
    return TestClient(app)


class TestSearchRoute:
    """Test POST /api/v1/search."""

    def test_search(self, client: TestClient) -> None:
        """Should return camelCase results without an error key."""
        response = client.post("/api/v1/search", json={"query": "bitcoin speculative", "maxResults": 1})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["totalResults"] == 1
        assert body["results"][0]["metadata"]["chunkIndex"] == 0
        assert body["results"][0]["rank"] == 1
        assert "error" not in body

    def test_search_year_filter(self, client: TestClient) -> None:
        """Should return an empty, successful result for an excluding filter."""
        response = client.post("/api/v1/search", json={"query": "bitcoin speculative", "yearFilter": 2022})

        body = response.json()
        assert body["success"] is True
        assert body["results"] == []

    def test_empty_query_rejected(self, client: TestClient) -> None:
        """Should reject an empty query."""
        response = client.post("/api/v1/search", json={"query": ""})

        assert response.status_code == 422


class TestContextualRoute:
    """Test POST /api/v1/search/contextual."""

    def test_contextual_search(self, client: TestClient) -> None:
        """Should return the enhanced query and per-result summaries."""
        response = client.post(
            "/api/v1/search/contextual",
            json={
                "query": "speculative",
                "context": "bitcoin",
                "yearRange": {"start": 2020, "end": 2023},
            },
        )

        body = response.json()
        assert body["enhancedQuery"] == "bitcoin speculative"
        assert body["results"][0]["summary"] == "Bitcoin produces nothing and is purely speculative"


class TestInsightsRoute:
    """Test POST /api/v1/insights."""

    def test_unknown_topic(self, client: TestClient) -> None:
        """Should answer 200 with a failed response body."""
        response = client.post("/api/v1/insights", json={"topic": "crypto"})

        assert response.status_code == 200
        assert response.json()["success"] is False

    def test_topic_insights(self, client: TestClient) -> None:
        """Should return insights and the topic summary."""
        response = client.post(
            "/api/v1/insights",
            json={"topic": "business_quality", "keywords": ["wonderful"], "includeQuotes": False},
        )

        body = response.json()
        assert body["success"] is True
        assert body["summary"] == "Quality businesses with durable competitive advantages are preferred"
        assert body["insights"][0]["principle"] == "Business Quality"


class TestIngestionRoutes:
    """Test POST /api/v1/ingest and /ingest/validate."""

    def test_ingest(self, client: TestClient, store: LocalLexicalStore) -> None:
        """Should chunk and store letters keyed by file name."""
        response = client.post(
            "/api/v1/ingest",
            json={
                "letters": [
                    {"filename": "1996ltr.pdf", "text": "Our favorite holding period is forever."},
                    {"filename": "1997ltr.pdf", "text": "   "},
                ]
            },
        )

        body = response.json()
        assert body["success"] is True
        assert body["documents_processed"] == 1
        assert store.count() == 3
        assert store.query("holding period forever", 1)[0].chunk.metadata.year == 1996

    def test_ingest_with_unusable_filename(self, client: TestClient, store: LocalLexicalStore) -> None:
        """Should ingest the good letters and report a nameless file as failed."""
        response = client.post(
            "/api/v1/ingest",
            json={
                "letters": [
                    {"filename": "2023.pdf", "text": "Insurance float funds our investments."},
                    {"filename": ".pdf", "text": "This letter has no usable name."},
                ]
            },
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["documents_processed"] == 1
        assert body["failed_sources"] == [".pdf"]
        assert store.count() == 3

    def test_validate(self, client: TestClient) -> None:
        """Should probe the store with the given query."""
        response = client.post("/api/v1/ingest/validate", json={"test_query": "wonderful businesses"})

        body = response.json()
        assert body["success"] is True
        assert body["results_found"] == 1
