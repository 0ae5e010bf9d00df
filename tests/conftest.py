"""Pytest fixtures for testing."""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from quotecheck.api.main import app
from quotecheck.db import mongo


@pytest_asyncio.fixture
async def mock_db() -> AsyncGenerator[Any, None]:
    """Provide a mock MongoDB database for testing."""
    mock_client = AsyncMongoMockClient()
    mock_database = mock_client[mongo.DATABASE_NAME]

    # Replace the real client with mock
    mongo.set_client(mock_client)

    yield mock_database

    mongo.set_client(None)


@pytest_asyncio.fixture
async def client(mock_db: Any) -> AsyncGenerator[AsyncClient, None]:
    """Provide an async HTTP client for testing."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def sample_transcript() -> str:
    """Interview transcript used across quote tests."""
    return (
        "Interviewer: How did the rollout go? "
        "Researcher: Honestly, the results were remarkable - we achieved 85% "
        "satisfaction rates in our initial testing phase. That strong user "
        "response gave us the confidence to expand the feature across the "
        "entire platform."
    )


@pytest.fixture
def sample_draft() -> str:
    """Draft quoting the transcript once and inventing a second quote."""
    return (
        "# Rollout\n\n"
        "Before the company-wide rollout, user testing revealed promising results. "
        "\"We achieved 85% satisfaction rates in our initial testing phase,\" noted "
        "the research team.\n\n"
        "The team was candid: \"This is definitely not in any source at all here.\""
    )


@pytest.fixture
def sample_update_data(sample_transcript: str, sample_draft: str) -> dict[str, Any]:
    """Full project update payload."""
    return {
        "title": "AI Recommendation Rollout",
        "transcript": sample_transcript,
        "sources": [
            {
                "id": "src-1",
                "type": "pdf",
                "name": "Quarterly Report",
                "content": "Engagement rose 300% after launch of the recommendation system.",
            },
            {
                "id": "src-2",
                "type": "url",
                "name": "Press Coverage",
                "content": "Analysts say we achieved 85% satisfaction rates in our initial testing phase.",
                "url": "https://example.com/coverage",
            },
        ],
        "keyPoints": [
            {"id": "kp-1", "text": "85% satisfaction in initial testing", "order": 0},
        ],
        "direction": {"tone": "storytelling", "length": "short", "angle": "user impact"},
        "draftText": sample_draft,
    }
