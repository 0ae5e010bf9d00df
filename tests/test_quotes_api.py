"""Tests for the stateless quote endpoints."""

from typing import Any

import pytest
from httpx import AsyncClient


@pytest.fixture
def verify_payload(sample_transcript: str, sample_draft: str) -> dict[str, Any]:
    """Verification request with one supplementary source."""
    return {
        "draft": sample_draft,
        "transcript": sample_transcript,
        "sources": [
            {"id": "src-1", "name": "Press Coverage", "content": "Nothing quoted here."},
        ],
    }


class TestHealth:
    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"data": {"status": "ok"}, "error": None}


class TestExtractQuotes:
    """Tests for POST /api/quotes/extract."""

    @pytest.mark.asyncio
    async def test_extract(self, client: AsyncClient, sample_draft: str) -> None:
        response = await client.post("/api/quotes/extract", json={"draft": sample_draft})

        assert response.status_code == 200
        quotes = response.json()["data"]["quotes"]
        assert [q["ordinal_position"] for q in quotes] == [0, 1]
        assert quotes[0]["text"] == "We achieved 85% satisfaction rates in our initial testing phase,"

    @pytest.mark.asyncio
    async def test_invalid_body(self, client: AsyncClient) -> None:
        response = await client.post("/api/quotes/extract", content=b"not json")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"


class TestVerifyQuotes:
    """Tests for POST /api/quotes/verify."""

    @pytest.mark.asyncio
    async def test_verify(self, client: AsyncClient, verify_payload: dict[str, Any]) -> None:
        response = await client.post("/api/quotes/verify", json=verify_payload)

        assert response.status_code == 200
        json_data = response.json()
        assert json_data["error"] is None

        results = json_data["data"]["results"]
        assert len(results) == 2
        assert results[0]["matched"] is True
        assert results[0]["source_id"] == "transcript"
        assert results[0]["source_name"] == "Interview Transcript"
        assert results[0]["precision"] == "exact"
        assert "remarkable" in results[0]["context_excerpt"]

        assert results[1]["matched"] is False
        assert results[1]["source_id"] == ""
        assert results[1]["source_name"] == ""
        assert results[1]["context_excerpt"] == ""

        assert json_data["data"]["summary"] == {
            "total": 2,
            "verified": 1,
            "unverified": 1,
            "approximate": 0,
        }

    @pytest.mark.asyncio
    async def test_source_name_defaults_to_id(self, client: AsyncClient) -> None:
        payload = {
            "draft": '"a sentence only the memo contains"',
            "sources": [{"id": "memo-7", "content": "Yes, a sentence only the memo contains."}],
        }
        response = await client.post("/api/quotes/verify", json=payload)

        result = response.json()["data"]["results"][0]
        assert result["source_id"] == "memo-7"
        assert result["source_name"] == "memo-7"

    @pytest.mark.asyncio
    async def test_empty_draft(self, client: AsyncClient) -> None:
        response = await client.post("/api/quotes/verify", json={"draft": ""})

        assert response.status_code == 200
        assert response.json()["data"]["results"] == []

    @pytest.mark.asyncio
    async def test_duplicate_source_ids_rejected(self, client: AsyncClient) -> None:
        payload = {
            "draft": "",
            "sources": [{"id": "a", "content": "x"}, {"id": "a", "content": "y"}],
        }
        response = await client.post("/api/quotes/verify", json=payload)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_reserved_transcript_id_rejected(self, client: AsyncClient) -> None:
        payload = {"draft": "", "sources": [{"id": "transcript", "content": "x"}]}
        response = await client.post("/api/quotes/verify", json=payload)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"
