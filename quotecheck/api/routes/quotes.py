"""Stateless quote extraction and verification endpoints."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from quotecheck.api.exceptions import ValidationError
from quotecheck.api.response import success_response
from quotecheck.models import (
    CandidateSource,
    ExtractQuotesRequest,
    VerifyQuotesRequest,
    VerifyQuotesResponse,
)
from quotecheck.services import extract_quotes, summarize, verify

router = APIRouter(prefix="/quotes", tags=["Quotes"])


@router.post("/extract")
async def extract(request: Request) -> JSONResponse:
    """Extract the quoted spans of a draft."""
    try:
        body = await request.json()
        extract_request = ExtractQuotesRequest.model_validate(body)
    except (PydanticValidationError, ValueError) as e:
        raise ValidationError(str(e)) from None

    quotes = extract_quotes(extract_request.draft)
    return JSONResponse(
        content=success_response({"quotes": [q.model_dump(mode="json") for q in quotes]})
    )


@router.post("/verify")
async def verify_quotes(request: Request) -> JSONResponse:
    """Verify the quotes of a draft against a transcript and sources."""
    try:
        body = await request.json()
        verify_request = VerifyQuotesRequest.model_validate(body)
    except (PydanticValidationError, ValueError) as e:
        raise ValidationError(str(e)) from None

    sources = [
        CandidateSource(id=s.id, display_name=s.name or s.id, content=s.content)
        for s in verify_request.sources
    ]
    results = verify(verify_request.draft, verify_request.transcript, sources)
    response = VerifyQuotesResponse(results=results, summary=summarize(results))
    return JSONResponse(content=success_response(response.model_dump(mode="json")))
