"""Pydantic models for quote verification.

These are the records passed between the extractor, the aligner and the
verification orchestrator. All of them are created fresh per verification
run and never mutated afterwards.
"""

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

TRANSCRIPT_SOURCE_ID = "transcript"
TRANSCRIPT_SOURCE_NAME = "Interview Transcript"


class ContextPrecision(str, Enum):
    """How the context excerpt of a verified quote was produced."""

    EXACT = "exact"  # word-aligned window in the original source
    APPROXIMATE = "approximate"  # character-offset fallback
    NONE = "none"  # quote not verified


class CandidateSource(BaseModel):
    """A named text that quotes are checked against."""

    model_config = ConfigDict(frozen=True)

    id: Annotated[str, Field(min_length=1)]
    display_name: str
    content: str = ""


class ExtractedQuote(BaseModel):
    """A quoted span found in a draft."""

    model_config = ConfigDict(frozen=True)

    text: str
    ordinal_position: Annotated[int, Field(ge=0)]


class AlignmentResult(BaseModel):
    """Outcome of aligning one quote against one source."""

    model_config = ConfigDict(frozen=True)

    found: bool
    context: str = ""
    precision: ContextPrecision = ContextPrecision.NONE


class VerificationResult(BaseModel):
    """Verification status of a single extracted quote.

    A matched result always names the source it was found in; an unmatched
    result leaves source_id, source_name and context_excerpt empty.
    """

    quote_text: str
    matched: bool = False
    source_id: str = ""
    source_name: str = ""
    context_excerpt: str = ""
    precision: ContextPrecision = ContextPrecision.NONE


class VerificationSummary(BaseModel):
    """Aggregate counts over a verification run."""

    total: int = 0
    verified: int = 0
    unverified: int = 0
    approximate: int = 0


def check_source_ids(ids: list[str]) -> None:
    """Reject duplicate source IDs and the reserved transcript ID."""
    if TRANSCRIPT_SOURCE_ID in ids:
        raise ValueError(f"Source ID '{TRANSCRIPT_SOURCE_ID}' is reserved for the transcript")
    if len(ids) != len(set(ids)):
        raise ValueError("Source IDs must be unique")


# Request schemas
class CandidateSourceInput(BaseModel):
    """Source as supplied by API callers."""

    id: Annotated[str, Field(min_length=1)]
    name: str = ""
    content: str = ""


class VerifyQuotesRequest(BaseModel):
    """Request body for stateless quote verification."""

    draft: str = ""
    transcript: str = ""
    sources: list[CandidateSourceInput] = []

    @model_validator(mode="after")
    def validate_source_ids(self) -> "VerifyQuotesRequest":
        """Ensure source IDs are unique and do not shadow the transcript."""
        check_source_ids([s.id for s in self.sources])
        return self


class ExtractQuotesRequest(BaseModel):
    """Request body for quote extraction."""

    draft: str = ""


# Response schemas
class VerifyQuotesResponse(BaseModel):
    """Results of a verification run plus summary counts."""

    results: list[VerificationResult]
    summary: VerificationSummary
