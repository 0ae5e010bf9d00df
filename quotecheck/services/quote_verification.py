"""Quote verification orchestrator.

Checks every quoted span of a draft against the interview transcript and
the supplementary sources, in that order. The first source a quote is
found in wins; later sources are not consulted.
"""

import logging
from collections.abc import Sequence

from quotecheck.models import (
    CandidateSource,
    ContextPrecision,
    VerificationResult,
    VerificationSummary,
    TRANSCRIPT_SOURCE_ID,
    TRANSCRIPT_SOURCE_NAME,
)
from quotecheck.services.quote_alignment import align
from quotecheck.services.quote_extraction import extract_quotes

logger = logging.getLogger(__name__)


def build_candidates(
    transcript: str,
    sources: Sequence[CandidateSource],
) -> list[CandidateSource]:
    """Build the ordered candidate list: transcript first, then sources in caller order."""
    transcript_source = CandidateSource(
        id=TRANSCRIPT_SOURCE_ID,
        display_name=TRANSCRIPT_SOURCE_NAME,
        content=transcript,
    )
    return [transcript_source, *sources]


def verify_quote(quote: str, candidates: Sequence[CandidateSource]) -> VerificationResult:
    """Verify one quote against an ordered candidate list (first match wins)."""
    for candidate in candidates:
        if not candidate.content.strip():
            continue

        alignment = align(quote, candidate.content)
        if alignment.found:
            return VerificationResult(
                quote_text=quote,
                matched=True,
                source_id=candidate.id,
                source_name=candidate.display_name,
                context_excerpt=alignment.context,
                precision=alignment.precision,
            )

    return VerificationResult(quote_text=quote)


def verify(
    draft: str,
    transcript: str,
    sources: Sequence[CandidateSource],
) -> list[VerificationResult]:
    """Verify every quote in a draft.

    Args:
        draft: Draft document containing quoted spans.
        transcript: Interview transcript, always checked first.
        sources: Supplementary sources, checked in the given order.

    Returns:
        One result per extracted quote, in extraction order. Empty when the
        draft contains no quotes.
    """
    quotes = extract_quotes(draft)
    if not quotes:
        return []

    candidates = build_candidates(transcript, sources)
    results = []
    for quote in quotes:
        result = verify_quote(quote.text, candidates)
        logger.debug(
            f"Quote {quote.ordinal_position}: "
            f"{'found in ' + result.source_id if result.matched else 'not found'}"
        )
        results.append(result)

    summary = summarize(results)
    logger.info(
        f"Verified {summary.total} quotes against {len(candidates)} sources: "
        f"{summary.verified} found, {summary.unverified} not found"
    )
    return results


def summarize(results: Sequence[VerificationResult]) -> VerificationSummary:
    """Count verified, unverified and approximately-located quotes."""
    verified = sum(1 for r in results if r.matched)
    approximate = sum(1 for r in results if r.precision == ContextPrecision.APPROXIMATE)
    return VerificationSummary(
        total=len(results),
        verified=verified,
        unverified=len(results) - verified,
        approximate=approximate,
    )
