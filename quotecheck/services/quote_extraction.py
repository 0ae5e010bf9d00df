"""Quote extraction from draft documents.

Single left-to-right scan over the draft tracking quote-delimiter state.
Double quotes are the conventional quotation marker in edited prose, so a
single-quoted span is only accepted when it does not contain a double
quote; a double-quoted span is taken as-is. Once a span is consumed the
scan resumes after its closing mark, so spans never overlap.
"""

import logging

from quotecheck.models import ExtractedQuote

logger = logging.getLogger(__name__)

# Minimum trimmed length of an enclosed span for it to count as a quotation.
# Shorter spans are almost always contractions, inch/foot marks or stray
# punctuation.
MIN_QUOTE_LENGTH = 10

DOUBLE_QUOTES = "\"“”"
SINGLE_QUOTES = "'‘’"


def _can_open_single(document: str, index: int) -> bool:
    """A single quote opens a span unless it follows a word character (players', don't)."""
    if document[index] not in SINGLE_QUOTES:
        return False
    return index == 0 or not document[index - 1].isalnum()


def _can_close_single(document: str, index: int) -> bool:
    """A single quote closes a span unless a word character follows it (it's, ’til)."""
    if document[index] not in SINGLE_QUOTES:
        return False
    return index == len(document) - 1 or not document[index + 1].isalnum()


def _find_double_closer(document: str, start: int) -> int:
    """Index of the next double quote at or after start, or -1."""
    for i in range(start, len(document)):
        if document[i] in DOUBLE_QUOTES:
            return i
    return -1


def _find_single_closer(document: str, start: int) -> int:
    """Index of the next single-quote delimiter at or after start, or -1.

    A double quote inside the run disqualifies it.
    """
    for i in range(start, len(document)):
        ch = document[i]
        if ch in DOUBLE_QUOTES:
            return -1
        if _can_close_single(document, i):
            return i
    return -1


def extract_quotes(document: str) -> list[ExtractedQuote]:
    """Extract quoted spans from a draft, in order of appearance.

    A span is the text between a matching pair of quotation marks whose
    trimmed length is at least MIN_QUOTE_LENGTH. An opening mark with no
    closing mark before the end of the document yields nothing.

    Args:
        document: Draft text (plain text or markdown).

    Returns:
        Extracted quotes with 0-based ordinal positions.
    """
    quotes: list[ExtractedQuote] = []
    i = 0
    length = len(document)

    while i < length:
        if document[i] in DOUBLE_QUOTES:
            close = _find_double_closer(document, i + 1)
        elif _can_open_single(document, i):
            close = _find_single_closer(document, i + 1)
        else:
            i += 1
            continue

        if close == -1:
            # Unterminated (or disqualified) opener: treat as plain text
            i += 1
            continue

        text = document[i + 1:close].strip()
        if len(text) >= MIN_QUOTE_LENGTH:
            quotes.append(ExtractedQuote(text=text, ordinal_position=len(quotes)))
        else:
            logger.debug(f"Skipping short quoted span at {i}: {text!r}")

        # A short pair is still a pair; its closer must not open a new span
        i = close + 1

    return quotes
