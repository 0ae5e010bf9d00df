"""Quote-to-source alignment.

Decides whether a quote occurs in a source document and recovers a
readable context excerpt from the original (non-normalized) source text.

Existence is decided on the normalized strings. Normalization is not
length-preserving, so character offsets in the normalized source cannot be
used to slice the original. Context is therefore recovered by aligning on
words: the original source is split into words, each word is normalized on
its own, and the word window that reproduces the normalized quote is mapped
back to the original words. Only when that fails does the aligner fall back
to a character window around a best-effort position, and the result says so
via ContextPrecision.
"""

import logging

from quotecheck.models import AlignmentResult, ContextPrecision
from quotecheck.services.text_normalization import normalize, split_words

logger = logging.getLogger(__name__)

# Words of context on each side of a word-aligned match
DEFAULT_CONTEXT_WORDS = 30

# Characters of context on each side of a character-offset fallback
DEFAULT_CONTEXT_CHARS = 30


# =============================================================================
# Substring Search
# =============================================================================


def find_substring(haystack: str, needle: str) -> int:
    """Find the first occurrence of needle in haystack.

    Boyer-Moore-Horspool scan: the bad-character table lets the window skip
    ahead by up to len(needle) characters per step, which keeps long
    sources cheap.

    Returns:
        Index of the first occurrence, or -1 if absent.
    """
    needle_len = len(needle)
    haystack_len = len(haystack)
    if needle_len == 0:
        return 0
    if needle_len > haystack_len:
        return -1

    last = needle_len - 1
    shift = {ch: last - i for i, ch in enumerate(needle[:last])}

    pos = 0
    while pos <= haystack_len - needle_len:
        if haystack[pos + last] == needle[last] and haystack.startswith(needle, pos):
            return pos
        pos += shift.get(haystack[pos + last], needle_len)
    return -1


# =============================================================================
# Context Recovery
# =============================================================================


def find_word_window(normalized_quote: str, words: list[str]) -> tuple[int, int] | None:
    """Find the original-word range whose normalization equals the quote.

    Words that normalize to nothing (bare punctuation such as "..." or "--"
    once stripped) are skipped when matching but kept in the returned range.

    Args:
        normalized_quote: The normalized quote.
        words: Whitespace-split words of the original source.

    Returns:
        (start, end) indices into words, end exclusive, or None.
    """
    quote_words = normalized_quote.split(" ")
    k = len(quote_words)

    # (original index, normalized word) for every word that survives normalization
    tokens = [(i, normalize(w)) for i, w in enumerate(words)]
    tokens = [(i, w) for i, w in tokens if w]

    for t in range(len(tokens) - k + 1):
        if tokens[t][1] != quote_words[0]:
            continue
        window = [w for _, w in tokens[t:t + k]]
        if window == quote_words:
            return tokens[t][0], tokens[t + k - 1][0] + 1
    return None


def _word_context(words: list[str], start: int, end: int, context_words: int) -> str:
    context_start = max(0, start - context_words)
    context_end = min(len(words), end + context_words)
    return " ".join(words[context_start:context_end])


def _char_context(normalized_quote: str, source: str, context_chars: int) -> str:
    """Best-effort character window around the quote in the original source.

    The window always covers a non-whitespace character: the anchor is
    either a matched word or the start of the stripped source.
    """
    text = source.strip()
    lowered = text.lower()
    position = find_substring(lowered, normalized_quote)
    if position == -1:
        # Punctuation inside the quote breaks the direct lookup; anchor on
        # its first word instead
        position = find_substring(lowered, normalized_quote.split(" ")[0])
    if position == -1:
        position = 0

    char_start = max(0, position - context_chars)
    char_end = min(len(text), char_start + len(normalized_quote) + context_chars * 2)
    return text[char_start:char_end].strip()


# =============================================================================
# Alignment
# =============================================================================


def align(
    quote: str,
    source: str,
    context_words: int = DEFAULT_CONTEXT_WORDS,
    context_chars: int = DEFAULT_CONTEXT_CHARS,
) -> AlignmentResult:
    """Align a quote against a single source.

    Args:
        quote: Quote text as it appears in the draft.
        source: Full source text.
        context_words: Words of context on each side (word-aligned path).
        context_chars: Characters of context on each side (fallback path).

    Returns:
        AlignmentResult; found is False when the quote normalizes to nothing
        or does not occur in the source.
    """
    normalized_quote = normalize(quote)
    if not normalized_quote:
        return AlignmentResult(found=False)

    normalized_source = normalize(source)
    if find_substring(normalized_source, normalized_quote) == -1:
        return AlignmentResult(found=False)

    words = split_words(source)
    window = find_word_window(normalized_quote, words)
    if window is not None:
        start, end = window
        return AlignmentResult(
            found=True,
            context=_word_context(words, start, end, context_words),
            precision=ContextPrecision.EXACT,
        )

    logger.warning(
        f"Word alignment failed for quote {normalized_quote[:40]!r}, "
        "using character-offset context"
    )
    return AlignmentResult(
        found=True,
        context=_char_context(normalized_quote, source, context_chars),
        precision=ContextPrecision.APPROXIMATE,
    )
