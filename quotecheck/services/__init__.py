"""Services package for quote verification business logic."""

from .text_normalization import normalize, split_words
from .quote_extraction import extract_quotes, MIN_QUOTE_LENGTH
from .quote_alignment import (
    align,
    find_substring,
    find_word_window,
    DEFAULT_CONTEXT_CHARS,
    DEFAULT_CONTEXT_WORDS,
)
from .quote_verification import build_candidates, summarize, verify, verify_quote

__all__ = [
    "normalize",
    "split_words",
    "extract_quotes",
    "MIN_QUOTE_LENGTH",
    "align",
    "find_substring",
    "find_word_window",
    "DEFAULT_CONTEXT_CHARS",
    "DEFAULT_CONTEXT_WORDS",
    "build_candidates",
    "summarize",
    "verify",
    "verify_quote",
]
