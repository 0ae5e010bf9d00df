"""Text normalization for quote matching.

Quotes lifted into a draft are routinely re-cased, re-punctuated and
re-wrapped. Both sides of every comparison go through the same
``normalize`` so those differences disappear; the result is only ever
used for comparison, never shown to a reader.
"""

# Periods, commas, semicolons, colons, exclamation/question marks and
# straight/curly quotation marks.
STRIPPED_PUNCTUATION = ".,;:!?\"'“”‘’"

_STRIP_TABLE = str.maketrans("", "", STRIPPED_PUNCTUATION)


def split_words(text: str) -> list[str]:
    """Split text into whitespace-delimited words (no empty entries)."""
    return text.split()


def normalize(text: str) -> str:
    """Normalize text for comparison.

    Lowercases, removes the stripped punctuation set without replacement,
    collapses whitespace runs to a single space and trims. Idempotent.

    Args:
        text: Text to normalize.

    Returns:
        Normalized text.
    """
    text = text.lower().translate(_STRIP_TABLE)
    return " ".join(split_words(text))
