"""Text normalization shared by every matcher.

Matching is lexical and case-insensitive. Text is NFC-normalized before
lower-casing so that a precomposed "é" and "e" + combining accent compare
equal.
"""

import unicodedata


def normalize(text: str) -> str:
    """NFC-normalize and lower-case text for substring matching.

    Example:
        >>> normalize("KARITÉ")
        'karité'
    """
    return unicodedata.normalize("NFC", text).lower()


def significant_words(normalized_text: str, min_length: int) -> list[str]:
    """Whitespace-split words strictly longer than ``min_length``.

    Duplicates are kept: a word repeated in the utterance counts twice.
    """
    return [word for word in normalized_text.split() if len(word) > min_length]


def truncate(text: str, max_chars: int, marker: str) -> str:
    """Cut ``text`` to ``max_chars`` and append ``marker`` if it was longer."""
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + marker
