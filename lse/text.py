"""Keyword extraction shared by the document loader and the engine.

Documents and noise words must be normalized by the same rules, otherwise
a noise word written in a different case would slip into the index.
"""

from __future__ import annotations

from collections.abc import Iterable

# Only these are stripped, and only from the end of a word.
PUNCTUATION = ".,?:;!"


def split_tokens(text: str) -> list[str]:
    """Split document text into raw whitespace-delimited words."""
    return text.split()


def normalize_noise_words(words: Iterable[str]) -> frozenset[str]:
    """Lower-case noise words so lookups match normalized keywords."""
    return frozenset(w.strip().lower() for w in words if w.strip())


def get_keyword(word: str | None, noise_words: frozenset[str] | set[str]) -> str | None:
    """Return the keyword form of ``word``, or None if it is not a keyword.

    Trailing punctuation is stripped ("word?!" -> "word"); what remains must
    be letters only. "can't", "co-op" and "abc123" are rejected, as is any
    word whose lower-cased form is a noise word.
    """
    if word is None:
        return None

    # Lower-casing can add combining marks ("İ" -> "i̇"), so check after it.
    keyword = word.rstrip(PUNCTUATION).lower()
    if not keyword or not keyword.isalpha():
        return None
    if keyword in noise_words:
        return None
    return keyword
