"""
Punctuation and delimiter sets for Ancient Greek text.

The syllabizer only needs ``is_punctuation``; the delimiter strings are
kept for callers that break sentences and words themselves.
"""

from __future__ import annotations

__all__ = [
    "PUNCTUATION_CHARACTERS",
    "SENTENCE_DELIMITERS",
    "WORD_DELIMITERS",
    "is_punctuation",
]

SENTENCE_DELIMITERS = "\r\n.;:·…!"

WORD_DELIMITERS = " \r\n.;:·…!-()"

# Greek question mark (U+037E) and ano teleia (U+0387) are the un-normalized
# forms of ';' and '·'.
PUNCTUATION_CHARACTERS = ".,;:·…!-()" + "\u037e\u0387"

_PUNCTUATION = frozenset(PUNCTUATION_CHARACTERS)


def is_punctuation(c: str) -> bool:
    """Return True if the character is Greek punctuation."""
    return c in _PUNCTUATION
