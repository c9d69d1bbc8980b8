"""
Word normalization for Ancient Greek.

Brings a raw word into the canonical form used for syllabization:
lower case, NFC, a single apostrophe code point, a single upper-stop code
point, and accents stripped (or only graves turned to acutes for words of
up to three characters, where the accent position can carry meaning).
"""

from __future__ import annotations

import unicodedata
from typing import Callable, Optional

from greek_syllabizer.chars import graves_to_acutes, remove_accents
from greek_syllabizer.errors import MissingArgumentError

__all__ = ["normalize_word", "APOSTROPHE", "UPPER_STOP"]

# Greek psili used as apostrophe (U+1FBF)
APOSTROPHE = "᾿"

# Middle dot, the NFC form of the ano teleia
UPPER_STOP = "·"

# Elision marks that are rewritten to APOSTROPHE at word end
_APOSTROPHE_VARIANTS = {
    "'",  # ASCII apostrophe
    "’",  # right single quotation mark
    "᾽",  # Greek koronis
}

# Dot above, often typed instead of the upper stop
_UPPER_STOP_VARIANT = "˙"

# Words at most this long keep their accents
_SHORT_WORD_LENGTH = 3

_ELLIPSIS = "…"


def normalize_word(word: str, casefold: Optional[Callable[[str], str]] = None) -> str:
    """
    Normalize a Greek word for syllabization.

    Args:
        word: The raw word
        casefold: Case folding function; defaults to ``str.lower``

    Returns:
        The canonical form of the word

    Raises:
        MissingArgumentError: if ``word`` is None

    Example:
        >>> normalize_word("Λόγος")
        'λογος'
        >>> normalize_word("τὸ")
        'τό'
        >>> normalize_word("ἀλλ'")
        'ἀλλ᾿'
    """
    if word is None:
        raise MissingArgumentError("word")
    if casefold is None:
        casefold = str.lower

    word = unicodedata.normalize("NFC", casefold(word.strip()))
    if not word:
        return ""

    if word[-1] in _APOSTROPHE_VARIANTS:
        word = word[:-1] + APOSTROPHE

    word = word.replace(_UPPER_STOP_VARIANT, UPPER_STOP)

    if len(word) <= _SHORT_WORD_LENGTH:
        return graves_to_acutes(word, casefold)

    if all(c == "." for c in word):
        return _ELLIPSIS

    return remove_accents(word, casefold)
