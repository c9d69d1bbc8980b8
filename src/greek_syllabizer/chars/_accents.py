"""
Accent tables for polytonic Greek.

Two fixed lookups over lower-case vowels:
- removal of oxia/tonos, varia and perispomeni, keeping breathings,
  iota subscript and dialytika
- conversion of varia (grave) to oxia (acute)

Characters are case-folded before lookup. The default case folding is
``str.lower``; ``str.casefold`` must not be used as it folds ς into σ.
"""

from __future__ import annotations

from typing import Callable

__all__ = [
    "remove_accent",
    "grave_to_acute",
    "remove_accents",
    "graves_to_acutes",
]

CaseFold = Callable[[str], str]

# Target vowel → accented forms that collapse onto it.
# Oxia forms (U+1F71 etc.) are listed next to their NFC tonos equivalents.
_ACCENT_GROUPS = {
    "α": "άάὰᾶ",
    "ᾳ": "ᾴᾲᾷ",
    "ἀ": "ἄἂἆ",
    "ἁ": "ἅἃἇ",
    "ᾀ": "ᾄᾂᾆ",
    "ᾁ": "ᾅᾃᾇ",
    "ε": "έέὲ",
    "ἐ": "ἔἒ",
    "ἑ": "ἕἓ",
    "η": "ήήὴῆ",
    "ῃ": "ῄῂῇ",
    "ἠ": "ἤἢἦ",
    "ἡ": "ἥἣἧ",
    "ᾐ": "ᾔᾒᾖ",
    "ᾑ": "ᾕᾓᾗ",
    "ι": "ίίὶῖ",
    "ϊ": "ΐΐῒῗ",
    "ἰ": "ἴἲἶ",
    "ἱ": "ἵἳἷ",
    "ο": "όόὸ",
    "ὀ": "ὄὂ",
    "ὁ": "ὅὃ",
    "υ": "ύύὺῦ",
    "ὐ": "ὔὒὖ",
    "ὑ": "ὕὓὗ",
    "ϋ": "ΰΰῢῧ",
    "ω": "ώώὼῶ",
    "ῳ": "ῴῲῷ",
    "ὠ": "ὤὢὦ",
    "ὡ": "ὥὣὧ",
    "ᾠ": "ᾤᾢᾦ",
    "ᾡ": "ᾥᾣᾧ",
    # Upsilon hook symbol
    "\u03d2": "\u03d3",
}

_ACCENT_MAP = {
    accented: bare
    for bare, accented_forms in _ACCENT_GROUPS.items()
    for accented in accented_forms
}

# Combining oxia, varia and perispomeni left over when NFC cannot compose
# them onto an already accented or macron vowel
_COMBINING_ACCENTS = frozenset("\u0300\u0301\u0342")

# Varia → oxia. Monotonic-range letters map to their tonos form, which is
# what NFC produces for the oxia.
_GRAVE_MAP = {
    "ὰ": "ά",
    "ἂ": "ἄ",
    "ἃ": "ἅ",
    "ᾂ": "ᾄ",
    "ᾃ": "ᾅ",
    "ᾲ": "ᾴ",
    "ὲ": "έ",
    "ἒ": "ἔ",
    "ἓ": "ἕ",
    "ὴ": "ή",
    "ἢ": "ἤ",
    "ἣ": "ἥ",
    "ᾒ": "ᾔ",
    "ᾓ": "ᾕ",
    "ῂ": "ῄ",
    "ὶ": "ί",
    "ἲ": "ἴ",
    "ἳ": "ἵ",
    "ῒ": "ΐ",
    "ὸ": "ό",
    "ὂ": "ὄ",
    "ὃ": "ὅ",
    "ὺ": "ύ",
    "ὒ": "ὔ",
    "ὓ": "ὕ",
    "ῢ": "ΰ",
    "ὼ": "ώ",
    "ὢ": "ὤ",
    "ὣ": "ὥ",
    "ᾢ": "ᾤ",
    "ᾣ": "ᾥ",
    "ῲ": "ῴ",
}


def remove_accent(c: str, casefold: CaseFold = str.lower) -> str:
    """
    Lower-case a character and strip its oxia, varia or perispomeni.

    Breathings, iota subscript and dialytika are kept.

    Example:
        >>> remove_accent("Ἄ")
        'ἀ'
        >>> remove_accent("ῷ")
        'ῳ'
    """
    c = casefold(c)
    return _ACCENT_MAP.get(c, c)


def grave_to_acute(c: str, casefold: CaseFold = str.lower) -> str:
    """Lower-case a character and turn a varia into an oxia."""
    c = casefold(c)
    return _GRAVE_MAP.get(c, c)


def _map_word(chars: str, func: Callable[[str, CaseFold], str], casefold: CaseFold) -> str:
    if not chars:
        return ""
    last = chars[-1]
    if casefold(last) == "σ":
        last = "ς"
    mapped = [func(c, casefold) for c in chars[:-1]]
    mapped.append(func(last, casefold))
    return "".join(mapped)


def remove_accents(chars: str, casefold: CaseFold = str.lower) -> str:
    """
    Lower-case a word and strip all oxia, varia and perispomeni.

    Both precomposed accents and stray combining accent marks are removed.
    A final sigma written as σ (or Σ) becomes ς.

    Example:
        >>> remove_accents("ΛΌΓΟΣ")
        'λογος'
    """
    stripped = _map_word(chars, remove_accent, casefold)
    return "".join(c for c in stripped if c not in _COMBINING_ACCENTS)


def graves_to_acutes(chars: str, casefold: CaseFold = str.lower) -> str:
    """Lower-case a word and turn every varia into an oxia, fixing final sigma."""
    return _map_word(chars, grave_to_acute, casefold)
