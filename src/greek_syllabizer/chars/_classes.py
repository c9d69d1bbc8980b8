"""
Phonetic classification of Greek characters.

Provides:
- classify(): map a character to its CharacterClass
- is_vowel() / is_consonant(): mutually exclusive predicates
- Consonant subclass predicates (nasal, liquid, sharp, soft, double)
- sharpen_if_soft(): soft aspirate → unaspirated stop
- Prefix/suffix helpers over consonant and vowel runs

All tables are built once at import time and never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

__all__ = [
    "CharKind",
    "ConsonantKind",
    "CharacterClass",
    "GREEK_LETTERS",
    "RHO_VARIANTS",
    "classify",
    "consonant_kind",
    "is_vowel",
    "is_consonant",
    "is_nasal",
    "is_liquid",
    "is_sharp",
    "is_soft",
    "is_double",
    "sharpen_if_soft",
    "consonant_prefix",
    "strip_consonant_prefix",
    "consonant_suffix",
    "strip_consonant_suffix",
    "vowel_prefix",
    "strip_vowel_prefix",
    "vowel_suffix",
    "strip_vowel_suffix",
    "vowel_infix",
]


class CharKind(str, Enum):
    VOWEL = "vowel"
    CONSONANT = "consonant"
    UNCLASSIFIED = "unclassified"


class ConsonantKind(str, Enum):
    NASAL = "nasal"
    LIQUID = "liquid"
    SHARP = "sharp"
    SOFT = "soft"
    DOUBLE = "double"
    OTHER = "other"


@dataclass(frozen=True)
class CharacterClass:
    """Phonetic class of a single character."""

    kind: CharKind
    consonant: Optional[ConsonantKind] = None

    @property
    def is_vowel(self) -> bool:
        return self.kind is CharKind.VOWEL

    @property
    def is_consonant(self) -> bool:
        return self.kind is CharKind.CONSONANT


# =============================================================================
# Character Tables
# =============================================================================

# Rho with psili, rho with dasia, capital rho with dasia.
# These sit in the Greek Extended block but are consonants.
RHO_VARIANTS = frozenset("ῤῥῬ")

_NASALS = frozenset("μνΜΝ")
_LIQUIDS = frozenset("λρΛΡ") | RHO_VARIANTS
_SHARPS = frozenset("κπτΚΠΤ")
_SOFTS = frozenset("χφθΧΦΘ")
_DOUBLES = frozenset("ξψζΞΨΖ")
_OTHER_CONSONANTS = frozenset("βγδσςΒΓΔΣ")

_CONSONANT_KINDS: dict[str, ConsonantKind] = {}
for _chars, _kind in (
    (_NASALS, ConsonantKind.NASAL),
    (_LIQUIDS, ConsonantKind.LIQUID),
    (_SHARPS, ConsonantKind.SHARP),
    (_SOFTS, ConsonantKind.SOFT),
    (_DOUBLES, ConsonantKind.DOUBLE),
    (_OTHER_CONSONANTS, ConsonantKind.OTHER),
):
    for _c in _chars:
        _CONSONANT_KINDS[_c] = _kind
del _chars, _kind, _c

_CONSONANTS = frozenset(_CONSONANT_KINDS)

# Vowels of the Greek and Coptic block (monotonic accents, dialytika)
_MONOTONIC_VOWELS = frozenset(
    "ΑΆΕΈΗΉΙΊΪΟΌΥΎΫΩΏ"
    "αάεέηήιίϊΐοόυύϋΰωώ"
    # Dialytika with varia / perispomeni live in Greek Extended
    "ῒῗῢῧ"
)

# Greek Extended holds every precomposed polytonic vowel.
_EXTENDED_START = "\u1f00"
_EXTENDED_END = "\u1fff"

# The declared alphabet: base letters of both cases plus final sigma
GREEK_LETTERS = tuple("αβγδεζηθικλμνξοπρσςτυφχψω" "ΑΒΓΔΕΖΗΘΙΚΛΜΝΞΟΠΡΣΤΥΦΧΨΩ")

_UNCLASSIFIED = CharacterClass(CharKind.UNCLASSIFIED)
_VOWEL = CharacterClass(CharKind.VOWEL)
_CONSONANT_CLASSES = {
    kind: CharacterClass(CharKind.CONSONANT, kind) for kind in ConsonantKind
}


# =============================================================================
# Classification
# =============================================================================


def is_vowel(c: str) -> bool:
    """
    Return True if the character is a Greek vowel.

    Precomposed polytonic vowels are recognized by block: with the rho
    variants excluded first, everything in U+1F00..U+1FFE counts as a vowel.
    """
    if c in _MONOTONIC_VOWELS:
        return True
    if c in RHO_VARIANTS:
        return False
    return _EXTENDED_START <= c < _EXTENDED_END


def is_consonant(c: str) -> bool:
    """Return True if the character is a Greek consonant."""
    return c in _CONSONANTS


def consonant_kind(c: str) -> Optional[ConsonantKind]:
    """Return the consonant subclass of a character, or None."""
    return _CONSONANT_KINDS.get(c)


def classify(c: str) -> CharacterClass:
    """
    Classify a character as vowel, consonant (with subclass) or unclassified.

    Never raises: anything outside the Greek tables is unclassified.

    Example:
        >>> classify("λ").consonant
        <ConsonantKind.LIQUID: 'liquid'>
        >>> classify("ἄ").is_vowel
        True
    """
    kind = _CONSONANT_KINDS.get(c)
    if kind is not None:
        return _CONSONANT_CLASSES[kind]
    if is_vowel(c):
        return _VOWEL
    return _UNCLASSIFIED


def is_nasal(c: str) -> bool:
    return c in _NASALS


def is_liquid(c: str) -> bool:
    return c in _LIQUIDS


def is_sharp(c: str) -> bool:
    return c in _SHARPS


def is_soft(c: str) -> bool:
    return c in _SOFTS


def is_double(c: str) -> bool:
    return c in _DOUBLES


_SHARPEN_MAP = {
    "φ": "π",
    "χ": "κ",
    "θ": "τ",
    "Φ": "Π",
    "Χ": "Κ",
    "Θ": "Τ",
}


def sharpen_if_soft(c: str) -> str:
    """
    Turn a soft (aspirated) consonant into its sharp counterpart.

    Case is preserved; any other character is returned unchanged.
    """
    return _SHARPEN_MAP.get(c, c)


# =============================================================================
# String Helpers
# =============================================================================


def _take_while(chars: str, predicate: Callable[[str], bool]) -> str:
    for i, c in enumerate(chars):
        if not predicate(c):
            return chars[:i]
    return chars


def _skip_while(chars: str, predicate: Callable[[str], bool]) -> str:
    for i, c in enumerate(chars):
        if not predicate(c):
            return chars[i:]
    return ""


def _trailing_run_start(chars: str, predicate: Callable[[str], bool]) -> int:
    i = len(chars)
    while i > 0 and predicate(chars[i - 1]):
        i -= 1
    return i


def consonant_prefix(chars: str) -> str:
    """Return the leading run of consonants."""
    return _take_while(chars, is_consonant)


def strip_consonant_prefix(chars: str) -> str:
    """Return the string without its leading run of consonants."""
    return _skip_while(chars, is_consonant)


def consonant_suffix(chars: str) -> str:
    """
    Return the trailing maximal run of consonants.

    Example:
        >>> consonant_suffix("λος")
        'ς'
        >>> consonant_suffix("ογχ")
        'γχ'
    """
    return chars[_trailing_run_start(chars, is_consonant):]


def strip_consonant_suffix(chars: str) -> str:
    """Return everything before the trailing run of consonants (the lead prefix)."""
    return chars[:_trailing_run_start(chars, is_consonant)]


def vowel_prefix(chars: str) -> str:
    """Return the leading run of vowels."""
    return _take_while(chars, is_vowel)


def strip_vowel_prefix(chars: str) -> str:
    return _skip_while(chars, is_vowel)


def vowel_suffix(chars: str) -> str:
    """Return the trailing maximal run of vowels."""
    return chars[_trailing_run_start(chars, is_vowel):]


def strip_vowel_suffix(chars: str) -> str:
    return chars[:_trailing_run_start(chars, is_vowel)]


def vowel_infix(chars: str) -> str:
    """Return the vowels following the leading consonants (e.g. 'στρου' → 'ου')."""
    return vowel_prefix(strip_consonant_prefix(chars))
