"""
Character classification submodule.

Maps Greek characters to phonetic classes and to accent-normalized forms.

Basic usage:
    >>> from greek_syllabizer.chars import is_vowel, is_consonant
    >>> is_vowel("ᾧ"), is_consonant("ῥ")
    (True, True)

    >>> from greek_syllabizer.chars import remove_accents
    >>> remove_accents("ἄνθρωπος")
    'ἀνθρωπος'
"""

from greek_syllabizer.chars._classes import (
    GREEK_LETTERS,
    RHO_VARIANTS,
    CharacterClass,
    CharKind,
    ConsonantKind,
    classify,
    consonant_kind,
    consonant_prefix,
    consonant_suffix,
    is_consonant,
    is_double,
    is_liquid,
    is_nasal,
    is_sharp,
    is_soft,
    is_vowel,
    sharpen_if_soft,
    strip_consonant_prefix,
    strip_consonant_suffix,
    strip_vowel_prefix,
    strip_vowel_suffix,
    vowel_infix,
    vowel_prefix,
    vowel_suffix,
)
from greek_syllabizer.chars._accents import (
    grave_to_acute,
    graves_to_acutes,
    remove_accent,
    remove_accents,
)

__all__ = [
    "GREEK_LETTERS",
    "RHO_VARIANTS",
    "CharacterClass",
    "CharKind",
    "ConsonantKind",
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
    "remove_accent",
    "grave_to_acute",
    "remove_accents",
    "graves_to_acutes",
]
