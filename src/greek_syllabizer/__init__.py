"""
greek-syllabizer: Ancient Greek character classes, word normalization
and syllabization.

Provides the syllable-level building blocks of a language model that
aligns words syllable by syllable: phonetic classification of polytonic
characters, canonical word forms, a reversible syllable segmentation and
a classifier of syllable-to-syllable edit commands.

Basic usage:
    >>> from greek_syllabizer import normalize_word, segment, reassemble
    >>> normalize_word("Λόγος")
    'λογος'
    >>> word = segment("λόγος")
    >>> list(word)
    ['ος', 'ογ', 'λ', '$']
    >>> reassemble(word)
    'λογος'

Edit commands:
    >>> from greek_syllabizer import classify_edit
    >>> command = classify_edit("λος", "λον")
    >>> command.apply("λος"), command.cost
    ('λον', 0.5)
"""

from greek_syllabizer._normalize import normalize_word
from greek_syllabizer._punctuation import is_punctuation
from greek_syllabizer.chars import (
    CharacterClass,
    CharKind,
    ConsonantKind,
    classify,
    graves_to_acutes,
    is_consonant,
    is_vowel,
    remove_accents,
    sharpen_if_soft,
)
from greek_syllabizer.edits import EditCommand, EditKind, classify_edit
from greek_syllabizer.errors import (
    InvalidCostError,
    MissingArgumentError,
    SyllabizerError,
    UnsupportedModeError,
)
from greek_syllabizer.syllables import (
    SENTINEL,
    SyllabicWord,
    Syllabizer,
    SyllabizerMode,
    reassemble,
    segment,
)

__version__ = "0.1.0"
__all__ = [
    "normalize_word",
    "segment",
    "reassemble",
    "classify_edit",
    "is_punctuation",
    "CharacterClass",
    "CharKind",
    "ConsonantKind",
    "classify",
    "is_vowel",
    "is_consonant",
    "sharpen_if_soft",
    "remove_accents",
    "graves_to_acutes",
    "EditCommand",
    "EditKind",
    "SENTINEL",
    "SyllabicWord",
    "Syllabizer",
    "SyllabizerMode",
    "SyllabizerError",
    "MissingArgumentError",
    "UnsupportedModeError",
    "InvalidCostError",
]


# Lazy import for spaCy components (only when spacy is installed)
def __getattr__(name: str):
    if name == "SyllabizerComponent":
        try:
            from greek_syllabizer.spacy import SyllabizerComponent
            return SyllabizerComponent
        except ImportError:
            raise ImportError(
                "spaCy integration requires spacy. "
                "Install with: pip install greek-syllabizer[spacy]"
            )
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
