"""
Edit commands submodule.

Classifies the relationship between two syllables as a cost-bearing
EditCommand, for building syllable cost matrices.
"""

from greek_syllabizer.edits._commands import (
    DEFAULT_REPLACE_ALL_COST,
    DEFAULT_REPLACE_CONSONANTS_COST,
    DEFAULT_REPLACE_VOWELS_COST,
    NO_CHANGE,
    EditCommand,
    EditKind,
    classify_edit,
)

__all__ = [
    "EditKind",
    "EditCommand",
    "NO_CHANGE",
    "DEFAULT_REPLACE_VOWELS_COST",
    "DEFAULT_REPLACE_CONSONANTS_COST",
    "DEFAULT_REPLACE_ALL_COST",
    "classify_edit",
]
