"""
Syllabization submodule.

Re-exports the syllabizer, its boundary policies and the syllabic word
type.
"""

from greek_syllabizer.syllables._syllabizer import (
    SENTINEL,
    SyllabicWord,
    Syllabizer,
    SyllabizerMode,
    reassemble,
    segment,
)

__all__ = [
    "SENTINEL",
    "SyllabizerMode",
    "SyllabicWord",
    "Syllabizer",
    "segment",
    "reassemble",
]
