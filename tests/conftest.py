"""Shared fixtures for greek-syllabizer tests."""

import pytest

from greek_syllabizer.syllables import Syllabizer, SyllabizerMode

# Words exercising breathings, iota subscript, graves, final sigma,
# elision and punctuation.
SAMPLE_WORDS = [
    "λόγος",
    "ΛΟΓΟΣ",
    "ἄνθρωπος",
    "ἀρχῇ",
    "τὸν",
    "τίς",
    "ῥήτωρ",
    "Ῥόδος",
    "προϊέναι",
    "ἀλλ'",
    "οὐκ",
    "ἐστιν;",
    "στρουθός",
    "  θεοῦ  ",
    "...",
    "....",
    "",
    "ἄγγελος",
    "ἐξ",
    "ψυχῇ",
]


@pytest.fixture
def syllabizer() -> Syllabizer:
    """Return a syllabizer with the default boundary policy."""
    return Syllabizer()


@pytest.fixture(params=list(SyllabizerMode), ids=lambda mode: mode.value)
def any_mode_syllabizer(request) -> Syllabizer:
    """Return a syllabizer for each boundary policy."""
    return Syllabizer(request.param)
