"""
Syllabization of Ancient Greek words.

Syllabization does not follow Ancient Greek grammar; it is a
machine-friendly segmentation strategy. A word is normalized, cut into
syllables at run boundaries, the order of the syllables is reversed so
that word endings come first, and the sentinel ``"$"`` is appended.

Example:
    >>> from greek_syllabizer.syllables import Syllabizer, SyllabizerMode
    >>> syllabizer = Syllabizer()
    >>> list(syllabizer.segment("λόγος"))
    ['ος', 'ογ', 'λ', '$']
    >>> list(Syllabizer(SyllabizerMode.CONSONANTS_TO_VOWELS).segment("λόγος"))
    ['ς', 'γο', 'λο', '$']
    >>> syllabizer.reassemble(syllabizer.segment("λόγος"))
    'λογος'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Iterator, Optional, Union

from greek_syllabizer._normalize import normalize_word
from greek_syllabizer._punctuation import is_punctuation as _default_is_punctuation
from greek_syllabizer.chars import is_consonant, is_vowel
from greek_syllabizer.edits import EditCommand, classify_edit
from greek_syllabizer.errors import MissingArgumentError, UnsupportedModeError

__all__ = [
    "SENTINEL",
    "SyllabizerMode",
    "SyllabicWord",
    "Syllabizer",
    "segment",
    "reassemble",
]

logger = logging.getLogger(__name__)

SENTINEL = "$"


class SyllabizerMode(str, Enum):
    """Where the syllabizer places syllable boundaries."""

    # Break when a run of consonants is followed by a non-consonant
    VOWELS_TO_CONSONANTS = "vowels_to_consonants"
    # Break when a run of vowels is followed by a non-vowel
    CONSONANTS_TO_VOWELS = "consonants_to_vowels"


@dataclass(frozen=True)
class SyllabicWord:
    """
    A word as a sequence of syllables, word ending first.

    The last element is always the sentinel.
    """

    syllables: tuple[str, ...]

    SENTINEL = SENTINEL

    def __post_init__(self) -> None:
        object.__setattr__(self, "syllables", tuple(self.syllables))

    def __iter__(self) -> Iterator[str]:
        return iter(self.syllables)

    def __len__(self) -> int:
        return len(self.syllables)

    def __getitem__(self, index):
        return self.syllables[index]


def _split_runs(word: str, in_run: Callable[[str], bool]) -> list[str]:
    """Cut ``word`` wherever a run of ``in_run`` characters is left."""
    syllables = []
    buffer = []
    inside_run = False

    for c in word:
        if in_run(c):
            inside_run = True
        elif inside_run:
            syllables.append("".join(buffer))
            buffer = []
            inside_run = False
        buffer.append(c)

    if buffer:
        syllables.append("".join(buffer))

    return syllables


_RUN_PREDICATES = {
    SyllabizerMode.VOWELS_TO_CONSONANTS: is_consonant,
    SyllabizerMode.CONSONANTS_TO_VOWELS: is_vowel,
}


class Syllabizer:
    """
    Syllable services for Ancient Greek.

    Bundles the boundary policy with the two capabilities it relies on:
    a punctuation predicate and a case folding function.
    """

    LANGUAGE_KEY = "grc"
    LANGUAGE_NAME = "Ἑλληνικά"

    def __init__(
        self,
        mode: Union[SyllabizerMode, str] = SyllabizerMode.VOWELS_TO_CONSONANTS,
        *,
        is_punctuation: Optional[Callable[[str], bool]] = None,
        casefold: Optional[Callable[[str], str]] = None,
    ) -> None:
        """
        Initialize the syllabizer.

        Args:
            mode: The boundary policy. Checked when segmenting.
            is_punctuation: Punctuation predicate. Defaults to the Greek
                punctuation set.
            casefold: Case folding function. Defaults to ``str.lower``.
        """
        self.mode = mode
        self.is_punctuation = is_punctuation or _default_is_punctuation
        self.casefold = casefold or str.lower

    def __repr__(self) -> str:
        mode = getattr(self.mode, "value", self.mode)
        return f"Syllabizer(mode={mode!r})"

    def normalize(self, word: str) -> str:
        """Normalize a word; see :func:`greek_syllabizer.normalize_word`."""
        return normalize_word(word, self.casefold)

    def segment(self, word: str) -> SyllabicWord:
        """
        Normalize and break a word into its syllables.

        Args:
            word: The word to segment

        Returns:
            The syllables in reverse order followed by the sentinel. A word
            made only of punctuation is returned whole, not normalized.

        Raises:
            MissingArgumentError: if ``word`` is None
            UnsupportedModeError: if the configured mode is unknown
        """
        if word is None:
            raise MissingArgumentError("word")

        try:
            in_run = _RUN_PREDICATES[SyllabizerMode(self.mode)]
        except ValueError:
            raise UnsupportedModeError(self.mode) from None

        if all(self.is_punctuation(c) for c in word):
            logger.debug("Punctuation token %r kept as a single syllable", word)
            return SyllabicWord([word, SENTINEL])

        syllables = _split_runs(self.normalize(word), in_run)
        syllables.reverse()
        syllables.append(SENTINEL)

        return SyllabicWord(syllables)

    def reassemble(self, word: Iterable[str]) -> str:
        """
        Join the syllables of a syllabic word back into a word.

        The syllable order is reversed back and the sentinel removed.

        Raises:
            MissingArgumentError: if ``word`` is None
        """
        if word is None:
            raise MissingArgumentError("word")

        return "".join(reversed(tuple(word))).replace(SENTINEL, "")

    def get_distance(self, base_syllable: str, target_syllable: str) -> EditCommand:
        """Get the edit command turning one syllable into another; see :func:`classify_edit`."""
        return classify_edit(base_syllable, target_syllable)


# =============================================================================
# Module-level Convenience Functions
# =============================================================================

# Singleton instance for convenience functions
_default_syllabizer: Optional[Syllabizer] = None


def _get_default() -> Syllabizer:
    global _default_syllabizer
    if _default_syllabizer is None:
        _default_syllabizer = Syllabizer()
    return _default_syllabizer


def segment(
    word: str, mode: Union[SyllabizerMode, str] = SyllabizerMode.VOWELS_TO_CONSONANTS
) -> SyllabicWord:
    """
    Segment a word with the default punctuation and case folding.

    Example:
        >>> list(segment("ἄνθρωπος"))
        ['ος', 'ωπ', 'ἀνθρ', '$']
    """
    if mode == SyllabizerMode.VOWELS_TO_CONSONANTS:
        return _get_default().segment(word)
    return Syllabizer(mode).segment(word)


def reassemble(word: Iterable[str]) -> str:
    """Reassemble a syllabic word into its normalized word."""
    return _get_default().reassemble(word)
