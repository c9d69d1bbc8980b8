"""
spaCy integration for greek-syllabizer.

Provides a pipeline component that normalizes and syllabizes every token.

Example:
    >>> import spacy
    >>> nlp = spacy.blank("grc")
    >>> nlp.add_pipe("greek_syllabizer")
    >>> doc = nlp("ὁ λόγος")
    >>> doc[1]._.syllables
    ('ος', 'ογ', 'λ', '$')
"""

import logging
from typing import Optional

from spacy.language import Language
from spacy.tokens import Doc, Token

from greek_syllabizer.errors import UnsupportedModeError
from greek_syllabizer.syllables import Syllabizer, SyllabizerMode

__all__ = [
    "SyllabizerComponent",
    "create_syllabizer",
    "get_syllabizer_pipe",
]

logger = logging.getLogger(__name__)


@Language.factory(
    "greek_syllabizer",
    default_config={"mode": "vowels_to_consonants"},
    assigns=["doc._.syllabified", "token._.normalized", "token._.syllables"],
)
def create_syllabizer(
    nlp: Language,
    name: str,
    mode: str = "vowels_to_consonants",
) -> "SyllabizerComponent":
    """Create a Greek syllabizer pipeline component."""
    return SyllabizerComponent(nlp, name, mode=mode)


class SyllabizerComponent:
    """
    spaCy pipeline component for Greek syllabization.

    Extensions:
        - Doc._.syllabified: List of per-token syllable tuples.
        - Token._.normalized: Normalized token text.
        - Token._.syllables: Syllables of the token, word ending first,
          followed by the sentinel.
    """

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        mode: str = "vowels_to_consonants",
    ) -> None:
        self.name = name
        self.mode = mode

        try:
            self._syllabizer = Syllabizer(SyllabizerMode(mode))
        except ValueError:
            raise UnsupportedModeError(mode) from None

        logger.debug("Created %s component with mode %r", name, mode)

        if not Doc.has_extension("syllabified"):
            Doc.set_extension("syllabified", default=None)
        if not Token.has_extension("normalized"):
            Token.set_extension("normalized", default=None)
        if not Token.has_extension("syllables"):
            Token.set_extension("syllables", default=None)

    def __call__(self, doc: Doc) -> Doc:
        syllabified = []

        for token in doc:
            syllables = self._syllabizer.segment(token.text).syllables
            token._.normalized = self._syllabizer.normalize(token.text)
            token._.syllables = syllables
            syllabified.append(syllables)

        doc._.syllabified = syllabified
        return doc

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "SyllabizerComponent":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "SyllabizerComponent":
        return self


def get_syllabizer_pipe(nlp: Language) -> Optional[SyllabizerComponent]:
    """Get the syllabizer component from a pipeline."""
    if "greek_syllabizer" in nlp.pipe_names:
        return nlp.get_pipe("greek_syllabizer")
    return None
