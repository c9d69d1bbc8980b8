"""
Edit commands between two syllables.

A syllable is read as a lead part followed by an optional trailing run of
consonants. An EditCommand describes how to turn a base syllable into a
target syllable, and carries the cost of doing so:

- NO_CHANGE: the syllables are equal (cost 0.0)
- REPLACE_VOWELS: swap the lead part, keep the base consonants (cost 0.5)
- REPLACE_CONSONANTS: keep the base lead part, swap the consonants (cost 0.5)
- REPLACE_ALL: replace the whole syllable (cost 1.0)

Commands are immutable and hashable, so they can key cost matrices.

Example:
    >>> command = classify_edit("λος", "λον")
    >>> command.kind, command.payload, command.cost
    (<EditKind.REPLACE_CONSONANTS: 'replace_consonants'>, 'ν', 0.5)
    >>> command.apply("λος")
    'λον'
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from greek_syllabizer.chars import consonant_suffix, strip_consonant_suffix
from greek_syllabizer.errors import InvalidCostError, MissingArgumentError

__all__ = [
    "EditKind",
    "EditCommand",
    "NO_CHANGE",
    "DEFAULT_REPLACE_VOWELS_COST",
    "DEFAULT_REPLACE_CONSONANTS_COST",
    "DEFAULT_REPLACE_ALL_COST",
    "classify_edit",
]

DEFAULT_REPLACE_VOWELS_COST = 0.5
DEFAULT_REPLACE_CONSONANTS_COST = 0.5
DEFAULT_REPLACE_ALL_COST = 1.0


class EditKind(str, Enum):
    NO_CHANGE = "no_change"
    REPLACE_VOWELS = "replace_vowels"
    REPLACE_CONSONANTS = "replace_consonants"
    REPLACE_ALL = "replace_all"


@dataclass(frozen=True)
class EditCommand:
    """A cost-bearing transformation of one syllable into another."""

    kind: EditKind
    payload: str = ""
    cost: float = 0.0

    def __post_init__(self) -> None:
        if self.payload is None:
            raise MissingArgumentError("payload")
        _check_cost(self.cost)

    @classmethod
    def no_change(cls) -> EditCommand:
        return cls(EditKind.NO_CHANGE, "", 0.0)

    @classmethod
    def replace_vowels(
        cls, target_vowels: str, cost: float = DEFAULT_REPLACE_VOWELS_COST
    ) -> EditCommand:
        """Replace everything before the base consonant suffix with ``target_vowels``."""
        return cls(EditKind.REPLACE_VOWELS, target_vowels, cost)

    @classmethod
    def replace_consonants(
        cls, target_consonants: str, cost: float = DEFAULT_REPLACE_CONSONANTS_COST
    ) -> EditCommand:
        """Replace the base consonant suffix with ``target_consonants``."""
        return cls(EditKind.REPLACE_CONSONANTS, target_consonants, cost)

    @classmethod
    def replace_all(
        cls, target: str, cost: float = DEFAULT_REPLACE_ALL_COST
    ) -> EditCommand:
        return cls(EditKind.REPLACE_ALL, target, cost)

    def apply(self, base: str) -> str:
        """
        Execute the command upon a base syllable.

        Args:
            base: The syllable to transform

        Returns:
            The transformed syllable
        """
        if base is None:
            raise MissingArgumentError("base")

        if self.kind is EditKind.NO_CHANGE:
            return base
        if self.kind is EditKind.REPLACE_VOWELS:
            return self.payload + consonant_suffix(base)
        if self.kind is EditKind.REPLACE_CONSONANTS:
            return strip_consonant_suffix(base) + self.payload
        return self.payload


def _check_cost(cost: float) -> None:
    if not 0.0 <= cost <= 1.0:
        raise InvalidCostError(cost)


NO_CHANGE = EditCommand.no_change()


def classify_edit(
    base: str,
    target: str,
    *,
    vowels_cost: float = DEFAULT_REPLACE_VOWELS_COST,
    consonants_cost: float = DEFAULT_REPLACE_CONSONANTS_COST,
    all_cost: float = DEFAULT_REPLACE_ALL_COST,
) -> EditCommand:
    """
    Get the edit command that turns ``base`` into ``target``.

    Tests in order, first match wins:
    1. Equal syllables → NO_CHANGE
    2. Same consonant suffix (the empty suffix included) → REPLACE_VOWELS
    3. Same lead prefix → REPLACE_CONSONANTS
    4. Otherwise → REPLACE_ALL

    Args:
        base: The base syllable
        target: The syllable to reach
        vowels_cost: Cost given to REPLACE_VOWELS
        consonants_cost: Cost given to REPLACE_CONSONANTS
        all_cost: Cost given to REPLACE_ALL

    Returns:
        An EditCommand which, applied to ``base``, yields ``target``

    Raises:
        MissingArgumentError: if ``base`` or ``target`` is None
        InvalidCostError: if any of the costs falls outside [0, 1]
    """
    if base is None:
        raise MissingArgumentError("base")
    if target is None:
        raise MissingArgumentError("target")
    for cost in (vowels_cost, consonants_cost, all_cost):
        _check_cost(cost)

    if base == target:
        return NO_CHANGE

    target_suffix = consonant_suffix(target)
    target_lead = strip_consonant_suffix(target)

    if consonant_suffix(base) == target_suffix:
        return EditCommand.replace_vowels(target_lead, vowels_cost)

    if strip_consonant_suffix(base) == target_lead:
        return EditCommand.replace_consonants(target_suffix, consonants_cost)

    return EditCommand.replace_all(target, all_cost)
