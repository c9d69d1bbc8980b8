"""
Tests for syllabization and reassembly.

Covers both boundary policies, the punctuation short-circuit, the
sentinel convention, round-trips and configuration errors.
"""

import dataclasses
from concurrent.futures import ThreadPoolExecutor

import pytest

from greek_syllabizer import (
    MissingArgumentError,
    UnsupportedModeError,
    normalize_word,
    reassemble,
    segment,
)
from greek_syllabizer.edits import EditKind
from greek_syllabizer.syllables import SENTINEL, SyllabicWord, Syllabizer, SyllabizerMode

from conftest import SAMPLE_WORDS


# =============================================================================
# Boundary Policies
# =============================================================================


class TestVowelsToConsonants:
    """Test the default boundary policy."""

    def test_logos(self, syllabizer):
        assert list(syllabizer.segment("λόγος")) == ["ος", "ογ", "λ", "$"]

    def test_anthropos(self, syllabizer):
        assert list(syllabizer.segment("ἄνθρωπος")) == ["ος", "ωπ", "ἀνθρ", "$"]

    def test_consonant_cluster(self, syllabizer):
        assert list(syllabizer.segment("στρουθός")) == ["ος", "ουθ", "στρ", "$"]

    def test_vowel_only(self, syllabizer):
        assert list(syllabizer.segment("οἴει")) == ["οἰει", "$"]

    def test_consonant_only(self, syllabizer):
        assert list(syllabizer.segment("στρ")) == ["στρ", "$"]

    def test_breathing_rho_is_consonant(self, syllabizer):
        assert list(syllabizer.segment("ῥήτωρ")) == ["ωρ", "ητ", "ῥ", "$"]

    def test_is_default(self):
        assert Syllabizer().mode is SyllabizerMode.VOWELS_TO_CONSONANTS


class TestConsonantsToVowels:
    """Test the consonants_to_vowels boundary policy."""

    @pytest.fixture
    def syllabizer(self):
        return Syllabizer(SyllabizerMode.CONSONANTS_TO_VOWELS)

    def test_logos(self, syllabizer):
        assert list(syllabizer.segment("λόγος")) == ["ς", "γο", "λο", "$"]

    def test_anthropos(self, syllabizer):
        assert list(syllabizer.segment("ἄνθρωπος")) == ["ς", "πο", "νθρω", "ἀ", "$"]

    def test_diphthong(self, syllabizer):
        assert list(syllabizer.segment("θεοῦ")) == ["θεου", "$"]

    def test_mode_given_as_string(self):
        syllabizer = Syllabizer("consonants_to_vowels")
        assert list(syllabizer.segment("λόγος")) == ["ς", "γο", "λο", "$"]


# =============================================================================
# Punctuation and Sentinel
# =============================================================================


class TestPunctuation:
    """Test punctuation tokens kept as a single syllable."""

    @pytest.mark.parametrize("token", [";", ",", "·", "…", "...", "!", "()", "-"])
    def test_punctuation_token(self, syllabizer, token):
        assert list(syllabizer.segment(token)) == [token, "$"]

    def test_raw_token_kept(self, syllabizer):
        # Greek question mark is returned as given, not normalized to ';'
        assert list(syllabizer.segment("\u037e")) == ["\u037e", "$"]

    def test_empty_word(self, syllabizer):
        assert list(syllabizer.segment("")) == ["", "$"]

    def test_trailing_punctuation_is_segmented(self, syllabizer):
        assert list(syllabizer.segment("λόγος,")) == [",", "ος", "ογ", "λ", "$"]

    def test_injected_predicate(self):
        syllabizer = Syllabizer(is_punctuation=lambda c: True)
        assert list(syllabizer.segment("Λόγος")) == ["Λόγος", "$"]

    def test_checked_in_both_modes(self, any_mode_syllabizer):
        assert list(any_mode_syllabizer.segment("...")) == ["...", "$"]


class TestSentinel:
    """Test the trailing sentinel convention."""

    @pytest.mark.parametrize("word", SAMPLE_WORDS)
    def test_sentinel_last_and_unique(self, any_mode_syllabizer, word):
        result = any_mode_syllabizer.segment(word)
        assert result[-1] == SENTINEL
        assert list(result).count(SENTINEL) == 1

    @pytest.mark.parametrize("word", ["λόγος", "ἄνθρωπος", "ἀρχῇ", "ἀλλ'", "ψυχῇ"])
    def test_no_empty_syllables(self, any_mode_syllabizer, word):
        assert all(any_mode_syllabizer.segment(word)[:-1])


# =============================================================================
# Reassembly
# =============================================================================


class TestReassemble:
    """Test joining syllables back into a word."""

    def test_reverses_and_drops_sentinel(self, syllabizer):
        assert syllabizer.reassemble(["ος", "ογ", "λ", "$"]) == "λογος"

    def test_accepts_syllabic_word(self, syllabizer):
        assert syllabizer.reassemble(SyllabicWord(["ς", "γο", "λο", "$"])) == "λογος"

    def test_removes_every_sentinel(self, syllabizer):
        assert syllabizer.reassemble(["$ος", "λ$", "$"]) == "λος"

    def test_empty(self, syllabizer):
        assert syllabizer.reassemble([]) == ""

    def test_none_raises(self, syllabizer):
        with pytest.raises(MissingArgumentError):
            syllabizer.reassemble(None)

    @pytest.mark.parametrize("word", SAMPLE_WORDS)
    def test_round_trip(self, any_mode_syllabizer, word):
        normalized = normalize_word(word)
        assert any_mode_syllabizer.reassemble(any_mode_syllabizer.segment(normalized)) == normalized

    @pytest.mark.parametrize("word", ["λόγος", "ἄνθρωπος", "ΨΥΧΗ"])
    def test_segment_then_reassemble_normalizes(self, syllabizer, word):
        assert syllabizer.reassemble(syllabizer.segment(word)) == normalize_word(word)

    @pytest.mark.parametrize("word", ["κ\u1fb1\u0301λος", "λ\u1f62\u0301γος"])
    def test_round_trip_stacked_accents(self, any_mode_syllabizer, word):
        normalized = normalize_word(word)
        assert any_mode_syllabizer.reassemble(any_mode_syllabizer.segment(normalized)) == normalized


# =============================================================================
# Errors and Configuration
# =============================================================================


class TestErrors:
    """Test missing arguments and unsupported modes."""

    def test_none_word(self, syllabizer):
        with pytest.raises(MissingArgumentError):
            syllabizer.segment(None)

    def test_unsupported_mode(self):
        syllabizer = Syllabizer("syllables_to_words")
        with pytest.raises(UnsupportedModeError, match="syllables_to_words") as info:
            syllabizer.segment("λόγος")
        assert info.value.mode == "syllables_to_words"

    def test_unsupported_mode_set_later(self, syllabizer):
        syllabizer.mode = None
        with pytest.raises(UnsupportedModeError):
            syllabizer.segment("λόγος")

    def test_unsupported_mode_even_for_punctuation(self):
        with pytest.raises(UnsupportedModeError):
            Syllabizer("bogus").segment(";")

    def test_unsupported_mode_is_value_error(self):
        with pytest.raises(ValueError):
            Syllabizer("bogus").segment("λόγος")


class TestSyllabizer:
    """Test the Syllabizer facade."""

    def test_language(self):
        assert Syllabizer.LANGUAGE_KEY == "grc"
        assert Syllabizer.LANGUAGE_NAME == "Ἑλληνικά"

    def test_repr(self):
        assert repr(Syllabizer()) == "Syllabizer(mode='vowels_to_consonants')"

    def test_injected_casefold(self):
        syllabizer = Syllabizer(casefold=lambda s: s)
        assert list(syllabizer.segment("Λόγος")) == ["ος", "ογ", "Λ", "$"]

    def test_normalize(self, syllabizer):
        assert syllabizer.normalize("Λόγος") == "λογος"

    def test_get_distance(self, syllabizer):
        command = syllabizer.get_distance("λος", "λον")
        assert command.kind is EditKind.REPLACE_CONSONANTS
        assert command.apply("λος") == "λον"

    def test_concurrent_segmentation(self, syllabizer):
        words = SAMPLE_WORDS * 20
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(syllabizer.segment, words))
        assert results == [syllabizer.segment(word) for word in words]


class TestSyllabicWord:
    """Test the SyllabicWord value type."""

    def test_sequence_protocol(self):
        word = SyllabicWord(["ος", "ογ", "λ", "$"])
        assert len(word) == 4
        assert word[0] == "ος"
        assert list(word) == ["ος", "ογ", "λ", "$"]
        assert word.syllables == ("ος", "ογ", "λ", "$")

    def test_immutable(self):
        word = SyllabicWord(["λ", "$"])
        with pytest.raises(dataclasses.FrozenInstanceError):
            word.syllables = ("x",)

    def test_value_equality(self):
        assert SyllabicWord(["λ", "$"]) == SyllabicWord(("λ", "$"))
        assert hash(SyllabicWord(["λ", "$"])) == hash(SyllabicWord(("λ", "$")))

    def test_fresh_result_per_call(self, syllabizer):
        assert syllabizer.segment("λόγος") is not syllabizer.segment("λόγος")

    def test_sentinel_constant(self):
        assert SyllabicWord.SENTINEL == "$"


class TestModuleFunctions:
    """Test the module-level convenience functions."""

    def test_segment(self):
        assert list(segment("λόγος")) == ["ος", "ογ", "λ", "$"]

    def test_segment_with_mode(self):
        assert list(segment("λόγος", SyllabizerMode.CONSONANTS_TO_VOWELS)) == [
            "ς",
            "γο",
            "λο",
            "$",
        ]

    def test_reassemble(self):
        assert reassemble(segment("ἄνθρωπος")) == "ἀνθρωπος"
