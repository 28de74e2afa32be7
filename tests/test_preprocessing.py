"""
Tests for the Lexical Preprocessor — the leaf every score depends on.
"""

import pytest

from veracity.lexicon import Lexicon
from veracity.preprocessing import (
    LinguisticFeatures,
    calculate_complexity,
    count_repetitions,
    count_syllables,
    preprocess,
    split_sentences,
    tokenize_words,
)


class TestEmptyInput:
    """Empty text is a documented zero state, not an error."""

    def test_empty_string(self):
        result = preprocess("")
        assert result == LinguisticFeatures()
        assert result.word_count == 0
        assert result.sentence_count == 0
        assert result.filler_words == ()
        assert result.contradiction_indicators == ()

    def test_whitespace_only(self):
        result = preprocess("   \n\t  ")
        assert result.word_count == 0
        assert result.hesitation_count == 0
        assert result.complexity_score == 0

    def test_non_string_rejected(self):
        with pytest.raises(TypeError, match="text must be a str"):
            preprocess(None)


class TestTokenization:

    def test_words_lowercased_and_split_on_whitespace(self):
        assert tokenize_words("I  saw\tHim\n") == ["i", "saw", "him"]

    def test_sentences_split_on_punctuation_runs(self):
        assert len(split_sentences("Hello there! How are you?? Fine...")) == 3

    def test_blank_sentences_dropped(self):
        assert split_sentences("...!!") == []

    def test_reference_statement_counts(self):
        result = preprocess("I am certain I saw him yesterday at the park.")
        assert result.word_count == 10
        assert result.sentence_count == 1
        assert result.avg_words_per_sentence == 10

    def test_sentence_count_never_below_one(self):
        result = preprocess("...")
        assert result.word_count == 1
        assert result.sentence_count == 1

    def test_average_words_per_sentence(self):
        result = preprocess("One two three. Four five six.")
        assert result.sentence_count == 2
        assert result.avg_words_per_sentence == 3


class TestSyllables:

    def test_short_words_are_one_syllable(self):
        assert count_syllables("the") == 1
        assert count_syllables("ago") == 1

    def test_vowel_groups(self):
        assert count_syllables("banana") == 3
        assert count_syllables("yesterday") == 3

    def test_silent_e(self):
        assert count_syllables("table") == 1
        assert count_syllables("remember") == 3

    def test_floor_at_one(self):
        assert count_syllables("queue") == 1
        assert count_syllables("rhythm") == 1
        assert count_syllables("pfft") == 1


class TestReadability:

    def test_simple_sentence(self):
        result = preprocess("The cat sat.")
        assert result.avg_syllables_per_word == 1
        assert result.readability_score == pytest.approx(119.19)

    def test_not_clamped(self):
        # Long polysyllabic run-on pushes the score below zero
        text = " ".join(["incomprehensibility"] * 40)
        assert preprocess(text).readability_score < 0


class TestCategoryMatching:
    """Substring containment, not whole-word matching."""

    def test_hesitation_markers(self):
        result = preprocess("um I was uh outside")
        assert result.hesitation_markers == ("um", "uh")
        assert result.hesitation_count == 2

    def test_substring_over_match(self):
        result = preprocess("It was likely summer")
        assert "likely" in result.filler_words
        assert "summer" in result.filler_words
        assert "summer" in result.hesitation_markers

    def test_multi_word_entries_never_match_single_tokens(self):
        result = preprocess("you know what I mean")
        assert "you" not in result.filler_words
        assert "know" not in result.filler_words

    def test_emotional_words(self):
        result = preprocess("I was scared and very nervous")
        assert result.emotional_words == ("scared", "nervous")
        assert result.emotional_word_count == 2

    def test_contradiction_indicators(self):
        result = preprocess("I went but then actually no")
        assert result.contradiction_indicators == ("but", "actually", "no")
        assert result.contradiction_count == 3

    def test_case_insensitive(self):
        assert preprocess("UM").hesitation_count == 1

    def test_counts_equal_list_lengths(self):
        result = preprocess(
            "Um, well, I basically saw, uh, the angry man... but I was sorry."
        )
        assert result.filler_word_count == len(result.filler_words)
        assert result.hesitation_count == len(result.hesitation_markers)
        assert result.emotional_word_count == len(result.emotional_words)
        assert result.contradiction_count == len(result.contradiction_indicators)

    def test_injected_lexicon(self):
        lexicon = Lexicon(filler=("zebra",))
        result = preprocess("zebra zebras horse um", lexicon=lexicon)
        assert result.filler_words == ("zebra", "zebras")
        # Other categories keep their defaults
        assert result.hesitation_markers == ("um",)


class TestComplexity:

    def test_simple_sentence(self):
        assert preprocess("The cat sat.").complexity_score == pytest.approx(24.17)

    def test_penalties_capped(self):
        # Fillers and hesitations each cost at most 12.5 points
        assert calculate_complexity(20, 3, 100, 100) == 75

    def test_clamped_at_zero(self):
        assert calculate_complexity(0, 0, 10, 10) == 0

    def test_clamped_at_hundred(self):
        assert calculate_complexity(100, 10, 0, 0) == 100


class TestRepetitions:

    def test_each_extra_occurrence_counts(self):
        assert count_repetitions(["park", "park", "park"]) == 2

    def test_short_words_ignored(self):
        assert count_repetitions(["the", "the", "the", "car", "car"]) == 0

    def test_distinct_words(self):
        assert count_repetitions(["house", "house", "tree", "garden"]) == 1

    def test_through_preprocess(self):
        result = preprocess("The house the house the house was dark.")
        assert result.repetition_count == 2
