"""
Lexical Preprocessor — Leaf of the Pipeline

Turns a raw statement into base linguistic statistics:
  1. Tokenization (lower-cased whitespace words, punctuation-split sentences)
  2. Syllable estimate and a Flesch-style readability score
  3. Category word lists (filler, hesitation, emotional, contradiction)
  4. Complexity score and repetition count

Deterministic. No I/O. Every numeric field except counts is rounded
half-up to 2 decimals.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from veracity.lexicon import DEFAULT_LEXICON, Lexicon, match_words
from veracity.numeric import clamp, round_half_up
from veracity.validation import require_text

logger = logging.getLogger(__name__)

_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_VOWEL_GROUP = re.compile(r"[aeiouy]+")

# Words at or below this length are never counted as repetitions
_REPETITION_MIN_LENGTH = 4


@dataclass(frozen=True)
class LinguisticFeatures:
    """Base statistics for one statement. Recomputed per call."""
    word_count: int = 0
    sentence_count: int = 0
    avg_words_per_sentence: float = 0.0
    avg_syllables_per_word: float = 0.0
    readability_score: float = 0.0      # Not clamped; may be negative or > 100
    filler_words: tuple[str, ...] = ()
    filler_word_count: int = 0
    hesitation_markers: tuple[str, ...] = ()
    hesitation_count: int = 0
    emotional_words: tuple[str, ...] = ()
    emotional_word_count: int = 0
    complexity_score: float = 0.0       # 0 to 100
    repetition_count: int = 0
    contradiction_indicators: tuple[str, ...] = ()

    @property
    def contradiction_count(self) -> int:
        return len(self.contradiction_indicators)


def tokenize_words(text: str) -> list[str]:
    """Lower-case and split on whitespace runs. Empty tokens are dropped."""
    return text.lower().split()


def split_sentences(text: str) -> list[str]:
    """Split on runs of . ! ? and drop blank candidates."""
    return [s for s in _SENTENCE_SPLIT.split(text) if s.strip()]


def count_syllables(word: str) -> int:
    """
    Estimate syllables by counting vowel groups.

    Short words (three characters or fewer) are one syllable. A trailing
    'e' is treated as silent. Never returns less than 1.
    """
    word = word.lower()
    if len(word) <= 3:
        return 1
    syllables = len(_VOWEL_GROUP.findall(word)) or 1
    if word.endswith("e"):
        syllables -= 1
    return max(syllables, 1)


def count_repetitions(words: list[str]) -> int:
    """
    Count every occurrence of a word (longer than three characters)
    after its first. A word seen n times contributes n - 1.
    """
    seen: dict[str, int] = {}
    repetitions = 0
    for word in words:
        if len(word) < _REPETITION_MIN_LENGTH:
            continue
        seen[word] = seen.get(word, 0) + 1
        if seen[word] > 1:
            repetitions += 1
    return repetitions


def calculate_complexity(
    avg_words_per_sentence: float,
    avg_syllables_per_word: float,
    filler_count: int,
    hesitation_count: int,
) -> float:
    """
    Complexity on a 0-100 scale.

    Sentence length (normalised by 20) and word length (normalised by 3)
    each contribute up to 50. Fillers and hesitations subtract up to 25.
    """
    sentence_complexity = min(avg_words_per_sentence / 20, 1)
    word_complexity = min(avg_syllables_per_word / 3, 1)
    filler_penalty = min(filler_count / 10, 0.5)
    hesitation_penalty = min(hesitation_count / 5, 0.5)

    complexity = (
        (sentence_complexity + word_complexity) * 50
        - (filler_penalty + hesitation_penalty) * 25
    )
    return clamp(complexity)


def preprocess(
    text: str, lexicon: Optional[Lexicon] = None,
) -> LinguisticFeatures:
    """
    Compute linguistic features for a statement.

    Empty or whitespace-only text returns the all-zero LinguisticFeatures;
    it is not an error.

    Raises:
        TypeError: text is not a str.
    """
    require_text(text)
    lexicon = lexicon or DEFAULT_LEXICON

    words = tokenize_words(text)
    if not words:
        return LinguisticFeatures()

    word_count = len(words)
    sentence_count = max(len(split_sentences(text)), 1)
    avg_words_per_sentence = word_count / sentence_count
    avg_syllables_per_word = sum(count_syllables(w) for w in words) / word_count

    readability = (
        206.835
        - 1.015 * avg_words_per_sentence
        - 84.6 * avg_syllables_per_word
    )

    fillers = match_words(words, lexicon.filler)
    hesitations = match_words(words, lexicon.hesitation)
    emotional = match_words(words, lexicon.emotional)
    contradictions = match_words(words, lexicon.contradiction)

    complexity = calculate_complexity(
        avg_words_per_sentence,
        avg_syllables_per_word,
        len(fillers),
        len(hesitations),
    )

    features = LinguisticFeatures(
        word_count=word_count,
        sentence_count=sentence_count,
        avg_words_per_sentence=round_half_up(avg_words_per_sentence, 2),
        avg_syllables_per_word=round_half_up(avg_syllables_per_word, 2),
        readability_score=round_half_up(readability, 2),
        filler_words=tuple(fillers),
        filler_word_count=len(fillers),
        hesitation_markers=tuple(hesitations),
        hesitation_count=len(hesitations),
        emotional_words=tuple(emotional),
        emotional_word_count=len(emotional),
        complexity_score=round_half_up(complexity, 2),
        repetition_count=count_repetitions(words),
        contradiction_indicators=tuple(contradictions),
    )
    logger.debug(
        "Preprocessed %d words in %d sentences", word_count, sentence_count,
    )
    return features
