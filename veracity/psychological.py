"""
Psychological Feature Extractor

Derives higher-level scores from the linguistic statistics plus a second
pass over the raw tokens (time, self, certainty and uncertainty words).

Scores (all 0-100, rounded half-up to 2 decimals):
  coherence_score     — 100 minus filler/hesitation/repetition penalties
  emotional_stability — penalised by emotional and hesitation density
  certainty_level     — 50 baseline, shifted by certainty vs uncertainty
  stress_indicators   — filler + hesitation + half-weighted repetition
  deception_risk      — hesitation, contradiction, overconfidence, simplicity
  detail_level        — length, time references, complexity

A zero-word statement short-circuits to all-zero features.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from veracity.lexicon import DEFAULT_LEXICON, Lexicon, match_words
from veracity.numeric import clamp, ratio, round_half_up
from veracity.preprocessing import LinguisticFeatures, tokenize_words
from veracity.validation import require_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PsychologicalFeatures:
    coherence_score: float = 0.0
    emotional_stability: float = 0.0
    certainty_level: float = 0.0
    stress_indicators: float = 0.0
    deception_risk: float = 0.0
    time_reference_count: int = 0
    detail_level: float = 0.0          # Typically <= 100; not clamped
    self_reference_count: int = 0
    certainty_count: int = 0
    uncertainty_count: int = 0


def calculate_coherence(features: LinguisticFeatures) -> float:
    n = features.word_count
    filler_penalty = min(ratio(features.filler_word_count, n) * 100, 50)
    hesitation_penalty = min(ratio(features.hesitation_count, n) * 100, 30)
    repetition_penalty = min(ratio(features.repetition_count, n) * 100, 20)
    return max(0.0, 100 - filler_penalty - hesitation_penalty - repetition_penalty)


def calculate_emotional_stability(features: LinguisticFeatures) -> float:
    emotional_density = ratio(features.emotional_word_count, features.word_count)
    hesitation_density = ratio(features.hesitation_count, features.word_count)
    return clamp(100 - emotional_density * 200 - hesitation_density * 300)


def calculate_certainty(
    certainty_count: int, uncertainty_count: int, total_words: int,
) -> float:
    certainty_ratio = ratio(certainty_count, total_words)
    uncertainty_ratio = ratio(uncertainty_count, total_words)
    return clamp((certainty_ratio - uncertainty_ratio) * 100 + 50)


def calculate_stress(features: LinguisticFeatures) -> float:
    n = features.word_count
    filler_stress = ratio(features.filler_word_count, n) * 100
    hesitation_stress = ratio(features.hesitation_count, n) * 100
    repetition_stress = ratio(features.repetition_count, n) * 50
    return clamp(filler_stress + hesitation_stress + repetition_stress)


def calculate_deception_risk(
    features: LinguisticFeatures, certainty_level: float,
) -> float:
    n = features.word_count
    hesitation_risk = ratio(features.hesitation_count, n) * 100
    contradiction_risk = ratio(features.contradiction_count, n) * 200
    # Overconfidence and overly simple language both read as rehearsed
    certainty_risk = 20 if certainty_level > 80 else 0
    complexity_risk = 15 if features.complexity_score < 30 else 0
    return clamp(hesitation_risk + contradiction_risk + certainty_risk + complexity_risk)


def calculate_detail_level(
    features: LinguisticFeatures, time_references: int,
) -> float:
    length_score = min(features.word_count / 100, 1) * 40
    time_score = min(time_references / 5, 1) * 30
    return length_score + time_score + features.complexity_score * 0.3


def extract_psychological(
    text: str,
    linguistic: LinguisticFeatures,
    lexicon: Optional[Lexicon] = None,
) -> PsychologicalFeatures:
    """
    Extract psychological features from a statement.

    Args:
        text: The raw statement (same text given to preprocess()).
        linguistic: Output of preprocess() for that text.
        lexicon: Alternate word lists; defaults to DEFAULT_LEXICON.

    Raises:
        TypeError: text is not a str.
    """
    require_text(text)
    if linguistic.word_count == 0:
        return PsychologicalFeatures()

    lexicon = lexicon or DEFAULT_LEXICON
    words = tokenize_words(text)

    time_references = len(match_words(words, lexicon.time))
    self_references = sum(1 for w in words if w in lexicon.self_reference)
    certainty_count = len(match_words(words, lexicon.certainty))
    uncertainty_count = len(match_words(words, lexicon.uncertainty))

    certainty_level = calculate_certainty(
        certainty_count, uncertainty_count, len(words),
    )

    result = PsychologicalFeatures(
        coherence_score=round_half_up(calculate_coherence(linguistic), 2),
        emotional_stability=round_half_up(
            calculate_emotional_stability(linguistic), 2,
        ),
        certainty_level=round_half_up(certainty_level, 2),
        stress_indicators=round_half_up(calculate_stress(linguistic), 2),
        deception_risk=round_half_up(
            calculate_deception_risk(linguistic, certainty_level), 2,
        ),
        time_reference_count=time_references,
        detail_level=round_half_up(
            calculate_detail_level(linguistic, time_references), 2,
        ),
        self_reference_count=self_references,
        certainty_count=certainty_count,
        uncertainty_count=uncertainty_count,
    )
    logger.debug(
        "Psychological features: coherence=%s deception_risk=%s",
        result.coherence_score, result.deception_risk,
    )
    return result
