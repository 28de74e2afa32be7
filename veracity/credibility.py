"""
Credibility Metrics Calculator

Computes a 0-100 composite credibility score from linguistic and
psychological features plus the recording duration.
Separated from the extractors for single-responsibility.

Overall = weighted blend:
  consistency              x 0.25
  detail                   x 0.20
  emotional authenticity   x 0.25
  linguistic coherence     x 0.20
  (100 - deception risk)   x 0.10

Confidence:
  High    overall >= 75 and certainty >= 60   (checked first)
  Low     overall <= 50 or deception risk >= 70
  Medium  otherwise

All returned scores are rounded half-up to integers.
"""

from __future__ import annotations

from dataclasses import dataclass

from veracity.numeric import ratio, round_half_up, round_score
from veracity.preprocessing import LinguisticFeatures
from veracity.psychological import PsychologicalFeatures
from veracity.validation import require_duration

# Baseline speaking rate used to size the expected statement
WORDS_PER_SECOND = 2
MIN_EXPECTED_WORDS = 50

# Reported speech rate ceiling; near-zero durations would otherwise overflow
MAX_WORDS_PER_MINUTE = 10_000.0

OVERALL_WEIGHTS = {
    "consistency": 0.25,
    "detail": 0.20,
    "emotional_authenticity": 0.25,
    "linguistic_coherence": 0.20,
    "truthfulness": 0.10,   # Applied to (100 - deception_risk)
}


@dataclass(frozen=True)
class CredibilityMetrics:
    overall_score: int
    consistency_score: int
    detail_score: int
    emotional_authenticity_score: int
    linguistic_coherence_score: int
    confidence_level: str   # "High" | "Medium" | "Low"


@dataclass(frozen=True)
class SpeechRate:
    words_per_minute: float
    status: str             # "Slow" | "Normal" | "Fast" | "Unknown"


def calculate_credibility(
    linguistic: LinguisticFeatures,
    psychological: PsychologicalFeatures,
    duration_seconds: float,
) -> CredibilityMetrics:
    """
    Blend linguistic and psychological features into credibility metrics.

    A zero-word statement scores 0 across the board with Low confidence.

    Raises:
        TypeError / ValueError: duration_seconds is not a non-negative number.
    """
    duration_seconds = require_duration(duration_seconds)
    n = linguistic.word_count
    if n == 0:
        return CredibilityMetrics(
            overall_score=0,
            consistency_score=0,
            detail_score=0,
            emotional_authenticity_score=0,
            linguistic_coherence_score=0,
            confidence_level="Low",
        )

    # Consistency: repetitions cost 2x, contradictions 5x their percentage
    consistency = max(
        0.0,
        100
        - ratio(linguistic.repetition_count, n) * 100 * 2
        - ratio(linguistic.contradiction_count, n) * 100 * 5,
    )

    # Detail: length relative to what the duration should have produced
    expected_words = max(MIN_EXPECTED_WORDS, duration_seconds * WORDS_PER_SECOND)
    length_ratio = min(n / expected_words, 2)
    detail = min(100.0, length_ratio * 30 + psychological.detail_level * 0.7)

    emotional_authenticity = min(
        100.0,
        psychological.emotional_stability * 0.6
        + min(ratio(linguistic.emotional_word_count, n) * 200, 40),
    )

    coherence = psychological.coherence_score

    overall = (
        consistency * OVERALL_WEIGHTS["consistency"]
        + detail * OVERALL_WEIGHTS["detail"]
        + emotional_authenticity * OVERALL_WEIGHTS["emotional_authenticity"]
        + coherence * OVERALL_WEIGHTS["linguistic_coherence"]
        + (100 - psychological.deception_risk) * OVERALL_WEIGHTS["truthfulness"]
    )

    return CredibilityMetrics(
        overall_score=round_score(overall),
        consistency_score=round_score(consistency),
        detail_score=round_score(detail),
        emotional_authenticity_score=round_score(emotional_authenticity),
        linguistic_coherence_score=round_score(coherence),
        confidence_level=classify_confidence(
            overall, psychological.certainty_level, psychological.deception_risk,
        ),
    )


def classify_confidence(
    overall_score: float, certainty_level: float, deception_risk: float,
) -> str:
    """High is evaluated before Low, so High wins when both could apply."""
    if overall_score >= 75 and certainty_level >= 60:
        return "High"
    if overall_score <= 50 or deception_risk >= 70:
        return "Low"
    return "Medium"


def score_band(score: float) -> str:
    """Dashboard band for a 0-100 score: high (>= 80), moderate (>= 60), low."""
    if score >= 80:
        return "high"
    if score >= 60:
        return "moderate"
    return "low"


def speech_rate(word_count: int, duration_seconds: float) -> SpeechRate:
    """
    Words per minute over the recording, with a pace label.

    Conversational testimony sits between 120 and 180 wpm; outside that
    range it is labelled Slow or Fast. Zero duration gives Unknown.
    """
    duration_seconds = require_duration(duration_seconds)
    if duration_seconds == 0:
        return SpeechRate(words_per_minute=0.0, status="Unknown")

    wpm = min(word_count / duration_seconds * 60, MAX_WORDS_PER_MINUTE)
    if wpm < 120:
        status = "Slow"
    elif wpm > 180:
        status = "Fast"
    else:
        status = "Normal"
    return SpeechRate(words_per_minute=round_half_up(wpm, 2), status=status)
