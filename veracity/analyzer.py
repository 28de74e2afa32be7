"""
Analyzer — Pipeline Orchestrator

Runs the full statement analysis, leaves first:

  text + duration
    -> preprocess            (linguistic features)
    -> extract_psychological (psychological features)
    -> calculate_credibility (composite score + confidence)
    -> identify_risks        (threshold flags + stress level)
    -> recommend             (interviewer guidance)

Data flows one way; no stage mutates another's output. The orchestrator
validates inputs once at the boundary and stamps the engine version on
every report.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Optional

from veracity.credibility import (
    CredibilityMetrics,
    SpeechRate,
    calculate_credibility,
    score_band,
    speech_rate,
)
from veracity.lexicon import Lexicon
from veracity.preprocessing import LinguisticFeatures, preprocess
from veracity.psychological import PsychologicalFeatures, extract_psychological
from veracity.recommendations import recommend
from veracity.risk import RiskFactors, identify_risks
from veracity.validation import require_duration, require_text

logger = logging.getLogger(__name__)

# --- Engine Version (stamped on every report) ---
ENGINE_VERSION = "1.0.0"


@dataclass(frozen=True)
class StatementAnalysis:
    """Everything the pipeline derives from one statement."""
    linguistic: LinguisticFeatures
    psychological: PsychologicalFeatures
    credibility: CredibilityMetrics
    risks: RiskFactors
    recommendations: tuple[str, ...] = ()
    score_band: str = "low"
    speech_rate: Optional[SpeechRate] = None
    engine_version: str = ENGINE_VERSION


def analyze_statement(
    text: str,
    duration_seconds: float,
    lexicon: Optional[Lexicon] = None,
) -> StatementAnalysis:
    """
    Full analysis of a statement recorded over `duration_seconds`.

    Args:
        text: The transcript. Empty text is valid and yields zero features.
        duration_seconds: Elapsed recording time, non-negative.
        lexicon: Alternate word lists; defaults to DEFAULT_LEXICON.

    Raises:
        TypeError: text is not a str, or duration is not a number.
        ValueError: duration is negative or not finite.
    """
    require_text(text)
    duration_seconds = require_duration(duration_seconds)

    linguistic = preprocess(text, lexicon=lexicon)
    psychological = extract_psychological(text, linguistic, lexicon=lexicon)
    credibility = calculate_credibility(linguistic, psychological, duration_seconds)
    risks = identify_risks(linguistic, psychological, text)
    recommendations = recommend(credibility, risks, linguistic)

    logger.debug(
        "Statement analysed: score=%d confidence=%s",
        credibility.overall_score, credibility.confidence_level,
        extra={
            "word_count": linguistic.word_count,
            "overall_score": credibility.overall_score,
            "confidence_level": credibility.confidence_level,
        },
    )

    return StatementAnalysis(
        linguistic=linguistic,
        psychological=psychological,
        credibility=credibility,
        risks=risks,
        recommendations=tuple(recommendations),
        score_band=score_band(credibility.overall_score),
        speech_rate=speech_rate(linguistic.word_count, duration_seconds),
    )


# ============================================================
# REPORT BUILDER
# ============================================================

def build_report(analysis: StatementAnalysis) -> dict:
    """Flatten an analysis into the JSON-ready report shape."""
    linguistic = asdict(analysis.linguistic)
    linguistic["contradiction_count"] = analysis.linguistic.contradiction_count

    return {
        "linguistic": linguistic,
        "psychological": asdict(analysis.psychological),
        "credibility": asdict(analysis.credibility),
        "risks": asdict(analysis.risks),
        "recommendations": list(analysis.recommendations),
        "score_band": analysis.score_band,
        "speech_rate": asdict(analysis.speech_rate) if analysis.speech_rate else None,
        "engine_version": analysis.engine_version,
    }
