"""
Real-Time Monitor

Called repeatedly on a growing transcript. Every call recomputes the
full pipeline from scratch; nothing is remembered between calls, so the
result depends only on (text, duration).

Status:
  good        no alerts
  warning     1-2 alerts
  concerning  3 or more alerts
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from veracity.analyzer import analyze_statement
from veracity.credibility import SpeechRate, speech_rate
from veracity.lexicon import Lexicon
from veracity.validation import require_duration, require_text

logger = logging.getLogger(__name__)

ALERT_DECEPTION = "Potential deception indicators detected"
ALERT_STRESS = "High stress levels detected"
ALERT_CONTRADICTION = "Contradictory statements identified"
ALERT_CONSISTENCY = "Consistency issues emerging"


@dataclass(frozen=True)
class RealTimeMetrics:
    coherence: float = 100.0
    detail: float = 0.0
    stress: float = 0.0


@dataclass(frozen=True)
class RealTimeStatus:
    status: str = "good"        # "good" | "warning" | "concerning"
    alerts: tuple[str, ...] = ()
    metrics: RealTimeMetrics = field(default_factory=RealTimeMetrics)
    speech_rate: SpeechRate = field(
        default_factory=lambda: SpeechRate(words_per_minute=0.0, status="Unknown"),
    )


def classify_status(alert_count: int) -> str:
    if alert_count > 2:
        return "concerning"
    if alert_count > 0:
        return "warning"
    return "good"


def analyze_realtime(
    text: str,
    duration_seconds: float,
    lexicon: Optional[Lexicon] = None,
) -> RealTimeStatus:
    """
    Short-form status for an in-progress transcript.

    Raises:
        TypeError / ValueError: invalid text or duration.
    """
    require_text(text)
    duration_seconds = require_duration(duration_seconds)
    if not text.strip():
        return RealTimeStatus(speech_rate=speech_rate(0, duration_seconds))

    analysis = analyze_statement(text, duration_seconds, lexicon=lexicon)
    linguistic = analysis.linguistic
    psychological = analysis.psychological
    credibility = analysis.credibility

    alerts: list[str] = []
    if psychological.deception_risk > 70:
        alerts.append(ALERT_DECEPTION)
    if psychological.stress_indicators > 80:
        alerts.append(ALERT_STRESS)
    if linguistic.contradiction_count > 0:
        alerts.append(ALERT_CONTRADICTION)
    if credibility.consistency_score < 40:
        alerts.append(ALERT_CONSISTENCY)

    status = classify_status(len(alerts))
    logger.debug(
        "Real-time status %s with %d alert(s)", status, len(alerts),
        extra={"status": status, "alerts_count": len(alerts),
               "word_count": linguistic.word_count},
    )
    return RealTimeStatus(
        status=status,
        alerts=tuple(alerts),
        metrics=RealTimeMetrics(
            coherence=psychological.coherence_score,
            detail=credibility.detail_score,
            stress=psychological.stress_indicators,
        ),
        speech_rate=analysis.speech_rate,
    )
