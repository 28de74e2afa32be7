"""
API Schemas — Request and Response Models

Pydantic models for the Veracity API. Response models mirror the
report produced by veracity.analyzer.build_report.
"""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field

from veracity.config import settings


# ============================================================
# ANALYZE
# ============================================================

class AnalyzeRequest(BaseModel):
    """POST /analyze and POST /analyze/realtime request body."""
    text: str = Field(..., max_length=settings.MAX_TEXT_LENGTH,
                      description="Statement transcript. May be empty.")
    duration_seconds: float = Field(0.0, ge=0, le=settings.MAX_DURATION_SECONDS,
                                    description="Elapsed recording time in seconds.")

    model_config = {"json_schema_extra": {"examples": [
        {"text": "I saw him yesterday at the park before the rain started.",
         "duration_seconds": 6},
    ]}}


class AnalyzeBatchRequest(BaseModel):
    """POST /analyze/batch request body."""
    items: list[AnalyzeRequest] = Field(..., min_length=1,
                                        max_length=settings.MAX_BATCH_ITEMS)


class LinguisticResponse(BaseModel):
    word_count: int
    sentence_count: int
    avg_words_per_sentence: float
    avg_syllables_per_word: float
    readability_score: float
    filler_words: list[str]
    filler_word_count: int
    hesitation_markers: list[str]
    hesitation_count: int
    emotional_words: list[str]
    emotional_word_count: int
    complexity_score: float
    repetition_count: int
    contradiction_indicators: list[str]
    contradiction_count: int


class PsychologicalResponse(BaseModel):
    coherence_score: float
    emotional_stability: float
    certainty_level: float
    stress_indicators: float
    deception_risk: float
    time_reference_count: int
    detail_level: float
    self_reference_count: int
    certainty_count: int
    uncertainty_count: int


class CredibilityResponse(BaseModel):
    overall_score: int
    consistency_score: int
    detail_score: int
    emotional_authenticity_score: int
    linguistic_coherence_score: int
    confidence_level: str


class RiskResponse(BaseModel):
    deception_indicators: list[str]
    stress_level: str
    inconsistency_flags: list[str]
    credibility_flags: list[str]


class SpeechRateResponse(BaseModel):
    words_per_minute: float
    status: str


class AnalyzeResponse(BaseModel):
    """POST /analyze response body."""
    linguistic: LinguisticResponse
    psychological: PsychologicalResponse
    credibility: CredibilityResponse
    risks: RiskResponse
    recommendations: list[str]
    score_band: str
    speech_rate: Optional[SpeechRateResponse] = None
    engine_version: str


class AnalyzeBatchResponse(BaseModel):
    """POST /analyze/batch response body."""
    results: list[AnalyzeResponse]
    total: int


# ============================================================
# REAL-TIME
# ============================================================

class RealTimeMetricsResponse(BaseModel):
    coherence: float
    detail: float
    stress: float


class RealTimeResponse(BaseModel):
    """POST /analyze/realtime response body."""
    status: str
    alerts: list[str]
    metrics: RealTimeMetricsResponse
    speech_rate: SpeechRateResponse


# ============================================================
# LEXICON / HEALTH
# ============================================================

class LexiconResponse(BaseModel):
    filler: list[str]
    hesitation: list[str]
    emotional: list[str]
    contradiction: list[str]
    time: list[str]
    self_reference: list[str]
    certainty: list[str]
    uncertainty: list[str]


class HealthResponse(BaseModel):
    status: str
    version: str
    engine_version: str
