"""
Veracity — Statement Credibility Analysis Engine

Deterministic, rule-based scoring of free-text statements (witness
accounts) for hesitation, stress, emotional tone, consistency, detail
richness, and deception risk. Closed-form arithmetic over word and
sentence statistics. No models, no network, no stored state.

Public API:
  - preprocess:            Linguistic features from raw text
  - extract_psychological: Psychological scores from linguistic features
  - calculate_credibility: Composite credibility score + confidence label
  - identify_risks:        Threshold-based risk flags + stress level
  - recommend:             Interviewer guidance strings
  - analyze_realtime:      Short-form status for a growing transcript
  - analyze_statement:     The whole pipeline in one call
  - Lexicon:               Injectable word lists

Usage:
    from veracity import analyze_statement, analyze_realtime
    result = analyze_statement("I saw him yesterday at the park.", 4)
    status = analyze_realtime(partial_transcript, elapsed_seconds)
"""

__version__ = "1.0.0"

from veracity.lexicon import Lexicon, DEFAULT_LEXICON
from veracity.preprocessing import LinguisticFeatures, preprocess
from veracity.psychological import PsychologicalFeatures, extract_psychological
from veracity.credibility import (
    CredibilityMetrics,
    SpeechRate,
    calculate_credibility,
    score_band,
    speech_rate,
)
from veracity.risk import RiskFactors, identify_risks
from veracity.recommendations import recommend
from veracity.analyzer import (
    ENGINE_VERSION,
    StatementAnalysis,
    analyze_statement,
    build_report,
)
from veracity.realtime import RealTimeMetrics, RealTimeStatus, analyze_realtime

__all__ = [
    "Lexicon",
    "DEFAULT_LEXICON",
    "LinguisticFeatures",
    "preprocess",
    "PsychologicalFeatures",
    "extract_psychological",
    "CredibilityMetrics",
    "SpeechRate",
    "calculate_credibility",
    "score_band",
    "speech_rate",
    "RiskFactors",
    "identify_risks",
    "recommend",
    "ENGINE_VERSION",
    "StatementAnalysis",
    "analyze_statement",
    "build_report",
    "RealTimeMetrics",
    "RealTimeStatus",
    "analyze_realtime",
]
