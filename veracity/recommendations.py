"""
Recommendation Generator

Maps credibility metrics and risk factors to advisory text for the
interviewer. Order-preserving; each matched rule appends one or two
fixed strings. Never raises.
"""

from __future__ import annotations

from veracity.credibility import CredibilityMetrics
from veracity.preprocessing import LinguisticFeatures
from veracity.risk import RiskFactors

DEFAULT_RECOMMENDATIONS = (
    "Statement appears credible with no major red flags",
    "Standard verification procedures recommended",
)


def recommend(
    credibility: CredibilityMetrics,
    risks: RiskFactors,
    linguistic: LinguisticFeatures,
) -> list[str]:
    """Return interviewer guidance for one analysed statement."""
    recommendations: list[str] = []

    if credibility.overall_score < 50:
        recommendations.append("Consider additional verification of statement details")
        recommendations.append("Cross-reference with other evidence or witness statements")
    elif credibility.overall_score > 80:
        recommendations.append("Statement shows high credibility indicators")

    if risks.stress_level == "High":
        recommendations.append("High stress detected - consider interviewing conditions")
        recommendations.append("Allow time for witness to compose themselves")

    if len(risks.deception_indicators) > 2:
        recommendations.append("Multiple deception indicators - requires careful investigation")
        recommendations.append("Consider follow-up questions on specific details")

    if credibility.detail_score < 40:
        recommendations.append("Statement lacks sufficient detail - ask for elaboration")
        recommendations.append("Request specific examples and timeline information")

    if credibility.consistency_score < 50:
        recommendations.append("Consistency issues detected - clarify contradictions")
        recommendations.append("Focus on timeline and sequence of events")

    if linguistic.filler_word_count > linguistic.word_count * 0.1:
        recommendations.append("High nervous speech patterns - ensure comfortable environment")

    if credibility.confidence_level == "Low":
        recommendations.append("Low confidence assessment - corroborate with additional evidence")

    if not recommendations:
        recommendations.extend(DEFAULT_RECOMMENDATIONS)

    return recommendations
