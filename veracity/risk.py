"""
Risk Factor Identifier

Pure threshold rules over the linguistic and psychological features.
Each rule is evaluated independently, so a statement can raise any
subset of flags. Flags are appended in rule order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from veracity.numeric import ratio
from veracity.preprocessing import LinguisticFeatures
from veracity.psychological import PsychologicalFeatures

# Flag text, consumed by recommendation and UI layers
HIGH_DECEPTION_RISK = "High deception risk detected"
EXCESSIVE_HESITATION = "Excessive hesitation markers"
CONTRADICTIONS_PRESENT = "Contradiction indicators present"
OVERCONFIDENCE = "Unusually high certainty (potential overcompensation)"
HIGH_REPETITION = "High repetition rate"
LOW_COHERENCE = "Low coherence score"
SIMPLE_LANGUAGE = "Unusually simple language (potentially rehearsed)"
EMOTIONAL_INSTABILITY = "High emotional instability"
EXCESSIVE_FILLERS = "Excessive filler words"
HIGH_STRESS = "High stress indicators"
NO_TEMPORAL_DETAIL = "Lack of temporal details"


@dataclass(frozen=True)
class RiskFactors:
    deception_indicators: tuple[str, ...] = ()
    stress_level: str = "Low"           # "High" | "Medium" | "Low"
    inconsistency_flags: tuple[str, ...] = ()
    credibility_flags: tuple[str, ...] = ()


@dataclass(frozen=True)
class RiskRule:
    """A single threshold rule: label + predicate over the features."""
    label: str
    triggered: Callable[[LinguisticFeatures, PsychologicalFeatures], bool]


DECEPTION_RULES: list[RiskRule] = [
    RiskRule(HIGH_DECEPTION_RISK, lambda lf, pf: pf.deception_risk > 60),
    RiskRule(
        EXCESSIVE_HESITATION,
        lambda lf, pf: ratio(lf.hesitation_count, lf.word_count) > 0.05,
    ),
    RiskRule(CONTRADICTIONS_PRESENT, lambda lf, pf: lf.contradiction_count > 0),
    RiskRule(OVERCONFIDENCE, lambda lf, pf: pf.certainty_level > 90),
]

INCONSISTENCY_RULES: list[RiskRule] = [
    RiskRule(
        HIGH_REPETITION,
        lambda lf, pf: ratio(lf.repetition_count, lf.word_count) > 0.1,
    ),
    RiskRule(LOW_COHERENCE, lambda lf, pf: pf.coherence_score < 60),
    RiskRule(SIMPLE_LANGUAGE, lambda lf, pf: lf.complexity_score < 25),
]

CREDIBILITY_RULES: list[RiskRule] = [
    RiskRule(EMOTIONAL_INSTABILITY, lambda lf, pf: pf.emotional_stability < 40),
    RiskRule(
        EXCESSIVE_FILLERS,
        lambda lf, pf: ratio(lf.filler_word_count, lf.word_count) > 0.08,
    ),
    RiskRule(HIGH_STRESS, lambda lf, pf: pf.stress_indicators > 70),
    RiskRule(
        NO_TEMPORAL_DETAIL,
        lambda lf, pf: pf.time_reference_count == 0 and lf.word_count > 50,
    ),
]


def classify_stress(stress_indicators: float) -> str:
    if stress_indicators > 70:
        return "High"
    if stress_indicators > 40:
        return "Medium"
    return "Low"


def _apply(
    rules: list[RiskRule],
    linguistic: LinguisticFeatures,
    psychological: PsychologicalFeatures,
) -> tuple[str, ...]:
    return tuple(r.label for r in rules if r.triggered(linguistic, psychological))


def identify_risks(
    linguistic: LinguisticFeatures,
    psychological: PsychologicalFeatures,
    text: Optional[str] = None,
) -> RiskFactors:
    """
    Apply every risk rule and classify stress.

    `text` is accepted for signature parity with the other stages; the
    rules only read the precomputed features. A zero-word statement
    raises no flags.
    """
    if linguistic.word_count == 0:
        return RiskFactors()

    return RiskFactors(
        deception_indicators=_apply(DECEPTION_RULES, linguistic, psychological),
        stress_level=classify_stress(psychological.stress_indicators),
        inconsistency_flags=_apply(INCONSISTENCY_RULES, linguistic, psychological),
        credibility_flags=_apply(CREDIBILITY_RULES, linguistic, psychological),
    )
