"""
Tests for the pipeline orchestrator and report builder.
"""

import pytest

from veracity import analyze_statement, build_report
from veracity.analyzer import ENGINE_VERSION, StatementAnalysis
from veracity.lexicon import DEFAULT_LEXICON, Lexicon
from veracity.preprocessing import LinguisticFeatures


STATEMENTS = [
    "",
    "um um um um um",
    "I saw him but then no.",
    "I am certain I saw him yesterday at the park.",
    "Well, um, basically I was, like, at home and, uh, I heard something outside.",
    "The blue sedan stopped at the corner of Fifth and Main at about nine in the "
    "evening. Two men got out. One of them was carrying a black bag.",
    "I definitely absolutely certainly remember everything exactly as it happened.",
]


class TestPipeline:

    def test_returns_analysis(self):
        result = analyze_statement("I am certain I saw him yesterday at the park.", 5)
        assert isinstance(result, StatementAnalysis)
        assert result.linguistic.word_count == 10
        assert result.engine_version == ENGINE_VERSION
        assert result.recommendations

    def test_empty_statement(self):
        result = analyze_statement("", 0)
        assert result.linguistic == LinguisticFeatures()
        assert result.credibility.overall_score == 0
        assert result.credibility.confidence_level == "Low"
        assert result.risks.stress_level == "Low"
        assert result.score_band == "low"
        assert result.speech_rate.status == "Unknown"

    @pytest.mark.parametrize("text", STATEMENTS)
    def test_deterministic(self, text):
        assert analyze_statement(text, 7) == analyze_statement(text, 7)

    @pytest.mark.parametrize("text", STATEMENTS)
    def test_scores_bounded(self, text):
        result = analyze_statement(text, 15)
        credibility = result.credibility
        for score in (
            credibility.overall_score,
            credibility.consistency_score,
            credibility.detail_score,
            credibility.emotional_authenticity_score,
            credibility.linguistic_coherence_score,
        ):
            assert isinstance(score, int)
            assert 0 <= score <= 100
        assert credibility.confidence_level in ("High", "Medium", "Low")
        assert result.risks.stress_level in ("High", "Medium", "Low")

    def test_score_band_follows_overall(self):
        result = analyze_statement("um um um um um", 0)
        assert result.credibility.overall_score == 30
        assert result.score_band == "low"

    def test_results_are_immutable(self):
        result = analyze_statement("um but um no um", 10)
        with pytest.raises(AttributeError):
            result.risks.deception_indicators.append("extra")
        with pytest.raises(AttributeError):
            result.linguistic.filler_words.append("extra")
        with pytest.raises(AttributeError):
            result.recommendations.append("extra")

    def test_integer_duration_accepted(self):
        assert analyze_statement("hello there", 3).speech_rate.words_per_minute == 40


class TestLexiconInjection:

    def test_custom_lexicon_changes_matches(self):
        lexicon = Lexicon(hesitation=("zebra",))
        result = analyze_statement("zebra zebra um", 3, lexicon=lexicon)
        assert result.linguistic.hesitation_markers == ("zebra", "zebra")

    def test_default_lexicon_untouched(self):
        analyze_statement("zebra", 1, lexicon=Lexicon(filler=("zebra",)))
        assert "zebra" not in DEFAULT_LEXICON.filler
        assert analyze_statement("zebra", 1).linguistic.filler_words == ()


class TestValidation:

    def test_text_must_be_string(self):
        with pytest.raises(TypeError, match="text must be a str"):
            analyze_statement(b"bytes", 5)

    def test_duration_must_be_number(self):
        with pytest.raises(TypeError):
            analyze_statement("hello", None)

    def test_negative_duration(self):
        with pytest.raises(ValueError, match="non-negative"):
            analyze_statement("hello", -0.5)

    def test_infinite_duration(self):
        with pytest.raises(ValueError, match="finite"):
            analyze_statement("hello", float("inf"))


class TestReport:

    @pytest.fixture
    def report(self):
        return build_report(analyze_statement("I saw him but then no.", 3))

    def test_top_level_keys(self, report):
        assert set(report) == {
            "linguistic", "psychological", "credibility", "risks",
            "recommendations", "score_band", "speech_rate", "engine_version",
        }

    def test_contradiction_count_included(self, report):
        assert report["linguistic"]["contradiction_count"] == 2
        assert report["linguistic"]["contradiction_indicators"] == ("but", "no.")

    def test_values_match_analysis(self, report):
        assert report["credibility"]["overall_score"] == 42
        assert report["speech_rate"] == {"words_per_minute": 120, "status": "Normal"}
        assert report["engine_version"] == ENGINE_VERSION

    def test_report_is_detached(self):
        analysis = analyze_statement("um um", 1)
        report = build_report(analysis)
        report["recommendations"].append("extra")
        assert "extra" not in analysis.recommendations
