"""
Lexicon — Static Word Lists

Every word list the pipeline matches against lives here as read-only
configuration. The pipeline never mutates a lexicon; callers that need
alternate vocabularies build their own `Lexicon` and pass it in.

Matching rules (applied by the consumers, not here):
  - filler / hesitation / emotional / contradiction / time /
    certainty / uncertainty: substring containment on lower-cased tokens
  - self: exact token match

Multi-word entries ("you know", "i mean") can never match a single
whitespace token. They stay in the lists so the output matches the
reference heuristics.
"""

from __future__ import annotations

from dataclasses import dataclass


# ============================================================
# DEFAULT WORD LISTS
# ============================================================

FILLER_WORDS = (
    "um", "uh", "er", "ah", "like", "you know", "i mean", "basically",
    "actually", "literally", "sort of", "kind of", "well", "so",
)

HESITATION_MARKERS = (
    "um", "uh", "er", "ah", "hmm", "well", "...", "pause", "silence",
)

EMOTIONAL_WORDS = (
    # Positive
    "happy", "joy", "excited", "pleased", "confident", "sure", "certain",
    "glad", "relieved", "calm", "peaceful", "comfortable",
    # Negative
    "angry", "mad", "furious", "upset", "sad", "depressed", "worried",
    "anxious", "nervous", "scared", "afraid", "fearful", "terrified",
    "confused", "uncertain", "doubtful", "suspicious", "concerned",
)

CONTRADICTION_INDICATORS = (
    "but", "however", "although", "though", "actually", "wait", "no",
    "i mean", "what i meant was", "let me correct", "sorry", "i misspoke",
)

TIME_WORDS = (
    "yesterday", "today", "tomorrow", "morning", "afternoon", "evening",
    "night", "before", "after", "when", "then", "during",
)

SELF_WORDS = ("i", "me", "my", "myself", "mine")

CERTAINTY_WORDS = (
    "certain", "definitely", "certainly", "absolutely", "sure", "positive",
    "know", "remember",
)

UNCERTAINTY_WORDS = (
    "maybe", "perhaps", "might", "could", "possibly", "think", "believe",
    "guess",
)


@dataclass(frozen=True)
class Lexicon:
    """Immutable bundle of the word lists used across the pipeline."""
    filler: tuple[str, ...] = FILLER_WORDS
    hesitation: tuple[str, ...] = HESITATION_MARKERS
    emotional: tuple[str, ...] = EMOTIONAL_WORDS
    contradiction: tuple[str, ...] = CONTRADICTION_INDICATORS
    time: tuple[str, ...] = TIME_WORDS
    self_reference: tuple[str, ...] = SELF_WORDS
    certainty: tuple[str, ...] = CERTAINTY_WORDS
    uncertainty: tuple[str, ...] = UNCERTAINTY_WORDS

    def as_dict(self) -> dict[str, list[str]]:
        """Plain-list view for serialisation (GET /lexicon)."""
        return {
            "filler": list(self.filler),
            "hesitation": list(self.hesitation),
            "emotional": list(self.emotional),
            "contradiction": list(self.contradiction),
            "time": list(self.time),
            "self_reference": list(self.self_reference),
            "certainty": list(self.certainty),
            "uncertainty": list(self.uncertainty),
        }


def contains_any(word: str, entries: tuple[str, ...]) -> bool:
    """True if `word` contains any lexicon entry as a substring."""
    return any(entry in word for entry in entries)


def match_words(words: list[str], entries: tuple[str, ...]) -> list[str]:
    """Return the tokens (in order, duplicates kept) that contain an entry."""
    return [w for w in words if contains_any(w, entries)]


# Shared default, never mutated
DEFAULT_LEXICON = Lexicon()
