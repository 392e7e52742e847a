"""Context scoring of a text's words."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

CONTEXT_TRIGGERS = frozenset({"полный", "сущий", "настоящий", "совсем", "очень", "крайне"})

TRIGGER_WEIGHT = 0.3
REPETITION_WEIGHT = 0.5


@dataclass
class ContextAnalysis:
    """Outcome of a context analysis."""

    score: float
    triggers: list[str] = field(default_factory=list)


def analyze_context(words: Sequence[str]) -> float:
    """Score a text from 0 to 1 by intensifying words and repetition."""
    score = sum(TRIGGER_WEIGHT for word in words if word.lower() in CONTEXT_TRIGGERS)
    unique_words = len(set(words))
    repetition_factor = 1.0 - unique_words / max(len(words), 1)
    score += repetition_factor * REPETITION_WEIGHT
    return min(score, 1.0)