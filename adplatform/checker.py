"""Profanity checker combining dictionary lookup and context analysis."""

from __future__ import annotations

import copy
from collections.abc import Iterable
from typing import NamedTuple

from adplatform.context import analyze_context
from adplatform.dictionary import is_profane
from adplatform.normalization import extract_words, process_words

MAX_LEVENSHTEIN_DISTANCE = 1
MIN_WORD_LENGTH_FOR_TYPO = 4
CONTEXT_THRESHOLD = 0.7


class CheckResult(NamedTuple):
    """Verdict, matched words and context score of one check."""

    flagged: bool
    matches: list[str]
    context_score: float


class ProfanityChecker:
    """Checks texts against a set of bad words.

    The ``with_*`` methods return a configured copy and leave this one unchanged.
    """

    def __init__(self, bad_words: Iterable[str]) -> None:
        self.bad_words = frozenset(bad_words)
        self.context_analysis = False
        self.typo_check = False
        self.max_typo_distance = MAX_LEVENSHTEIN_DISTANCE
        self.min_length_for_typo = MIN_WORD_LENGTH_FOR_TYPO

    def with_typo_check(self, max_distance: int, min_length: int) -> ProfanityChecker:
        """Return a copy that also matches words within ``max_distance`` edits."""
        checker = copy.copy(self)
        checker.typo_check = True
        checker.max_typo_distance = max_distance
        checker.min_length_for_typo = min_length
        return checker

    def with_context_analysis(self, enable: bool) -> ProfanityChecker:
        """Return a copy with context analysis switched on or off."""
        checker = copy.copy(self)
        checker.context_analysis = enable
        return checker

    def check(self, text: str) -> bool:
        """Tell whether ``text`` should be rejected."""
        return self.check_with_details(text).flagged

    def check_with_details(self, text: str) -> CheckResult:
        """Check ``text`` and return the verdict, the matched variants and the context score."""
        words = extract_words(text)
        matches = [
            word
            for word in process_words(words)
            if is_profane(
                word,
                self.bad_words,
                self.typo_check,
                self.min_length_for_typo,
                self.max_typo_distance,
            )
        ]
        context_score = analyze_context(words) if self.context_analysis else 0.0
        return CheckResult(
            bool(matches) or context_score >= CONTEXT_THRESHOLD, matches, context_score
        )