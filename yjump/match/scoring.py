from __future__ import annotations
"""Tiered fuzzy matcher for window display texts.

Scores a user-typed pattern against one candidate text. The result is a
``(matches, score)`` pair whose score is only meaningful for ordering matches
of the same pattern across the same corpus.

Tiers, evaluated in order (first hit wins):

1. Exact substring anywhere in the text: ``10000 - offset``
2. Per word, prefix (``5000``) or in-word substring (``3000``), minus
   ``100`` per preceding word
3. Consecutive run of the pattern inside a single word: ``1000 + len * 10``

An empty pattern matches everything with score 0. Everything here is pure so
it can be called per keystroke from any thread.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Optional

# --- Score constants -------------------------------------------------------

EXACT_BASE = 10000
WORD_PREFIX_BASE = 5000
WORD_SUBSTRING_BASE = 3000
WORD_INDEX_PENALTY = 100
CONSECUTIVE_BASE = 1000
CONSECUTIVE_CHAR_WEIGHT = 10

# --- Result types ----------------------------------------------------------


class MatchTier(str, Enum):
    EMPTY = "empty"
    EXACT = "exact"
    WORD_PREFIX = "word_prefix"
    WORD_SUBSTRING = "word_substring"
    CONSECUTIVE = "consecutive"
    NONE = "none"


class MatchResult(NamedTuple):
    """Outcome of matching one pattern against one text."""
    matches: bool
    score: int


@dataclass
class MatchBreakdown:
    """Diagnostic view of a match: which tier fired and where."""
    matches: bool
    score: int
    tier: MatchTier
    position: Optional[int] = None  # character offset (exact tier)
    word_index: Optional[int] = None  # word tiers
    notes: List[str] = field(default_factory=list)

    @property
    def result(self) -> MatchResult:
        return MatchResult(self.matches, self.score)


# --- Helpers ---------------------------------------------------------------

def fold(value: str, case_sensitive: bool) -> str:
    """Lowercase ``value`` unless matching is case sensitive."""
    return value if case_sensitive else value.lower()


def split_words(text: str) -> List[str]:
    """Split on whitespace into non-empty runs, preserving order."""
    return text.split()


def consecutive_run_in_word(pattern: str, word: str) -> bool:
    """Check whether ``pattern`` appears as one unbroken run inside ``word``.

    The scan walks the word once. A mismatch after partial progress throws
    the progress away and resumes comparing the pattern head against the
    *next* character; the mismatching character is not re-tried.

    Args:
        pattern: Already folded pattern (non-empty)
        word: Already folded single word

    Returns:
        True once every pattern character matched consecutively
    """
    if not pattern:
        return False
    matched = 0
    for char in word:
        if char == pattern[matched]:
            matched += 1
            if matched == len(pattern):
                return True
        elif matched:
            matched = 0
    return False


# --- Tiers -----------------------------------------------------------------
# Each tier takes already folded input and returns None when it does not
# apply. Any in-word hit is also a substring of the whole text, so through
# explain_match the word tiers only see patterns the exact tier rejected.

def match_exact(needle: str, haystack: str) -> Optional[MatchBreakdown]:
    position = haystack.find(needle)
    if position < 0:
        return None
    return MatchBreakdown(
        True,
        EXACT_BASE - position,
        MatchTier.EXACT,
        position=position,
        notes=[f"exact_substring:{position}"],
    )


def match_words(needle: str, words: List[str]) -> Optional[MatchBreakdown]:
    """Word prefix / in-word substring tier.

    Words are visited left to right; per word the prefix check runs before
    the substring check and the first hit ends the search.
    """
    for index, word in enumerate(words):
        if word.startswith(needle):
            return MatchBreakdown(
                True,
                WORD_PREFIX_BASE - index * WORD_INDEX_PENALTY,
                MatchTier.WORD_PREFIX,
                word_index=index,
                notes=[f"word_prefix:{index}"],
            )
        if needle in word:
            return MatchBreakdown(
                True,
                WORD_SUBSTRING_BASE - index * WORD_INDEX_PENALTY,
                MatchTier.WORD_SUBSTRING,
                word_index=index,
                notes=[f"word_substring:{index}"],
            )
    return None


def match_consecutive(needle: str, words: List[str]) -> Optional[MatchBreakdown]:
    for index, word in enumerate(words):
        if consecutive_run_in_word(needle, word):
            return MatchBreakdown(
                True,
                CONSECUTIVE_BASE + len(needle) * CONSECUTIVE_CHAR_WEIGHT,
                MatchTier.CONSECUTIVE,
                word_index=index,
                notes=[f"consecutive:{index}:{len(needle)}"],
            )
    return None


# --- Core matching ---------------------------------------------------------

def explain_match(pattern: str, text: str, case_sensitive: bool = False) -> MatchBreakdown:
    """Match ``pattern`` against ``text`` and report how the score was reached.

    Args:
        pattern: User query, may be empty or contain spaces
        text: Candidate display text
        case_sensitive: Compare raw strings instead of lowercased ones

    Returns:
        MatchBreakdown carrying the same (matches, score) as fuzzy_match
    """
    needle = fold(pattern, case_sensitive)
    haystack = fold(text, case_sensitive)

    if not needle:
        return MatchBreakdown(True, 0, MatchTier.EMPTY, notes=["empty_pattern"])

    breakdown = match_exact(needle, haystack)
    if breakdown is None:
        words = split_words(haystack)
        breakdown = match_words(needle, words) or match_consecutive(needle, words)
    if breakdown is not None:
        return breakdown

    notes = ["no_match"]
    if len(needle) > len(haystack):
        notes.append("pattern_longer_than_text")
    return MatchBreakdown(False, 0, MatchTier.NONE, notes=notes)


def fuzzy_match(pattern: str, text: str, case_sensitive: bool = False) -> MatchResult:
    """Return ``(matches, score)`` for ``pattern`` against ``text``."""
    return explain_match(pattern, text, case_sensitive).result


__all__ = [
    "MatchTier",
    "MatchResult",
    "MatchBreakdown",
    "fold",
    "split_words",
    "consecutive_run_in_word",
    "match_exact",
    "match_words",
    "match_consecutive",
    "explain_match",
    "fuzzy_match",
]
