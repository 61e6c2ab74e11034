"""Ranking of candidates against a query.

Applies :func:`yjump.match.scoring.fuzzy_match` to every candidate, keeps the
matches and orders them by descending score. Ties keep the order candidates
were supplied in (Python's sort is stable), which mirrors the window
enumeration order and keeps results from flickering between keystrokes.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Hashable, Iterable, List

from .scoring import fuzzy_match

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 10


@dataclass(frozen=True)
class Candidate:
    """A matchable item: opaque identifier plus the text shown to the user."""
    key: Hashable
    display_text: str


@dataclass(frozen=True)
class RankedCandidate:
    candidate: Candidate
    score: int


def rank_scored(
    pattern: str,
    candidates: Iterable[Candidate],
    case_sensitive: bool = False,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> List[RankedCandidate]:
    """Rank candidates and keep their scores.

    Args:
        pattern: User query. Empty means "no results", not "everything"
        candidates: Candidates in enumeration order
        case_sensitive: Passed through to the matcher
        max_results: Upper bound on returned entries; <= 0 yields []

    Returns:
        At most ``max_results`` RankedCandidate entries, best first
    """
    if not pattern or max_results <= 0:
        return []

    scored: List[RankedCandidate] = []
    total = 0
    for candidate in candidates:
        total += 1
        result = fuzzy_match(pattern, candidate.display_text, case_sensitive)
        if result.matches:
            scored.append(RankedCandidate(candidate, result.score))

    scored.sort(key=lambda entry: entry.score, reverse=True)
    ranked = scored[:max_results]
    logger.debug(
        f"Ranked {total} candidates for {pattern!r}: {len(scored)} matched, {len(ranked)} returned"
    )
    return ranked


def rank(
    pattern: str,
    candidates: Iterable[Candidate],
    case_sensitive: bool = False,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> List[Candidate]:
    """Return the best matching candidates for ``pattern``, best first."""
    return [entry.candidate for entry in rank_scored(pattern, candidates, case_sensitive, max_results)]


__all__ = ["DEFAULT_MAX_RESULTS", "Candidate", "RankedCandidate", "rank_scored", "rank"]
