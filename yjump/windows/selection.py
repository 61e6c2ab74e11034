"""Ranking helpers that work directly on WindowInfo lists."""

from __future__ import annotations
from typing import Dict, List, Sequence, Tuple

from ..match.ranking import DEFAULT_MAX_RESULTS, Candidate, rank_scored
from .models import WindowInfo


def rank_windows_scored(
    pattern: str,
    windows: Sequence[WindowInfo],
    case_sensitive: bool = False,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> List[Tuple[WindowInfo, int]]:
    """Rank windows by display text, returning ``(window, score)`` pairs.

    Candidates are keyed by list position, so duplicate window numbers from
    a sloppy enumerator cannot collapse distinct windows.
    """
    by_position: Dict[int, WindowInfo] = dict(enumerate(windows))
    candidates = [Candidate(key=i, display_text=w.display_text) for i, w in by_position.items()]
    ranked = rank_scored(pattern, candidates, case_sensitive, max_results)
    return [(by_position[entry.candidate.key], entry.score) for entry in ranked]


def rank_windows(
    pattern: str,
    windows: Sequence[WindowInfo],
    case_sensitive: bool = False,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> List[WindowInfo]:
    """Return the best matching windows for ``pattern``, best first."""
    return [w for w, _score in rank_windows_scored(pattern, windows, case_sensitive, max_results)]


__all__ = ["rank_windows_scored", "rank_windows"]
