"""Matching package exposing the tiered matcher and the ranker.

`scoring.py` holds the pure per-pair matcher; `ranking.py` applies it across
a corpus with the sort, tie-break and truncation policy.
"""

from .scoring import (
    MatchTier,
    MatchResult,
    MatchBreakdown,
    fuzzy_match,
    explain_match,
)
from .ranking import (
    DEFAULT_MAX_RESULTS,
    Candidate,
    RankedCandidate,
    rank,
    rank_scored,
)

__all__ = [
    "MatchTier",
    "MatchResult",
    "MatchBreakdown",
    "fuzzy_match",
    "explain_match",
    "DEFAULT_MAX_RESULTS",
    "Candidate",
    "RankedCandidate",
    "rank",
    "rank_scored",
]
