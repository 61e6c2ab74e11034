"""Window model, JSON source, list cache and window ranking helpers."""

from .models import (
    Bounds,
    WindowInfo,
    bounds_distance,
    is_switchable,
    filter_windows,
)
from .source import WindowSourceError, fill_missing_titles, parse_windows, load_windows
from .cache import WindowListCache
from .selection import rank_windows, rank_windows_scored

__all__ = [
    "Bounds",
    "WindowInfo",
    "bounds_distance",
    "is_switchable",
    "filter_windows",
    "WindowSourceError",
    "fill_missing_titles",
    "parse_windows",
    "load_windows",
    "WindowListCache",
    "rank_windows",
    "rank_windows_scored",
]
