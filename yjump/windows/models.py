"""Window data model.

Windows arrive from an external enumerator (accessibility APIs, wmctrl, ...).
This module only shapes them into the display strings the matcher sees.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterable, List, Optional

# Owners the enumerator never offers as switch targets
SYSTEM_OWNERS = frozenset({"Window Server", "Dock"})
# Anything smaller is a status item or tooltip, not a real window
MIN_WINDOW_SIDE = 50


@dataclass(frozen=True)
class Bounds:
    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0


@dataclass(frozen=True)
class WindowInfo:
    """One open application window."""
    window_number: int
    owner_pid: int
    owner_name: str
    window_title: str = ""
    bounds: Optional[Bounds] = None
    workspace: int = 0

    @property
    def display_text(self) -> str:
        if not self.window_title:
            return self.owner_name
        return f"{self.owner_name}: {self.window_title}"

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["display_text"] = self.display_text
        return data


def bounds_distance(a: Bounds, b: Bounds) -> float:
    """Sum of absolute differences of origin and size.

    Used to pair a titleless window with the accessibility entry whose
    frame is closest to it.
    """
    return (
        abs(a.x - b.x)
        + abs(a.y - b.y)
        + abs(a.width - b.width)
        + abs(a.height - b.height)
    )


def is_switchable(window: WindowInfo) -> bool:
    if not window.owner_name or window.owner_name in SYSTEM_OWNERS:
        return False
    if window.bounds is None:
        return True
    return window.bounds.width >= MIN_WINDOW_SIDE and window.bounds.height >= MIN_WINDOW_SIDE


def filter_windows(windows: Iterable[WindowInfo]) -> List[WindowInfo]:
    """Drop system owners, unnamed windows and tiny frames; keep order.

    Windows without reported bounds are kept.
    """
    return [w for w in windows if is_switchable(w)]


__all__ = [
    "SYSTEM_OWNERS",
    "MIN_WINDOW_SIDE",
    "Bounds",
    "WindowInfo",
    "bounds_distance",
    "is_switchable",
    "filter_windows",
]
