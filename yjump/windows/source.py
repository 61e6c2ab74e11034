"""JSON window source.

The platform enumerator is an external program; it hands yjump a JSON
document on stdin or in a file. Two shapes are accepted:

    [ {window}, ... ]

    { "windows": [ {window}, ... ],
      "titles":  [ {"title": "...", "bounds": {...}}, ... ] }

A window object has ``owner_name`` and optionally ``window_title``,
``window_number``, ``owner_pid``, ``workspace`` and ``bounds``
(``x``/``y``/``width``/``height``). The ``titles`` list carries titles
reported separately by the accessibility layer; they are assigned to
titleless windows whose frame lies close enough.
"""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict, IO, List, Optional, Sequence, Tuple, Union

from .models import Bounds, WindowInfo, bounds_distance, filter_windows

logger = logging.getLogger(__name__)

# Max frame distance for pairing a titleless window with an accessibility title
TITLE_MATCH_TOLERANCE = 100.0


class WindowSourceError(ValueError):
    """Raised when the window document cannot be read or parsed."""


def _parse_bounds(raw: Any, where: str) -> Optional[Bounds]:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise WindowSourceError(f"{where}: 'bounds' must be an object, got {type(raw).__name__}")
    try:
        return Bounds(
            x=float(raw.get("x", 0)),
            y=float(raw.get("y", 0)),
            width=float(raw.get("width", 0)),
            height=float(raw.get("height", 0)),
        )
    except (TypeError, ValueError, OverflowError) as e:
        raise WindowSourceError(f"{where}: invalid bounds ({e})") from e


def _parse_window(raw: Any, index: int) -> WindowInfo:
    where = f"window #{index}"
    if not isinstance(raw, dict):
        raise WindowSourceError(f"{where}: expected an object, got {type(raw).__name__}")
    owner = raw.get("owner_name")
    if not isinstance(owner, str):
        raise WindowSourceError(f"{where}: 'owner_name' is required and must be a string")
    title = raw.get("window_title") or ""
    if not isinstance(title, str):
        raise WindowSourceError(f"{where}: 'window_title' must be a string")
    try:
        number = int(raw.get("window_number", index))
        pid = int(raw.get("owner_pid", 0))
        workspace = int(raw.get("workspace", 0))
    except (TypeError, ValueError, OverflowError) as e:
        raise WindowSourceError(f"{where}: invalid numeric field ({e})") from e
    return WindowInfo(
        window_number=number,
        owner_pid=pid,
        owner_name=owner,
        window_title=title,
        bounds=_parse_bounds(raw.get("bounds"), where),
        workspace=workspace,
    )


def fill_missing_titles(
    windows: Sequence[WindowInfo],
    titled_frames: Sequence[Tuple[Bounds, str]],
    tolerance: float = TITLE_MATCH_TOLERANCE,
) -> List[WindowInfo]:
    """Give titleless windows the title of the nearest accessibility frame.

    Each frame is used at most once. Windows that already have a title, have no
    bounds, or have no frame within ``tolerance`` are returned unchanged.
    """
    remaining = list(titled_frames)
    result: List[WindowInfo] = []
    for window in windows:
        if window.window_title or window.bounds is None or not remaining:
            result.append(window)
            continue
        best_index = None
        best_distance = tolerance
        for i, (frame, _title) in enumerate(remaining):
            distance = bounds_distance(window.bounds, frame)
            if distance < best_distance:
                best_index, best_distance = i, distance
        if best_index is None:
            result.append(window)
            continue
        _frame, title = remaining.pop(best_index)
        result.append(
            WindowInfo(
                window_number=window.window_number,
                owner_pid=window.owner_pid,
                owner_name=window.owner_name,
                window_title=title,
                bounds=window.bounds,
                workspace=window.workspace,
            )
        )
    return result


def parse_windows(document: Any) -> List[WindowInfo]:
    """Build switchable windows from an already decoded JSON document."""
    titles_raw: List[Any] = []
    if isinstance(document, dict):
        windows_raw = document.get("windows")
        titles_raw = document.get("titles", [])
        if titles_raw is None:
            titles_raw = []
        if not isinstance(titles_raw, list):
            raise WindowSourceError("'titles' must be an array")
    else:
        windows_raw = document
    if not isinstance(windows_raw, list):
        raise WindowSourceError("expected a JSON array of windows or an object with a 'windows' array")

    windows = [_parse_window(raw, i) for i, raw in enumerate(windows_raw)]

    titled_frames: List[Tuple[Bounds, str]] = []
    for i, raw in enumerate(titles_raw):
        if not isinstance(raw, dict) or not isinstance(raw.get("title"), str):
            raise WindowSourceError(f"title #{i}: expected an object with a string 'title'")
        frame = _parse_bounds(raw.get("bounds"), f"title #{i}")
        if raw["title"] and frame is not None:
            titled_frames.append((frame, raw["title"]))
    if titled_frames:
        windows = fill_missing_titles(windows, titled_frames)

    switchable = filter_windows(windows)
    logger.debug(f"Loaded {len(windows)} windows, {len(switchable)} switchable")
    return switchable


def load_windows(source: Union[str, Path, IO[str]]) -> List[WindowInfo]:
    """Load windows from a JSON file path or an open text stream.

    Raises:
        WindowSourceError: If the file is missing, not UTF-8 or the JSON is malformed
    """
    try:
        if isinstance(source, (str, Path)):
            with open(source, "r", encoding="utf-8") as fh:
                document: Dict[str, Any] | List[Any] = json.load(fh)
        else:
            document = json.load(source)
    except OSError as e:
        raise WindowSourceError(f"Cannot read window list: {e}") from e
    except UnicodeDecodeError as e:
        raise WindowSourceError(f"Window list is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise WindowSourceError(f"Window list is not valid JSON: {e}") from e
    return parse_windows(document)


__all__ = [
    "TITLE_MATCH_TOLERANCE",
    "WindowSourceError",
    "fill_missing_titles",
    "parse_windows",
    "load_windows",
]
