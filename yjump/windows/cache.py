"""Time-boxed memoization of the enumerated window list.

Enumerating windows through the accessibility layer is slow compared to
ranking, so the switcher keeps the last list for a short time. The cell is a
plain ``(value, timestamp)`` pair guarded by a lock.
"""

from __future__ import annotations
import logging
import threading
import time
from typing import Callable, List, Optional

from .models import WindowInfo

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 2.0


class WindowListCache:
    """Cache one window list for ``timeout_seconds``.

    Example usage:
        cache = WindowListCache(timeout_seconds=2.0)
        windows = cache.get(lambda: load_windows(path))
        ...
        cache.invalidate()  # after activating a window
    """

    def __init__(
        self,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        enabled: bool = True,
        clock: Callable[[], float] = time.monotonic,
    ):
        if timeout_seconds < 0:
            raise ValueError(f"timeout_seconds must be >= 0, got {timeout_seconds}")
        self.timeout_seconds = timeout_seconds
        self.enabled = enabled
        self._clock = clock
        self._lock = threading.Lock()
        self._value: Optional[List[WindowInfo]] = None
        self._timestamp: Optional[float] = None

    def is_fresh(self) -> bool:
        with self._lock:
            return self._fresh_locked()

    def _fresh_locked(self) -> bool:
        if self._value is None or self._timestamp is None:
            return False
        return (self._clock() - self._timestamp) < self.timeout_seconds

    def get(self, loader: Callable[[], List[WindowInfo]]) -> List[WindowInfo]:
        """Return the cached list, calling ``loader`` when missing or expired."""
        if not self.enabled:
            return loader()
        with self._lock:
            if self._fresh_locked():
                logger.debug("Window list cache hit")
                return list(self._value or [])
            logger.debug("Window list cache miss, enumerating")
            value = list(loader())
            self._value = value
            self._timestamp = self._clock()
            return list(value)

    def invalidate(self) -> None:
        with self._lock:
            self._value = None
            self._timestamp = None
        logger.debug("Window list cache invalidated")


__all__ = ["DEFAULT_TIMEOUT_SECONDS", "WindowListCache"]
