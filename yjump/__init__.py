"""Top-level package for yjump, a keyboard-driven window switcher.

Version identifier is defined in :mod:`yjump.version` to keep a single source
of truth that can be imported without pulling heavier submodules.
"""

from .version import __version__  # re-export

__all__ = ["__version__"]
