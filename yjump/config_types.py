"""Typed configuration dataclasses for yjump.

Provides strongly-typed configuration objects built from the nested dict
returned by :func:`yjump.config.load_config`.
"""
from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Dict, Any

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class MatchingConfig:
    """Query matching and result list configuration."""
    case_sensitive: bool = False
    max_results: int = 10

    def __post_init__(self):
        if not isinstance(self.case_sensitive, bool):
            raise ValueError(f"matching.case_sensitive must be true/false, got {self.case_sensitive!r}")
        # bool is an int subclass; reject it explicitly
        if isinstance(self.max_results, bool) or not isinstance(self.max_results, int):
            raise ValueError(f"matching.max_results must be an integer, got {self.max_results!r}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class CacheConfig:
    """Window list cache configuration."""
    enabled: bool = True
    timeout_seconds: float = 2.0

    def __post_init__(self):
        if not isinstance(self.enabled, bool):
            raise ValueError(f"cache.enabled must be true/false, got {self.enabled!r}")
        if isinstance(self.timeout_seconds, bool) or not isinstance(self.timeout_seconds, (int, float)):
            raise ValueError(f"cache.timeout_seconds must be a number, got {self.timeout_seconds!r}")
        if self.timeout_seconds < 0:
            raise ValueError(f"cache.timeout_seconds must be >= 0, got {self.timeout_seconds}")
        self.timeout_seconds = float(self.timeout_seconds)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class AppConfig:
    """Root application configuration with all subsections."""
    log_level: str = "INFO"
    matching: MatchingConfig = field(default_factory=MatchingConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)

    def __post_init__(self):
        if str(self.log_level).upper() not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}, got {self.log_level!r}")
        self.log_level = str(self.log_level).upper()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to nested dictionary matching the load_config layout."""
        return {
            "log_level": self.log_level,
            "matching": self.matching.to_dict(),
            "cache": self.cache.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AppConfig:
        """Create typed config from dictionary.

        Unknown keys inside a section raise ValueError naming the section.
        """
        return cls(
            log_level=data.get("log_level", "INFO"),
            matching=_build_section(MatchingConfig, "matching", data.get("matching", {})),
            cache=_build_section(CacheConfig, "cache", data.get("cache", {})),
        )


def _build_section(section_cls, name: str, values: Any):
    if not isinstance(values, dict):
        raise ValueError(f"{name} must be a section, got {values!r}")
    try:
        return section_cls(**values)
    except TypeError as e:
        raise ValueError(f"Invalid key in [{name}] section: {e}") from e


__all__ = [
    "AppConfig",
    "MatchingConfig",
    "CacheConfig",
]
