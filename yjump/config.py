from __future__ import annotations
import os
import json
import math
import logging
from typing import Any, Callable, Dict, List, Tuple
from pathlib import Path
import copy

logger = logging.getLogger(__name__)

_DEFAULTS: Dict[str, Any] = {
    "log_level": "INFO",
    "matching": {
        "case_sensitive": False,
        "max_results": 10,
    },
    "cache": {
        "enabled": True,
        "timeout_seconds": 2.0,
    },
}

ENV_PREFIX = "YJUMP__"


def _conf_int(value: str) -> int:
    return int(value)


def _conf_seconds(value: str) -> float:
    seconds = float(value)
    if not math.isfinite(seconds) or seconds < 0:
        raise ValueError(f"not a non-negative number of seconds: {value}")
    return seconds


def _conf_bool(value: str) -> bool:
    # Only "true" (any case) enables a flag; other values read as false
    return value.lower() == "true"


def _conf_log_level(value: str) -> str:
    level = value.upper()
    if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        raise ValueError(f"unknown log level: {value}")
    return level


# Flat keys of yjump.conf mapped onto nested config paths, each with its own
# parser. Appearance keys (colors, fonts, window geometry) belong to the GUI
# and are ignored here.
_CONF_FILE_KEYS: Dict[str, Tuple[Tuple[str, ...], Callable[[str], Any]]] = {
    "log_level": (("log_level",), _conf_log_level),
    "case_sensitive": (("matching", "case_sensitive"), _conf_bool),
    "max_results": (("matching", "max_results"), _conf_int),
    "cache_window_list": (("cache", "enabled"), _conf_bool),
    "cache_timeout_seconds": (("cache", "timeout_seconds"), _conf_seconds),
}


def deep_merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    """Merge dict b into a (shallow copies) returning new dict.
    Nested dicts are merged recursively; other values override.
    """
    result = dict(a)
    for k, v in b.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = deep_merge(result[k], v)  # type: ignore[arg-type]
        else:
            result[k] = v
    return result


def _strip_inline_comment(val: str) -> str:
    if '#' not in val:
        return val
    in_single = False
    in_double = False
    result_chars: List[str] = []
    for ch in val:
        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        # "#24273A" is a value; only " # ..." starts a comment
        if ch == '#' and not in_single and not in_double and result_chars and result_chars[-1].isspace():
            break
        result_chars.append(ch)
    return ''.join(result_chars).rstrip()


def parse_key_values(text: str) -> Dict[str, str]:
    """Parse ``key = value`` lines as used by both .env and yjump.conf.

    Blank lines, ``#`` comments and lines without ``=`` are skipped. Inline
    comments are stripped unless quoted, wrapping quotes removed.
    """
    values: Dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, val = line.split('=', 1)
        key = key.strip()
        val = _strip_inline_comment(val.strip())
        if (val.startswith('"') and val.endswith('"')) or (val.startswith("'") and val.endswith("'")):
            if len(val) >= 2:
                val = val[1:-1]
        if key:
            values[key] = val
    return values


def _load_dotenv(path: Path) -> Dict[str, str]:
    if not path.exists():
        return {}
    return parse_key_values(path.read_text(encoding='utf-8'))


def config_file_candidates() -> List[Path]:
    """Config file locations in lookup order (first existing wins)."""
    paths: List[Path] = []
    explicit = os.environ.get('YJUMP_CONFIG_FILE')
    if explicit:
        paths.append(Path(explicit))
    xdg = os.environ.get('XDG_CONFIG_HOME')
    if xdg:
        paths.append(Path(xdg) / 'yjump' / 'yjump.conf')
    home = Path.home()
    paths.append(home / '.config' / 'yjump' / 'yjump.conf')
    paths.append(home / '.yjump.conf')
    return paths


def conf_file_to_overrides(values: Dict[str, str]) -> Dict[str, Any]:
    """Translate flat yjump.conf keys into a nested override dict.

    Each key is parsed with its own type. Values that do not parse are
    skipped so the default (or a lower layer) stays in effect.
    """
    nested: Dict[str, Any] = {}
    for key, raw in values.items():
        entry = _CONF_FILE_KEYS.get(key.lower())
        if entry is None:
            logger.debug(f"Ignoring config key without effect on matching: {key}")
            continue
        path, parse = entry
        try:
            value = parse(raw.strip())
        except ValueError:
            logger.debug(f"Ignoring unparseable value for {key}: {raw!r}")
            continue
        cursor = nested
        for part in path[:-1]:
            cursor = cursor.setdefault(part, {})
        cursor[path[-1]] = value
    return nested


def load_config_file(explicit_file: str | None = None) -> Dict[str, Any]:
    """Load the first existing yjump.conf as nested overrides.

    Args:
        explicit_file: Path that takes precedence over the standard locations

    Returns:
        Nested dict (empty when no file exists)
    """
    candidates = [Path(explicit_file)] if explicit_file else config_file_candidates()
    for path in candidates:
        if path.is_file():
            logger.debug(f"Using config file: {path}")
            return conf_file_to_overrides(parse_key_values(path.read_text(encoding='utf-8')))
    return {}


def load_config(explicit_file: str | None = None, overrides: Dict[str, Any] | None = None) -> Dict[str, Any]:
    """Load configuration merging defaults <- yjump.conf <- .env <- environment <- overrides.

    During test runs (detected via PYTEST_CURRENT_TEST) .env and the user's
    config file are skipped unless YJUMP_ENABLE_DOTENV=1 is set, keeping
    defaults deterministic. An explicit_file is always honoured.

    Args:
        explicit_file: Config file to read instead of the standard locations.
        overrides: Dict of values to deep-merge last (primarily for CLI flags and tests).

    Returns:
        dict: Configuration dictionary (for typed access use load_typed_config()).
    """
    in_tests = bool(os.environ.get('PYTEST_CURRENT_TEST')) and not os.environ.get('YJUMP_ENABLE_DOTENV')
    # Deep copy defaults to avoid cross-call mutation of nested dicts
    cfg: Dict[str, Any] = copy.deepcopy(_DEFAULTS)

    if explicit_file or not in_tests:
        cfg = deep_merge(cfg, load_config_file(explicit_file))

    dotenv_values: Dict[str, str] = {}
    if not in_tests:
        dotenv_values = _load_dotenv(Path('.env'))

    # Merge .env and real environment (real env wins)
    combined = {**{k: v for k, v in dotenv_values.items() if k.startswith(ENV_PREFIX)},
                **{k: v for k, v in os.environ.items() if k.startswith(ENV_PREFIX)}}
    for raw_key, value in combined.items():
        path_parts = raw_key[len(ENV_PREFIX):].split("__")
        cursor: Dict[str, Any] = cfg
        for part in path_parts[:-1]:
            cursor = cursor.setdefault(part.lower(), {})  # type: ignore[assignment]
        cursor[path_parts[-1].lower()] = coerce_scalar(value)
    if overrides:
        cfg = deep_merge(cfg, overrides)

    _configure_logging(str(cfg.get('log_level', 'INFO')))

    return cfg


def load_typed_config(explicit_file: str | None = None, overrides: Dict[str, Any] | None = None):
    """Load configuration as typed AppConfig object.

    Raises:
        ValueError: If a value has the wrong type or range
    """
    from .config_types import AppConfig
    dict_config = load_config(explicit_file, overrides)
    return AppConfig.from_dict(dict_config)


def _configure_logging(level_str: str) -> None:
    """Configure Python logging based on configured level."""
    level_str = level_str.upper()
    level_map = {
        'DEBUG': logging.DEBUG,
        'INFO': logging.INFO,
        'WARNING': logging.WARNING,
        'ERROR': logging.ERROR,
        'CRITICAL': logging.CRITICAL,
    }
    level = level_map.get(level_str, logging.INFO)

    logging.basicConfig(
        level=level,
        format='%(message)s',
        force=True
    )


def coerce_scalar(value: str) -> Any:
    txt = value.strip()
    # JSON object or array
    if (txt.startswith('[') and txt.endswith(']')) or (txt.startswith('{') and txt.endswith('}')):
        try:
            return json.loads(txt)
        except ValueError:
            pass  # fall through to scalar heuristics
    lower = txt.lower()
    if lower in {"true", "yes"}:
        return True
    if lower in {"false", "no"}:
        return False
    if txt.isdigit() or (txt.startswith("-") and txt[1:].isdigit()):
        return int(txt)
    try:
        return float(txt)
    except ValueError:
        return txt

__all__ = [
    "load_config",
    "load_config_file",
    "load_typed_config",
    "deep_merge",
    "coerce_scalar",
    "parse_key_values",
    "config_file_candidates",
]
