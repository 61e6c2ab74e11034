"""Pytest fixtures shared across the suite.

Config loading skips the user's yjump.conf and .env while
PYTEST_CURRENT_TEST is set, so defaults stay deterministic.
"""
import json
import pytest
from pathlib import Path
from typing import Any, Dict, List

from yjump.windows import Bounds, WindowInfo


@pytest.fixture
def test_config() -> Dict[str, Any]:
    """Provide a minimal configuration dict to pass as CLI ``obj``."""
    return {
        'log_level': 'DEBUG',
        'matching': {
            'case_sensitive': False,
            'max_results': 10,
        },
        'cache': {
            'enabled': True,
            'timeout_seconds': 2.0,
        },
    }


def _window(number: int, owner: str, title: str = "") -> Dict[str, Any]:
    return {
        'window_number': number,
        'owner_pid': 100 + number,
        'owner_name': owner,
        'window_title': title,
        'bounds': {'x': 0, 'y': 0, 'width': 800, 'height': 600},
    }


@pytest.fixture
def sample_window_dicts() -> List[Dict[str, Any]]:
    return [
        _window(1, 'Firefox', 'GitHub - Mozilla Firefox'),
        _window(2, 'Google Chrome', 'Inbox'),
        _window(3, 'Terminal', 'zsh'),
        _window(4, 'Visual Studio Code', 'README.md'),
        _window(5, 'Safari'),
    ]


@pytest.fixture
def sample_windows(sample_window_dicts) -> List[WindowInfo]:
    return [
        WindowInfo(
            window_number=d['window_number'],
            owner_pid=d['owner_pid'],
            owner_name=d['owner_name'],
            window_title=d['window_title'],
            bounds=Bounds(0, 0, 800, 600),
        )
        for d in sample_window_dicts
    ]


@pytest.fixture
def windows_file(tmp_path: Path, sample_window_dicts) -> Path:
    path = tmp_path / 'windows.json'
    path.write_text(json.dumps(sample_window_dicts), encoding='utf-8')
    return path
