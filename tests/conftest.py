"""
conftest.py

Shared pytest fixtures for the rena test suite.
"""

import os
import re
from pathlib import Path
from typing import Iterable, List

import pytest

from rena.core import Configuration

# Qt widgets must not need a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "gui: mark test as requiring GUI")


@pytest.fixture
def make_files():
    """Create empty files in a directory, return their paths."""
    def _make(directory: Path, names: Iterable[str]) -> List[Path]:
        paths = []
        for name in names:
            path = directory / name
            path.write_text("")
            paths.append(path)
        return paths
    return _make


@pytest.fixture
def listing():
    """Sorted names currently in a directory."""
    def _listing(directory: Path) -> List[str]:
        return sorted(os.listdir(directory))
    return _listing


@pytest.fixture
def config_for():
    """Build a Configuration with test-friendly defaults."""
    def _config(folder: Path, match: str = None, **kwargs) -> Configuration:
        if match is not None:
            kwargs["filter_pattern"] = re.compile(match)
        return Configuration(folder=folder, **kwargs)
    return _config
