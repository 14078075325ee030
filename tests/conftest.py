"""Shared fixtures for the Atlas test suite."""
from datetime import datetime, timezone

import pytest

from atlas.themes import get_theme

ATLAS_ENV_VARS = ("ATLAS_THEME", "ATLAS_SEED", "ATLAS_OUTPUT_DIR", "ATLAS_FORMATS", "ATLAS_LOG_LEVEL")


class MidpointSequence:
    """Stand-in sequence whose every draw lands mid-range, i.e. zero jitter."""

    def __init__(self):
        self.draws = 0

    def next(self):
        self.draws += 1
        return 0.5

    def next_float(self, lo, hi):
        self.draws += 1
        return (lo + hi) / 2

    def next_int(self, lo, hi):
        self.draws += 1
        return (lo + hi) // 2


@pytest.fixture
def midpoint_sequence():
    return MidpointSequence()


@pytest.fixture
def cyberpunk():
    return get_theme("cyberpunk")


@pytest.fixture
def minimal():
    return get_theme("minimal")


@pytest.fixture
def fixed_now():
    return datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def clean_atlas_env(monkeypatch):
    """Keep ATLAS_* variables (including ones a .env load sets) from leaking between tests."""
    for name in ATLAS_ENV_VARS:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    yield
