"""
Shared fixtures for gridsnake tests.
"""

import os
import sys

import pytest

# Add repo root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class ScriptedRng:
    """
    Deterministic stand-in for random.Random used by food placement.

    randrange() returns the scripted values in order and starts over when
    they run out, so food lands exactly where a test wants it.
    """

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def randrange(self, n):
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        assert 0 <= value < n, f"scripted value {value} outside [0, {n})"
        return value

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def scripted_rng():
    """Factory fixture: scripted_rng(x0, y0, x1, y1, ...) -> ScriptedRng."""
    def make(*values):
        return ScriptedRng(values)
    return make


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    """Keep a developer's .env file out of the tests."""
    import gridsnake.domain.config as config_module
    monkeypatch.setattr(config_module, "load_dotenv", lambda: None)
