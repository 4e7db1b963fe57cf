"""Test configuration and fixtures."""

import os
import sys
from pathlib import Path

import pytest

# Make the package importable without installation
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Tests rely on non-strict defaults; drop overrides from the environment
for _name in list(os.environ):
    if _name.startswith("SECRETSHARES_"):
        del os.environ[_name]

from secretshares.config import get_settings
from secretshares.engine import SecretSharingEngine

PRIME = 7919


@pytest.fixture(autouse=True)
def reset_settings():
    """Reset cached settings between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def engine():
    """Create a fresh secret sharing engine."""
    return SecretSharingEngine(strict=False)


@pytest.fixture
def strict_engine():
    """Engine with strict validation enabled."""
    return SecretSharingEngine(strict=True)


class FixedRandom:
    """Randomness source returning a constant and recording requested bounds."""

    def __init__(self, value: int):
        self.value = value
        self.bounds: list[int] = []

    def __call__(self, bound: int) -> int:
        self.bounds.append(bound)
        return self.value % bound


@pytest.fixture
def fixed_random():
    """Factory for deterministic randomness sources."""
    return FixedRandom
