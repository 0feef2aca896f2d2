"""Shared fixtures for unit tests."""

from __future__ import annotations

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Force deterministic settings before any module imports Settings()
os.environ.pop("DRAWKIT_SEED", None)
os.environ["DRAWKIT_EXACT_LONG_RANGES"] = "false"

from drawkit.rand import RandomSource  # noqa: E402
from drawkit.settings import Settings  # noqa: E402


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def rng(settings):
    return RandomSource(42, settings=settings)
