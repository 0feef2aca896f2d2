"""Unit tests for settings.py and errors.py."""

from __future__ import annotations

import pytest

import drawkit.settings as settings_module
from drawkit.errors import DrawkitError, EmptyInput, InsufficientPopulation, InvalidArgument
from drawkit.settings import Settings, get_settings


class TestSettings:
    def test_defaults(self, settings):
        assert settings.seed is None
        assert settings.exact_long_ranges is False

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("DRAWKIT_SEED", "7")
        monkeypatch.setenv("DRAWKIT_EXACT_LONG_RANGES", "true")
        s = Settings()
        assert s.seed == 7
        assert s.exact_long_ranges is True

    def test_unknown_env_ignored(self, monkeypatch):
        monkeypatch.setenv("DRAWKIT_NOT_A_SETTING", "x")
        assert Settings().seed is None

    def test_get_settings_cached(self, monkeypatch):
        monkeypatch.setattr(settings_module, "_settings", None)
        assert get_settings() is get_settings()


class TestErrors:
    def test_hierarchy(self):
        assert issubclass(InvalidArgument, DrawkitError)
        assert issubclass(InvalidArgument, ValueError)
        assert issubclass(EmptyInput, ValueError)
        assert issubclass(InsufficientPopulation, InvalidArgument)

    def test_insufficient_population_message(self):
        with pytest.raises(InsufficientPopulation, match="sample size larger than population"):
            raise InsufficientPopulation()
