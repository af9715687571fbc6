"""
tests/conftest.py
=================
Shared pytest fixtures: seeded randomness, throwaway settings files.
"""
import random

import pytest

from passcheck.policy import GeneratorPolicy


@pytest.fixture
def rng():
    """Deterministic random source for generator tests."""
    return random.Random(20240607)


@pytest.fixture
def make_policy():
    def _f(**kw):
        values = dict(
            length=16,
            include_uppercase=True,
            include_lowercase=True,
            include_numbers=True,
            include_symbols=True,
            exclude_similar=True,
            exclude_ambiguous=False,
        )
        values.update(kw)
        return GeneratorPolicy(**values)
    return _f


@pytest.fixture
def settings_path(tmp_path, monkeypatch):
    """Path to a settings file inside tmp_path; also exported via PASSCHECK_SETTINGS."""
    path = tmp_path / "data" / "settings.json"
    monkeypatch.setenv("PASSCHECK_SETTINGS", str(path))
    return path
