"""
Shared pytest fixtures for the livescore test suite.
"""

import textwrap
from pathlib import Path

import pytest

from livescore import fixture_config
from livescore.models.factory import SequentialMatchFactory
from livescore.services.scoreboard import Scoreboard


@pytest.fixture(autouse=True)
def clear_fixture_cache():
    """Loaded fixture scripts must not leak between tests."""
    fixture_config.clear_cache()
    yield
    fixture_config.clear_cache()


@pytest.fixture
def scoreboard():
    """Scoreboard with deterministic start orders."""
    return Scoreboard(SequentialMatchFactory())


@pytest.fixture
def write_fixture(tmp_path):
    """Write a fixture script into tmp_path and return its path."""

    def _write(fixture_id: str, body: str, ext: str = ".yaml") -> Path:
        path = tmp_path / f"{fixture_id}{ext}"
        path.write_text(textwrap.dedent(body), encoding="utf-8")
        return path

    return _write
