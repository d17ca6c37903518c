"""
Fixture script loader.

A fixture script is a YAML file describing a sequence of scoreboard events
(start, update, finish, summary) that the replay service applies to a
scoreboard. Scripts are validated with pydantic after loading.

Built-in scripts live in ``livescore/fixtures/<fixture_id>.yaml`` and are
shipped as package data. An extra directory can be configured through
``LIVESCORE_FIXTURES_DIR`` or passed explicitly.

Example:

    meta:
      fixture_id: world_cup
      display_name: Live Football World Cup
    events:
      - {action: start, home: Mexico, away: Canada}
      - {action: update, home: Mexico, away: Canada, score: [0, 5]}
      - {action: summary}
      - {action: finish, home: Mexico, away: Canada}
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Literal, Optional, Tuple

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from livescore.config import config

logger = logging.getLogger(__name__)

FIXTURE_EXTENSIONS = (".yaml", ".yml")

_BUILTIN_FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")


class FixtureConfigError(ValueError):
    pass


# --- Schema ---


class FixtureMeta(BaseModel):
    fixture_id: str = Field(..., min_length=1)
    display_name: str = Field(..., min_length=1)


class FixtureEvent(BaseModel):
    """One scripted scoreboard operation."""
    action: Literal['start', 'update', 'finish', 'summary']
    home: Optional[str] = None
    away: Optional[str] = None
    # Sign is not checked here; negative scores reach the scoreboard and fail there
    score: Optional[Tuple[int, int]] = Field(None, description="(home, away) for 'update'")
    start_order_hint: Optional[int] = Field(None, ge=0, description="Explicit hint for 'start'")

    @model_validator(mode='after')
    def check_action_fields(self):
        if self.score is not None and self.action != 'update':
            raise ValueError(f"score only applies to 'update' events, not '{self.action}'")
        if self.start_order_hint is not None and self.action != 'start':
            raise ValueError(f"start_order_hint only applies to 'start' events, not '{self.action}'")
        if self.action == 'summary':
            return self
        if not self.home or not self.away:
            raise ValueError(f"'{self.action}' event requires both home and away")
        if self.action == 'update' and self.score is None:
            raise ValueError("'update' event requires score: [home, away]")
        return self


class FixtureScript(BaseModel):
    meta: FixtureMeta
    events: List[FixtureEvent] = Field(default_factory=list)

    @property
    def fixture_id(self) -> str:
        return self.meta.fixture_id

    @property
    def display_name(self) -> str:
        return self.meta.display_name


# --- Loader infrastructure ---


def _load_yaml(path: str) -> Dict[str, Any]:
    """Read a fixture file as UTF-8 and parse it; every failure surfaces as FixtureConfigError."""
    try:
        with open(path, "rb") as f:
            payload = f.read()
    except FileNotFoundError as e:
        raise FixtureConfigError(f"Fixture script not found: {path}") from e
    except OSError as e:
        raise FixtureConfigError(f"Cannot read fixture script: {path}: {e}") from e

    try:
        text = payload.decode("utf-8")
    except UnicodeDecodeError as e:
        raise FixtureConfigError(f"Fixture script is not valid UTF-8: {path}: {e}") from e

    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise FixtureConfigError(f"Failed to parse YAML: {path}: {e}") from e

    if not isinstance(data, dict):
        raise FixtureConfigError(f"Fixture script must be a mapping at top-level: {path}")
    return data


def _search_dirs(fixtures_dir: Optional[str]) -> List[str]:
    if fixtures_dir:
        return [fixtures_dir]
    dirs = []
    if config.get("LIVESCORE_FIXTURES_DIR"):
        dirs.append(config["LIVESCORE_FIXTURES_DIR"])
    dirs.append(_BUILTIN_FIXTURES_DIR)
    return dirs


def load_fixture_file(path: str) -> FixtureScript:
    """
    Load and validate a single fixture script file.

    Raises:
        FixtureConfigError: file missing or unreadable, not UTF-8, bad YAML, or schema violation
    """
    raw = _load_yaml(path)
    try:
        script = FixtureScript.model_validate(raw)
    except ValidationError as e:
        raise FixtureConfigError(f"Invalid fixture script {path}: {e}") from e
    logger.debug(f"[FIXTURES] Loaded {script.fixture_id} ({len(script.events)} events) from {path}")
    return script


_CACHE: Dict[str, FixtureScript] = {}


def load_fixture_script(
    fixture_id: str,
    fixtures_dir: Optional[str] = None,
    *,
    use_cache: bool = True,
) -> FixtureScript:
    """
    Load a fixture script by id.

    Args:
        fixture_id: Script identifier, the file name without extension (e.g. 'world_cup')
        fixtures_dir: Directory to search (default: configured dir, then built-ins)
        use_cache: Whether to cache loaded scripts

    Returns:
        Validated FixtureScript
    """
    fixture_id = (fixture_id or "").strip()
    if not fixture_id:
        raise FixtureConfigError("fixture_id must be a non-empty string")

    dirs = _search_dirs(fixtures_dir)
    for directory in dirs:
        for ext in FIXTURE_EXTENSIONS:
            path = os.path.join(directory, f"{fixture_id}{ext}")
            if not os.path.isfile(path):
                continue

            if use_cache and path in _CACHE:
                return _CACHE[path]

            script = load_fixture_file(path)
            if script.fixture_id != fixture_id:
                logger.warning(f"[FIXTURES] {path} declares fixture_id={script.fixture_id!r}, loaded as {fixture_id!r}")
            if use_cache:
                _CACHE[path] = script
            return script

    raise FixtureConfigError(f"Fixture script not found: {fixture_id} (searched {', '.join(dirs)})")


def list_fixtures(fixtures_dir: Optional[str] = None) -> List[str]:
    """Sorted ids of every fixture script found in the search directories."""
    found = set()
    for directory in _search_dirs(fixtures_dir):
        if not os.path.isdir(directory):
            logger.warning(f"[FIXTURES] Fixtures directory not found: {directory}")
            continue
        for name in os.listdir(directory):
            stem, ext = os.path.splitext(name)
            if ext in FIXTURE_EXTENSIONS:
                found.add(stem)
    return sorted(found)


def clear_cache() -> None:
    _CACHE.clear()
