"""Tests for fixture script loading and validation."""

import pytest

from livescore import fixture_config
from livescore.fixture_config import (
    FixtureConfigError,
    list_fixtures,
    load_fixture_file,
    load_fixture_script,
)

SIMPLE = """
    meta:
      fixture_id: simple
      display_name: Simple Fixture
    events:
      - {action: start, home: Mexico, away: Canada}
      - {action: update, home: Mexico, away: Canada, score: [0, 5]}
      - {action: summary}
      - {action: finish, home: Mexico, away: Canada}
"""


class TestBuiltinFixtures:

    def test_world_cup_ships_with_package(self):
        script = load_fixture_script("world_cup")

        assert script.fixture_id == "world_cup"
        assert script.display_name == "Live Football World Cup"
        assert [e.action for e in script.events].count("start") == 5
        assert [e.action for e in script.events].count("summary") == 2

    def test_world_cup_is_listed(self):
        assert "world_cup" in list_fixtures()


class TestLoading:

    def test_load_from_directory(self, tmp_path, write_fixture):
        write_fixture("simple", SIMPLE)

        script = load_fixture_script("simple", str(tmp_path))

        assert [e.action for e in script.events] == ["start", "update", "summary", "finish"]
        assert script.events[1].score == (0, 5)
        assert script.events[0].start_order_hint is None

    def test_yml_extension_accepted(self, tmp_path, write_fixture):
        write_fixture("simple", SIMPLE, ext=".yml")

        assert load_fixture_script("simple", str(tmp_path)).fixture_id == "simple"

    def test_cache_returns_same_object(self, tmp_path, write_fixture):
        write_fixture("simple", SIMPLE)

        first = load_fixture_script("simple", str(tmp_path))
        assert load_fixture_script("simple", str(tmp_path)) is first
        assert load_fixture_script("simple", str(tmp_path), use_cache=False) is not first

    def test_configured_directory_searched_before_builtins(self, tmp_path, write_fixture, monkeypatch):
        write_fixture("simple", SIMPLE)
        monkeypatch.setitem(fixture_config.config, "LIVESCORE_FIXTURES_DIR", str(tmp_path))

        assert load_fixture_script("simple").fixture_id == "simple"
        assert {"simple", "world_cup"} <= set(list_fixtures())

    def test_list_fixtures_in_directory(self, tmp_path, write_fixture):
        write_fixture("b_fixture", SIMPLE)
        write_fixture("a_fixture", SIMPLE, ext=".yml")
        (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")

        assert list_fixtures(str(tmp_path)) == ["a_fixture", "b_fixture"]

    def test_list_fixtures_missing_directory(self, tmp_path):
        assert list_fixtures(str(tmp_path / "nope")) == []


class TestErrors:

    def test_unknown_fixture(self, tmp_path):
        with pytest.raises(FixtureConfigError, match="not found"):
            load_fixture_script("missing", str(tmp_path))

    def test_empty_fixture_id(self):
        with pytest.raises(FixtureConfigError):
            load_fixture_script("  ")

    def test_missing_file(self, tmp_path):
        with pytest.raises(FixtureConfigError, match="not found"):
            load_fixture_file(str(tmp_path / "missing.yaml"))

    def test_malformed_yaml(self, write_fixture):
        path = write_fixture("broken", "meta: [unclosed\n")

        with pytest.raises(FixtureConfigError, match="Failed to parse YAML"):
            load_fixture_file(str(path))

    def test_invalid_utf8(self, tmp_path):
        (tmp_path / "garbled.yaml").write_bytes(b"meta:\n  fixture_id: garbled\n  name: \xff\xfe\n")

        with pytest.raises(FixtureConfigError, match="not valid UTF-8"):
            load_fixture_script("garbled", str(tmp_path))

    def test_top_level_must_be_mapping(self, write_fixture):
        path = write_fixture("listy", "- action: summary\n")

        with pytest.raises(FixtureConfigError, match="mapping"):
            load_fixture_file(str(path))

    def test_missing_meta(self, write_fixture):
        path = write_fixture("nometa", "events: []\n")

        with pytest.raises(FixtureConfigError, match="Invalid fixture script"):
            load_fixture_file(str(path))

    @pytest.mark.parametrize("event", [
        "{action: kickoff, home: A, away: B}",
        "{action: start, home: A}",
        "{action: finish, away: B}",
        "{action: update, home: A, away: B}",
        "{action: update, home: A, away: B, score: [1]}",
        "{action: start, home: A, away: B, start_order_hint: -1}",
        "{action: start, home: A, away: B, score: [1, 0]}",
        "{action: finish, home: A, away: B, score: [1, 0]}",
        "{action: summary, score: [1, 0]}",
        "{action: update, home: A, away: B, score: [1, 0], start_order_hint: 2}",
        "{action: finish, home: A, away: B, start_order_hint: 0}",
        "{action: summary, start_order_hint: 0}",
    ])
    def test_invalid_events_rejected(self, write_fixture, event):
        path = write_fixture("bad", f"""
            meta: {{fixture_id: bad, display_name: Bad}}
            events:
              - {event}
        """)

        with pytest.raises(FixtureConfigError):
            load_fixture_file(str(path))

    def test_negative_score_passes_schema(self, write_fixture):
        path = write_fixture("negative", """
            meta: {fixture_id: negative, display_name: Negative}
            events:
              - {action: update, home: A, away: B, score: [-1, 0]}
        """)

        assert load_fixture_file(str(path)).events[0].score == (-1, 0)
