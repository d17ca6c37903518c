"""Tests for FixtureReplay."""

import json
from unittest.mock import MagicMock

import pytest

from livescore.fixture_config import FixtureScript, load_fixture_script
from livescore.models import SequentialMatchFactory
from livescore.services.replay import FixtureReplay
from livescore.services.scoreboard import Scoreboard


def _script(*events, fixture_id="test"):
    return FixtureScript.model_validate({
        "meta": {"fixture_id": fixture_id, "display_name": "Test Fixture"},
        "events": list(events),
    })


def _lines(summary):
    return [f"{e['home_team']} {e['home_score']} - {e['away_team']} {e['away_score']}" for e in summary]


class TestWorldCupReplay:

    def test_summaries_before_and_after_finish(self):
        result = FixtureReplay(load_fixture_script("world_cup")).run()

        assert result.success
        assert result.events_failed == []
        before, after = result.summaries
        assert _lines(before) == [
            "Uruguay 6 - Italy 6",
            "Spain 10 - Brazil 2",
            "Mexico 0 - Canada 5",
            "Argentina 3 - Australia 1",
            "Germany 2 - France 2",
        ]
        assert _lines(after) == [
            "Spain 10 - Brazil 2",
            "Mexico 0 - Canada 5",
            "Argentina 3 - Australia 1",
            "Germany 2 - France 2",
        ]

    def test_report_is_json_serialisable(self):
        result = FixtureReplay(load_fixture_script("world_cup")).run()

        doc = json.loads(json.dumps(result.to_document()))
        assert doc["fixture_id"] == "world_cup"
        assert doc["success"] is True
        assert len(doc["events"]) == 13
        assert doc["events"][10]["summary"][0]["total_score"] == 12
        assert result.duration_seconds is not None


class TestReplayBehaviour:

    def test_auto_hints_increase_per_start(self):
        scoreboard = MagicMock(spec=Scoreboard)
        script = _script(
            {"action": "start", "home": "A", "away": "B"},
            {"action": "start", "home": "C", "away": "D"},
            {"action": "start", "home": "E", "away": "F", "start_order_hint": 10},
            {"action": "start", "home": "G", "away": "H"},
        )

        FixtureReplay(script, scoreboard).run()

        hints = [c.args[2] for c in scoreboard.start_match.call_args_list]
        assert hints == [0, 1, 10, 11]

    def test_injected_scoreboard_is_used(self):
        scoreboard = Scoreboard(SequentialMatchFactory())
        script = _script({"action": "start", "home": "A", "away": "B"})

        FixtureReplay(script, scoreboard).run()

        assert len(scoreboard) == 1

    def test_stops_on_first_failure_by_default(self):
        script = _script(
            {"action": "start", "home": "A", "away": "B"},
            {"action": "finish", "home": "X", "away": "Y"},
            {"action": "summary"},
        )

        result = FixtureReplay(script).run()

        assert not result.success
        assert result.events_failed == [1]
        assert len(result.event_results) == 2
        assert "X" in result.error
        assert result.summaries == []

    def test_continue_on_error(self):
        script = _script(
            {"action": "start", "home": "A", "away": "B"},
            {"action": "update", "home": "A", "away": "B", "score": [-1, 0]},
            {"action": "update", "home": "A", "away": "B", "score": [2, 1]},
            {"action": "summary"},
        )

        result = FixtureReplay(script, stop_on_error=False).run()

        assert not result.success
        assert result.events_failed == [1]
        assert len(result.event_results) == 4
        assert _lines(result.summaries[0]) == ["A 2 - B 1"]

    def test_empty_summary_captured(self):
        result = FixtureReplay(_script({"action": "summary"})).run()

        assert result.success
        assert result.summaries == [[]]

    @pytest.mark.parametrize("event, description", [
        ({"action": "start", "home": "A", "away": "B"}, "start A vs B"),
        ({"action": "update", "home": "A", "away": "B", "score": [1, 0]}, "update A 1 - B 0"),
        ({"action": "summary"}, "summary"),
    ])
    def test_event_descriptions(self, event, description):
        script = _script({"action": "start", "home": "A", "away": "B"}, event)

        result = FixtureReplay(script).run()

        assert result.event_results[-1].description == description
