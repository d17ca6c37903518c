"""
Match factories.

The scoreboard never constructs matches itself; it is handed a factory,
any callable ``(home_team, away_team, start_order_hint) -> Match``. Tests
substitute a mock, the CLI uses ``SequentialMatchFactory`` for reproducible
output, and ``create_match`` is the clock-based default.
"""

import itertools
from typing import Callable

from livescore.models.match import Match

MatchFactory = Callable[[str, str, int], Match]


def create_match(home_team: str, away_team: str, start_order_hint: int = 0) -> Match:
    """Default factory: start order taken from the monotonic clock plus the hint."""
    return Match(home_team, away_team, start_order_hint)


class SequentialMatchFactory:
    """
    Factory whose start orders come from an internal counter instead of a clock.

    Each match created consumes one tick, so start orders strictly increase in
    creation order for any non-decreasing sequence of hints. Useful when
    summaries must be reproducible run to run.

    Usage:
        factory = SequentialMatchFactory()
        scoreboard = Scoreboard(factory)
    """

    def __init__(self, start: int = 0):
        self._ticks = itertools.count(start)

    def __call__(self, home_team: str, away_team: str, start_order_hint: int = 0) -> Match:
        return Match(home_team, away_team, start_order_hint, clock=self._next_tick)

    def _next_tick(self) -> int:
        return next(self._ticks)
