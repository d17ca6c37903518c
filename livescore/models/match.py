"""
Match - A single fixture in progress.

A match has a fixed identity (home team, away team), a live score pair and a
start order used to break ties when ranking the scoreboard summary. The start
order is a creation-time proxy: a monotonic clock reading in milliseconds plus
a caller-supplied hint that keeps back-to-back creations distinct when the
clock has not advanced.
"""

import time
from typing import Any, Callable, Dict, Optional

from livescore.exceptions import InvalidArgumentError


def monotonic_millis() -> int:
    """Monotonic clock reading in whole milliseconds."""
    return time.monotonic_ns() // 1_000_000


def require_team_name(value: Any, ctx: str) -> str:
    """Return ``value`` if it is a non-empty team name, else raise InvalidArgumentError."""
    if value is None:
        raise InvalidArgumentError(f"{ctx} cannot be None")
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"Expected non-empty string for {ctx}, got {value!r}")
    return value


def require_non_negative_int(value: Any, ctx: str) -> int:
    """Return ``value`` if it is an int >= 0, else raise InvalidArgumentError."""
    # bool is an int subclass; True/False are never valid scores
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"Expected integer for {ctx}, got {value!r}")
    if value < 0:
        raise InvalidArgumentError(f"{ctx} cannot be negative (got {value})")
    return value


class Match:
    """
    A fixture in progress.

    Team names and start order are fixed at construction. Scores start at
    0-0 and change only through ``update_score``.

    Args:
        home_team: Name of the home team.
        away_team: Name of the away team.
        start_order_hint: Non-negative shift added to the clock reading so that
            matches created within the same clock tick still receive strictly
            increasing start orders when given increasing hints.
        clock: Callable returning the current tick (default: monotonic ms).

    Raises:
        InvalidArgumentError: a team name is missing/blank or the hint is negative.
    """

    __slots__ = ("_home_team", "_away_team", "_home_score", "_away_score", "_start_order")

    def __init__(
        self,
        home_team: str,
        away_team: str,
        start_order_hint: int = 0,
        *,
        clock: Optional[Callable[[], int]] = None,
    ):
        self._home_team = require_team_name(home_team, "home_team")
        self._away_team = require_team_name(away_team, "away_team")
        start_order_hint = require_non_negative_int(start_order_hint, "start_order_hint")

        self._home_score = 0
        self._away_score = 0
        self._start_order = (clock or monotonic_millis)() + start_order_hint

    # --- Identity ---

    @property
    def home_team(self) -> str:
        return self._home_team

    @property
    def away_team(self) -> str:
        return self._away_team

    @property
    def start_order(self) -> int:
        """Tie-break key: larger means started later."""
        return self._start_order

    # --- Score ---

    @property
    def home_score(self) -> int:
        return self._home_score

    @property
    def away_score(self) -> int:
        return self._away_score

    @property
    def total_score(self) -> int:
        return self._home_score + self._away_score

    def update_score(self, home_score: int, away_score: int) -> None:
        """
        Replace both scores.

        Scores may go down as well as up; only the sign is checked. Both values
        are validated before either is assigned.

        Raises:
            InvalidArgumentError: either score is negative or not an integer.
        """
        home_score = require_non_negative_int(home_score, "home_score")
        away_score = require_non_negative_int(away_score, "away_score")
        self._home_score = home_score
        self._away_score = away_score

    # --- Views ---

    def to_dict(self) -> Dict[str, Any]:
        return {
            "home_team": self._home_team,
            "away_team": self._away_team,
            "home_score": self._home_score,
            "away_score": self._away_score,
            "total_score": self.total_score,
            "start_order": self._start_order,
        }

    def __str__(self) -> str:
        return f"{self._home_team} {self._home_score} - {self._away_team} {self._away_score}"

    def __repr__(self) -> str:
        return (
            f"Match(home_team={self._home_team!r}, away_team={self._away_team!r}, "
            f"score={self._home_score}-{self._away_score}, start_order={self._start_order})"
        )
