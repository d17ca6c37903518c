"""Errors raised by the scoreboard core."""


class ScoreboardError(Exception):
    """Base class for every error raised by the scoreboard core."""


class InvalidArgumentError(ScoreboardError, ValueError):
    """An input violated a precondition. Raised before any state changes."""


class MatchNotFoundError(ScoreboardError, LookupError):
    """No active match exists for the requested (home, away) pair."""
