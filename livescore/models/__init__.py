"""Match model and match factories."""

from livescore.models.match import Match
from livescore.models.factory import MatchFactory, SequentialMatchFactory, create_match

__all__ = [
    "Match",
    "MatchFactory",
    "SequentialMatchFactory",
    "create_match",
]
