from livescore.services.scoreboard import Scoreboard, SynchronizedScoreboard, rank_matches
from livescore.services.replay import EventResult, FixtureReplay, ReplayResult

__all__ = [
    'Scoreboard', 'SynchronizedScoreboard', 'rank_matches',
    'FixtureReplay', 'ReplayResult', 'EventResult',
]
