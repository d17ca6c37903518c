"""
Scoreboard - Registry of matches currently in progress.

Owns the collection of active matches and produces the ranked summary.
Matches are identified by the exact ordered (home, away) pair; the
scoreboard does not enforce uniqueness of that pair, so starting the same
fixture twice yields two entries and lookups act on the first one.

Not thread-safe. Wrap in SynchronizedScoreboard when shared between threads.
"""

import logging
from threading import RLock
from typing import List

from livescore.exceptions import InvalidArgumentError, MatchNotFoundError
from livescore.models.factory import MatchFactory
from livescore.models.match import Match, require_non_negative_int, require_team_name

logger = logging.getLogger(__name__)


def _is_pair(match: Match, home_team: str, away_team: str) -> bool:
    return match.home_team == home_team and match.away_team == away_team


def rank_matches(matches: List[Match]) -> List[Match]:
    """
    Return a new list ranked for the summary view.

    Primary key: total score, descending.
    Secondary key: start order, descending (later starts rank higher).
    The sort is stable, so exact ties keep their input order.
    """
    return sorted(matches, key=lambda m: (m.total_score, m.start_order), reverse=True)


class Scoreboard:
    """
    In-memory registry of live matches.

    Usage:
        scoreboard = Scoreboard(create_match)
        scoreboard.start_match("Mexico", "Canada", 0)
        scoreboard.update_score("Mexico", "Canada", 0, 5)
        for match in scoreboard.get_summary():
            print(match)
        scoreboard.finish_match("Mexico", "Canada")
    """

    def __init__(self, match_factory: MatchFactory):
        if match_factory is None:
            raise InvalidArgumentError("match_factory cannot be None")
        if not callable(match_factory):
            raise InvalidArgumentError(f"match_factory must be callable, got {type(match_factory).__name__}")
        self._match_factory = match_factory
        self._matches: List[Match] = []

    def __len__(self) -> int:
        return len(self._matches)

    def start_match(self, home_team: str, away_team: str, start_order_hint: int = 0) -> None:
        """
        Create a match through the factory and add it to the scoreboard.

        No duplicate check is made for the (home, away) pair.

        Raises:
            InvalidArgumentError: a team name is missing, or the factory rejected the input.
        """
        require_team_name(home_team, "home_team")
        require_team_name(away_team, "away_team")

        match = self._match_factory(home_team, away_team, start_order_hint)
        self._matches.append(match)
        logger.debug(f"[SCOREBOARD] start_match({home_team!r}, {away_team!r}, hint={start_order_hint}): active={len(self._matches)}")

    def update_score(self, home_team: str, away_team: str, home_score: int, away_score: int) -> None:
        """
        Set the score of the first active match for the exact (home, away) pair.

        Scores are validated before the lookup.

        Raises:
            InvalidArgumentError: either score is negative.
            MatchNotFoundError: no active match for the pair.
        """
        require_non_negative_int(home_score, "home_score")
        require_non_negative_int(away_score, "away_score")

        for match in self._matches:
            if _is_pair(match, home_team, away_team):
                match.update_score(home_score, away_score)
                logger.debug(f"[SCOREBOARD] update_score({home_team!r}, {away_team!r}) -> {home_score}-{away_score}")
                return

        logger.warning(f"[SCOREBOARD] update_score: no active match {home_team!r} vs {away_team!r}")
        raise MatchNotFoundError(f"Match not found: {home_team} vs {away_team}")

    def finish_match(self, home_team: str, away_team: str) -> None:
        """
        Remove every active match for the exact (home, away) pair.

        Raises:
            MatchNotFoundError: nothing was removed.
        """
        remaining = [m for m in self._matches if not _is_pair(m, home_team, away_team)]
        removed = len(self._matches) - len(remaining)
        if removed == 0:
            logger.warning(f"[SCOREBOARD] finish_match: no active match {home_team!r} vs {away_team!r}")
            raise MatchNotFoundError(f"Match to finish not found: {home_team} vs {away_team}")

        self._matches = remaining
        logger.debug(f"[SCOREBOARD] finish_match({home_team!r}, {away_team!r}): removed={removed}, active={len(remaining)}")

    def get_summary(self) -> List[Match]:
        """Active matches ranked by total score, then most recently started. Stored order is untouched."""
        return rank_matches(self._matches)


class SynchronizedScoreboard:
    """
    Scoreboard wrapper that serializes every operation behind one lock.

    Summary entries are the live Match objects; read their fields before
    handing them to another thread.
    """

    def __init__(self, scoreboard: Scoreboard):
        if scoreboard is None:
            raise InvalidArgumentError("scoreboard cannot be None")
        self._scoreboard = scoreboard
        self._lock = RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._scoreboard)

    def start_match(self, home_team: str, away_team: str, start_order_hint: int = 0) -> None:
        with self._lock:
            self._scoreboard.start_match(home_team, away_team, start_order_hint)

    def update_score(self, home_team: str, away_team: str, home_score: int, away_score: int) -> None:
        with self._lock:
            self._scoreboard.update_score(home_team, away_team, home_score, away_score)

    def finish_match(self, home_team: str, away_team: str) -> None:
        with self._lock:
            self._scoreboard.finish_match(home_team, away_team)

    def get_summary(self) -> List[Match]:
        with self._lock:
            return self._scoreboard.get_summary()
