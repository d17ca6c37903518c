"""
Fixture Replay - Drive a scoreboard from a scripted sequence of events.

Applies each event of a FixtureScript to a Scoreboard in order, recording the
outcome of every event and capturing the ranked summary whenever the script
asks for one. This is the data-driven form of the classic scoreboard demo.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from livescore.exceptions import ScoreboardError
from livescore.fixture_config import FixtureEvent, FixtureScript
from livescore.models.factory import SequentialMatchFactory
from livescore.services.scoreboard import Scoreboard

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class EventResult:
    """Result of applying a single scripted event."""
    index: int
    action: str
    success: bool
    description: str = ""
    error: Optional[str] = None
    summary: Optional[List[Dict[str, Any]]] = None

    def to_document(self) -> Dict[str, Any]:
        doc: Dict[str, Any] = {
            "index": self.index,
            "action": self.action,
            "success": self.success,
            "description": self.description,
        }
        if self.error:
            doc["error"] = self.error
        if self.summary is not None:
            doc["summary"] = self.summary
        return doc


@dataclass
class ReplayResult:
    """Result of a full replay."""
    fixture_id: str
    display_name: str
    success: bool
    event_results: List[EventResult] = field(default_factory=list)
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    error: Optional[str] = None

    @property
    def events_failed(self) -> List[int]:
        return [er.index for er in self.event_results if not er.success]

    @property
    def summaries(self) -> List[List[Dict[str, Any]]]:
        """Every captured summary, in script order."""
        return [er.summary for er in self.event_results if er.summary is not None]

    @property
    def duration_seconds(self) -> Optional[float]:
        if self.started_at and self.completed_at:
            return (self.completed_at - self.started_at).total_seconds()
        return None

    def to_document(self) -> Dict[str, Any]:
        return {
            "fixture_id": self.fixture_id,
            "display_name": self.display_name,
            "success": self.success,
            "error": self.error,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "events": [er.to_document() for er in self.event_results],
        }


def _describe(event: FixtureEvent) -> str:
    if event.action == 'summary':
        return "summary"
    if event.action == 'update':
        return f"update {event.home} {event.score[0]} - {event.away} {event.score[1]}"
    return f"{event.action} {event.home} vs {event.away}"


class FixtureReplay:
    """
    Replays a fixture script against a scoreboard.

    Start events without an explicit ``start_order_hint`` get an
    auto-incrementing hint (0, 1, 2, ...), so fixtures started later in the
    script rank above earlier ones on equal totals.

    Usage:
        script = load_fixture_script("world_cup")
        result = FixtureReplay(script).run()
        for summary in result.summaries:
            ...
    """

    def __init__(
        self,
        script: FixtureScript,
        scoreboard: Optional[Scoreboard] = None,
        *,
        stop_on_error: bool = True,
    ):
        self.script = script
        self.scoreboard = scoreboard if scoreboard is not None else Scoreboard(SequentialMatchFactory())
        self.stop_on_error = stop_on_error
        self._next_hint = 0

    def _start_hint(self, event: FixtureEvent) -> int:
        if event.start_order_hint is None:
            hint = self._next_hint
        else:
            hint = event.start_order_hint
        self._next_hint = max(self._next_hint, hint + 1)
        return hint

    def apply(self, event: FixtureEvent) -> Optional[List[Dict[str, Any]]]:
        """Apply one event. Returns the ranked summary for 'summary' events, else None."""
        if event.action == 'start':
            self.scoreboard.start_match(event.home, event.away, self._start_hint(event))
        elif event.action == 'update':
            home_score, away_score = event.score
            self.scoreboard.update_score(event.home, event.away, home_score, away_score)
        elif event.action == 'finish':
            self.scoreboard.finish_match(event.home, event.away)
        elif event.action == 'summary':
            return [match.to_dict() for match in self.scoreboard.get_summary()]
        return None

    def run(self) -> ReplayResult:
        """Apply every event in order."""
        result = ReplayResult(
            fixture_id=self.script.fixture_id,
            display_name=self.script.display_name,
            success=True,
            started_at=_utc_now(),
        )
        total = len(self.script.events)
        logger.info(f"[REPLAY] {self.script.fixture_id}: {total} events")

        for index, event in enumerate(self.script.events):
            event_result = EventResult(index=index, action=event.action, success=False,
                                       description=_describe(event))
            try:
                event_result.summary = self.apply(event)
                event_result.success = True
            except ScoreboardError as e:
                logger.error(f"[REPLAY] {self.script.fixture_id}: event {index + 1}/{total} ({event_result.description}) failed: {e}")
                event_result.error = str(e)
                result.success = False
                if result.error is None:
                    result.error = f"event {index}: {e}"
                if self.stop_on_error:
                    result.event_results.append(event_result)
                    break
            result.event_results.append(event_result)

        result.completed_at = _utc_now()
        logger.info(f"[REPLAY] {self.script.fixture_id}: done success={result.success}, active={len(self.scoreboard)}")
        return result
