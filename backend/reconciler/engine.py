"""
Reconciliation engine: merges the live-score feed with the odds feed.

The live feed is authoritative for which games appear and in what order.
Odds-only games are dropped. No I/O, no shared state; a merge pass is a
pure function of its two inputs.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from shared.models.domain import MergedEvent, OddsQuote
from shared.models.feeds import RawLiveEvent, RawOddsEvent, parse_live_events
from shared.utils.logging import get_logger

from reconciler.odds import OddsIndex
from reconciler.scores import estimate_score, extract_live_score
from reconciler.teams import TeamAliases

logger = get_logger(__name__)

DEFAULT_HOME_NAME = "Home"
DEFAULT_AWAY_NAME = "Away"


class ReconciliationEngine:
    """Builds one MergedEvent per live game."""

    def __init__(self, teams: TeamAliases | None = None) -> None:
        self._teams = teams or TeamAliases()

    def merge(
        self,
        live_events: Iterable[RawLiveEvent | Mapping[str, Any]],
        odds_events: Iterable[RawOddsEvent | Mapping[str, Any]],
    ) -> list[MergedEvent]:
        index = OddsIndex.build(odds_events, teams=self._teams)
        merged = [self._merge_one(event, index) for event in parse_live_events(live_events)]
        logger.debug(
            "board_merge_complete",
            games=len(merged),
            odds_quotes=len(index),
        )
        return merged

    def _merge_one(self, event: RawLiveEvent, index: OddsIndex) -> MergedEvent:
        home_name = event.teams.home.name or DEFAULT_HOME_NAME
        away_name = event.teams.away.name or DEFAULT_AWAY_NAME

        odds = index.lookup(self._teams.key(away_name), self._teams.key(home_name))
        if odds is None:
            odds = OddsQuote()

        # The direct reading always wins over an estimate from other fields
        score = extract_live_score(event)
        if score is None:
            score = estimate_score(event)

        return MergedEvent(
            id=_event_id(event, home_name, away_name),
            home_name=home_name,
            away_name=away_name,
            score=score,
            odds=odds,
        )


def _event_id(event: RawLiveEvent, home_name: str, away_name: str) -> str:
    if event.id is None or event.id == "":
        return f"{away_name}-{home_name}"
    # JSON has one number type: 7.0 and 7 name the same game
    if isinstance(event.id, float) and event.id.is_integer():
        return str(int(event.id))
    return str(event.id)


def merge_board(
    live_events: Iterable[RawLiveEvent | Mapping[str, Any]],
    odds_events: Iterable[RawOddsEvent | Mapping[str, Any]],
    teams: TeamAliases | None = None,
) -> list[MergedEvent]:
    """Convenience wrapper for a single merge pass."""
    return ReconciliationEngine(teams).merge(live_events, odds_events)
