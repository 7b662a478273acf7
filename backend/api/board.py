"""
Board service: fetches both feeds in parallel and runs one reconciliation pass.
"""
from __future__ import annotations

import asyncio
from datetime import datetime, timezone

from shared.config import Settings, get_settings
from shared.models.domain import BoardSnapshot, MergedEvent
from shared.models.feeds import parse_live_events, parse_odds_events
from shared.utils.logging import get_logger
from shared.utils.metrics import BOARD_BUILD, BOARD_GAMES, BOARD_ODDS_MATCHES, atrack_latency

from ingest.feeds import LiveScoreFeed, OddsFeed
from reconciler import ReconciliationEngine, TeamAliases

logger = get_logger(__name__)


class BoardService:
    """
    Owns the two feed connectors and the reconciliation engine.

    get_board() is safe to call concurrently; every call is an independent pass.
    """

    def __init__(
        self,
        live_feed: LiveScoreFeed,
        odds_feed: OddsFeed,
        engine: ReconciliationEngine | None = None,
    ) -> None:
        self._live_feed = live_feed
        self._odds_feed = odds_feed
        self._engine = engine or ReconciliationEngine()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "BoardService":
        settings = settings or get_settings()
        return cls(
            LiveScoreFeed.from_settings(settings),
            OddsFeed.from_settings(settings),
            ReconciliationEngine(TeamAliases(extra=settings.team_aliases)),
        )

    async def start(self) -> None:
        await self._live_feed.start()
        await self._odds_feed.start()

    async def close(self) -> None:
        await self._live_feed.close()
        await self._odds_feed.close()

    async def get_board(self) -> BoardSnapshot:
        """
        Fetch both feeds, merge them and stamp the pass with the current time.

        Raises:
            FeedError: If either feed collection cannot be obtained.
        """
        async with atrack_latency(BOARD_BUILD):
            live_payload, odds_payload = await asyncio.gather(
                self._live_feed.fetch(),
                self._odds_feed.fetch(),
            )
            games = self._engine.merge(
                parse_live_events(live_payload),
                parse_odds_events(odds_payload),
            )

        _record_board_metrics(games)
        logger.info(
            "board_merged",
            games=len(games),
            live_events=len(live_payload),
            odds_events=len(odds_payload),
        )
        return BoardSnapshot(updated_at=datetime.now(timezone.utc), games=games)


def _record_board_metrics(games: list[MergedEvent]) -> None:
    for game in games:
        if game.score is None:
            BOARD_GAMES.labels(score_source="none").inc()
        elif game.score.estimated:
            BOARD_GAMES.labels(score_source="estimated").inc()
        else:
            BOARD_GAMES.labels(score_source="direct").inc()

        matched = game.odds.home_moneyline is not None or game.odds.away_moneyline is not None
        BOARD_ODDS_MATCHES.labels(result="matched" if matched else "unmatched").inc()
