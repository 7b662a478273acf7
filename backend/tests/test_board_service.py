"""
Unit tests for the board service: parallel feed retrieval and merge.
"""
from __future__ import annotations

import asyncio
from typing import Any

import pytest

from api.board import BoardService
from shared.utils.http_client import FeedError


class FakeFeed:
    def __init__(self, payload: list[Any] | None = None, error: Exception | None = None) -> None:
        self._payload = payload or []
        self._error = error
        self.started = asyncio.Event()
        self.peer: FakeFeed | None = None
        self.closed = False

    async def start(self) -> None:
        pass

    async def close(self) -> None:
        self.closed = True

    async def fetch(self) -> list[Any]:
        self.started.set()
        if self.peer is not None:
            # Only completes if the other feed is fetched concurrently
            await asyncio.wait_for(self.peer.started.wait(), timeout=1.0)
        if self._error is not None:
            raise self._error
        return self._payload


LIVE = [{"id": "g1", "teams": {"home": {"name": "Lakers"}, "away": {"name": "Celtics"}},
         "scores": {"home": {"total": 100}, "away": {"total": 98}}}]
ODDS = [{"home_team": "Los Angeles Lakers", "away_team": "Boston Celtics",
         "bookmakers": [{"markets": [{"outcomes": [
             {"name": "Los Angeles Lakers", "price": -150},
             {"name": "Boston Celtics", "price": 130},
         ]}]}]}]


@pytest.mark.asyncio
async def test_get_board_merges_feeds() -> None:
    service = BoardService(FakeFeed(LIVE), FakeFeed(ODDS))  # type: ignore[arg-type]
    snapshot = await service.get_board()

    assert snapshot.updated_at.tzinfo is not None
    assert len(snapshot.games) == 1
    game = snapshot.games[0]
    assert game.id == "g1"
    assert game.odds.home_moneyline == -150
    assert game.score is not None and game.score.estimated is False


@pytest.mark.asyncio
async def test_feeds_fetched_concurrently() -> None:
    live, odds = FakeFeed(LIVE), FakeFeed(ODDS)
    live.peer, odds.peer = odds, live
    service = BoardService(live, odds)  # type: ignore[arg-type]

    snapshot = await service.get_board()
    assert len(snapshot.games) == 1


@pytest.mark.asyncio
async def test_feed_error_propagates() -> None:
    failing = FakeFeed(error=FeedError("odds_api", "The Odds API error: 500 Internal Server Error"))
    service = BoardService(FakeFeed(LIVE), failing)  # type: ignore[arg-type]

    with pytest.raises(FeedError, match="The Odds API error"):
        await service.get_board()


@pytest.mark.asyncio
async def test_close_closes_both_feeds() -> None:
    live, odds = FakeFeed(), FakeFeed()
    service = BoardService(live, odds)  # type: ignore[arg-type]
    await service.start()
    await service.close()
    assert live.closed and odds.closed


@pytest.mark.asyncio
async def test_serialized_snapshot_uses_camel_case() -> None:
    service = BoardService(FakeFeed(LIVE), FakeFeed(ODDS))  # type: ignore[arg-type]
    body = (await service.get_board()).model_dump(mode="json", by_alias=True)

    assert set(body) == {"updatedAt", "games"}
    assert body["games"][0]["odds"] == {"homeMoneyline": -150, "awayMoneyline": 130}
