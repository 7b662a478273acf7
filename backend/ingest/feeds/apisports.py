"""
API-Sports basketball connector (live-score feed).
"""
from __future__ import annotations

from typing import Any

from shared.config import Settings, get_settings
from shared.utils.http_client import FeedHTTPClient
from shared.utils.logging import get_logger

from ingest.feeds.base import BaseFeed

logger = get_logger(__name__)

APISPORTS_KEY_HEADER = "x-apisports-key"


class LiveScoreFeed(BaseFeed):
    """Fetches in-progress games for one league."""

    def __init__(self, http_client: FeedHTTPClient, api_key: str, league: str) -> None:
        super().__init__(http_client, api_key, key_env="APISPORTS_KEY")
        self._league = league

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **client_kwargs: Any) -> "LiveScoreFeed":
        settings = settings or get_settings()
        client = FeedHTTPClient(
            feed_name="apisports",
            label="API-Sports",
            base_url=settings.apisports_base_url,
            timeout_s=settings.feed_request_timeout_s,
            **client_kwargs,
        )
        return cls(client, settings.apisports_key, settings.apisports_league)

    async def _fetch(self) -> list[Any]:
        api_key = self.require_api_key()
        payload = await self._http.get_json(
            "/games",
            params={"league": self._league, "live": "all"},
            extra_headers={APISPORTS_KEY_HEADER: api_key},
        )
        games = payload.get("response") if isinstance(payload, dict) else None
        if not isinstance(games, list):
            logger.debug("apisports_no_games", league=self._league)
            return []
        return games
