"""
The Odds API connector (betting-odds feed).
"""
from __future__ import annotations

from typing import Any

from shared.config import Settings, get_settings
from shared.utils.http_client import FeedHTTPClient
from shared.utils.logging import get_logger

from ingest.feeds.base import BaseFeed

logger = get_logger(__name__)


class OddsFeed(BaseFeed):
    """Fetches moneyline odds for every upcoming and in-progress game of a sport."""

    def __init__(
        self,
        http_client: FeedHTTPClient,
        api_key: str,
        sport: str,
        regions: str = "us",
        markets: str = "h2h",
        odds_format: str = "american",
    ) -> None:
        super().__init__(http_client, api_key, key_env="ODDS_API_KEY")
        self._sport = sport
        self._params = {"regions": regions, "markets": markets, "oddsFormat": odds_format}

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **client_kwargs: Any) -> "OddsFeed":
        settings = settings or get_settings()
        client = FeedHTTPClient(
            feed_name="odds_api",
            label="The Odds API",
            base_url=settings.odds_base_url,
            timeout_s=settings.feed_request_timeout_s,
            **client_kwargs,
        )
        return cls(
            client,
            settings.odds_api_key,
            settings.odds_sport,
            regions=settings.odds_regions,
            markets=settings.odds_markets,
            odds_format=settings.odds_format,
        )

    async def _fetch(self) -> list[Any]:
        api_key = self.require_api_key()
        payload = await self._http.get_json(
            f"/sports/{self._sport}/odds/",
            params={"apiKey": api_key, **self._params},
        )
        if not isinstance(payload, list):
            logger.debug("odds_api_unexpected_payload", sport=self._sport, kind=type(payload).__name__)
            return []
        return payload
