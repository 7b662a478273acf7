"""
Abstract base class for upstream feeds.
Defines the contract that every feed connector must implement.
"""
from __future__ import annotations

import abc
import time
from typing import Any

from shared.utils.http_client import FeedConfigError, FeedError, FeedHTTPClient
from shared.utils.logging import get_logger

logger = get_logger(__name__)


class BaseFeed(abc.ABC):
    """
    Abstract base class for feed connectors.

    Subclasses implement _fetch(); the base class handles the HTTP
    lifecycle, API-key checks and timing. Errors propagate to the caller.
    """

    def __init__(self, http_client: FeedHTTPClient, api_key: str, key_env: str) -> None:
        self._http = http_client
        self._api_key = api_key
        self._key_env = key_env

    @property
    def name(self) -> str:
        return self._http.feed_name

    async def start(self) -> None:
        """Initialize the feed HTTP client."""
        await self._http.start()

    async def close(self) -> None:
        """Shutdown the feed HTTP client."""
        await self._http.close()

    def require_api_key(self) -> str:
        if not self._api_key:
            raise FeedConfigError(self.name, f"Missing {self._key_env} environment variable.")
        return self._api_key

    async def fetch(self) -> list[Any]:
        """Fetch the raw event collection."""
        start = time.perf_counter()
        try:
            events = await self._fetch()
        except FeedError as exc:
            logger.error(
                "feed_fetch_failed",
                feed=self.name,
                error=str(exc),
                latency_ms=round((time.perf_counter() - start) * 1000, 2),
            )
            raise
        logger.info(
            "feed_fetched",
            feed=self.name,
            events=len(events),
            latency_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        return events

    @abc.abstractmethod
    async def _fetch(self) -> list[Any]:
        """Feed-specific fetch logic; returns the list of raw event objects."""
        ...
