"""
Async HTTP client wrapper for upstream feed requests.
One attempt per request; timeouts, metrics and structured logging included.
"""
from __future__ import annotations

import time
from typing import Any, Optional

import httpx

from shared.config import get_settings
from shared.utils.logging import get_logger
from shared.utils.metrics import FEED_LATENCY, FEED_REQUESTS

logger = get_logger(__name__)


class FeedError(Exception):
    """Raised when a feed collection cannot be obtained."""

    def __init__(self, feed: str, message: str) -> None:
        self.feed = feed
        super().__init__(message)


class FeedConfigError(FeedError):
    """Raised when a feed is missing required configuration (e.g. an API key)."""


class FeedHTTPError(FeedError):
    """Raised on a non-2xx upstream response."""

    def __init__(self, feed: str, label: str, status_code: int, reason: str) -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(feed, f"{label} error: {status_code} {reason}".rstrip())


class FeedHTTPClient:
    """
    Async HTTP client tailored for JSON feed APIs.

    Args:
        feed_name: Metrics/logging label (e.g. "apisports").
        label: Human-readable provider name used in error messages.
        base_url: Provider base URL.
        headers: Default headers sent with every request.
        timeout_s: Request timeout; defaults to settings.feed_request_timeout_s.
        transport: Optional httpx transport (tests inject httpx.MockTransport).
    """

    def __init__(
        self,
        feed_name: str,
        label: str,
        base_url: str,
        headers: dict[str, str] | None = None,
        timeout_s: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = get_settings()
        self._feed = feed_name
        self._label = label
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_s or settings.feed_request_timeout_s
        self._default_headers = headers or {}
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def feed_name(self) -> str:
        return self._feed

    async def start(self) -> None:
        """Initialize the underlying httpx client."""
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers=self._default_headers,
            timeout=httpx.Timeout(self._timeout, connect=5.0),
            follow_redirects=True,
            transport=self._transport,
        )

    async def close(self) -> None:
        """Close the underlying httpx client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def get_json(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        extra_headers: dict[str, str] | None = None,
    ) -> Any:
        """
        Perform a GET request and decode the JSON body.

        Raises:
            FeedHTTPError: On a non-2xx response.
            FeedError: On an unbuildable request, transport failure, timeout or
                an undecodable body.
        """
        if not self._client:
            raise RuntimeError("FeedHTTPClient not started. Call start() first.")

        headers = {**self._default_headers, **(extra_headers or {})}
        start_time = time.perf_counter()
        status = "unknown"

        try:
            resp = await self._client.get(path, params=params, headers=headers)
            status = str(resp.status_code)

            if resp.is_error:
                logger.warning(
                    "feed_http_error",
                    feed=self._feed,
                    path=path,
                    status=resp.status_code,
                )
                raise FeedHTTPError(self._feed, self._label, resp.status_code, resp.reason_phrase)

            try:
                payload = resp.json()
            except ValueError as exc:
                status = "invalid_json"
                logger.warning("feed_invalid_json", feed=self._feed, path=path, error=str(exc))
                raise FeedError(self._feed, f"{self._label} returned invalid JSON") from exc

            logger.debug(
                "feed_request_success",
                feed=self._feed,
                path=path,
                status=resp.status_code,
                latency_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
            return payload

        except (httpx.InvalidURL, UnicodeEncodeError) as exc:
            # Raised while building the request, e.g. a non-ASCII key in a header
            status = "bad_request"
            logger.error("feed_request_invalid", feed=self._feed, path=path, error=str(exc))
            raise FeedError(self._feed, f"{self._label} request could not be built: {exc}") from exc

        except httpx.TimeoutException as exc:
            status = "timeout"
            logger.warning("feed_timeout", feed=self._feed, path=path)
            raise FeedError(self._feed, f"{self._label} request timed out") from exc

        except httpx.HTTPError as exc:
            status = "error"
            logger.error("feed_request_error", feed=self._feed, path=path, error=str(exc))
            raise FeedError(self._feed, f"{self._label} request failed: {exc}") from exc

        finally:
            FEED_REQUESTS.labels(feed=self._feed, status=status).inc()
            FEED_LATENCY.labels(feed=self._feed).observe(time.perf_counter() - start_time)
