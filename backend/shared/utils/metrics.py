"""
Lightweight metrics collection for Live Board.
Wraps prometheus_client; the reconciliation core itself records nothing.
"""
from __future__ import annotations

import time
from contextlib import asynccontextmanager
from typing import AsyncIterator

from prometheus_client import Counter, Histogram, start_http_server

from shared.config import get_settings
from shared.utils.logging import get_logger

logger = get_logger(__name__)

# ── Counters ────────────────────────────────────────────────────────────
FEED_REQUESTS = Counter(
    "lb_feed_requests_total",
    "Total upstream feed HTTP requests",
    ["feed", "status"],
)
BOARD_GAMES = Counter(
    "lb_board_games_total",
    "Merged board games by score source",
    ["score_source"],
)
BOARD_ODDS_MATCHES = Counter(
    "lb_board_odds_matches_total",
    "Merged board games by odds lookup result",
    ["result"],
)

# ── Histograms ──────────────────────────────────────────────────────────
FEED_LATENCY = Histogram(
    "lb_feed_latency_seconds",
    "Upstream feed request latency in seconds",
    ["feed"],
    buckets=(0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)
BOARD_BUILD = Histogram(
    "lb_board_build_seconds",
    "Time to fetch both feeds and merge the board",
    buckets=(0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)


@asynccontextmanager
async def atrack_latency(histogram: Histogram) -> AsyncIterator[None]:
    """Async context manager to track operation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        histogram.observe(time.perf_counter() - start)


def start_metrics_server(port: int | None = None) -> None:
    """Start the Prometheus metrics HTTP server."""
    settings = get_settings()
    if not settings.metrics_enabled:
        return
    metrics_port = port or settings.metrics_port
    try:
        start_http_server(metrics_port)
        logger.info("metrics_server_started", port=metrics_port)
    except OSError as exc:
        logger.warning("metrics_server_failed", error=str(exc), port=metrics_port)
