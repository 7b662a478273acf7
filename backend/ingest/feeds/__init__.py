from ingest.feeds.apisports import LiveScoreFeed
from ingest.feeds.base import BaseFeed
from ingest.feeds.odds_api import OddsFeed

__all__ = [
    "BaseFeed",
    "LiveScoreFeed",
    "OddsFeed",
]
