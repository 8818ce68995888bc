"""Feed retrieval - caching and parsing of feed documents."""

from .cache import DEFAULT_MAX_AGE_SECONDS, FEEDS_DIRECTORY, FeedCache
from .parser import parse_feed
from .source import FeedParser, FeedSource

__all__ = [
    "DEFAULT_MAX_AGE_SECONDS",
    "FEEDS_DIRECTORY",
    "FeedCache",
    "FeedParser",
    "FeedSource",
    "parse_feed",
]
