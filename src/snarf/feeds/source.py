"""Feed loading: cache resolution followed by parsing."""

import asyncio
import typing as t
from pathlib import Path

from ..domain.feed import ParsedFeed
from ..infrastructure.logging import get_logger
from ..storage.filestore import FileStore
from .cache import FeedCache
from .parser import parse_feed

if t.TYPE_CHECKING:
    import loguru

FeedParser = t.Callable[[bytes], ParsedFeed]


class FeedSource:
    """Produces a ParsedFeed for a feed URL.

    Any failure here is feed-level: it propagates to the caller and the run
    is abandoned before a single job is dispatched.
    """

    def __init__(
        self,
        cache: FeedCache,
        file_store: FileStore,
        parser: FeedParser | None = None,
        logger: "loguru.Logger" = get_logger(__name__),
    ) -> None:
        self._cache = cache
        self._file_store = file_store
        self._logger = logger
        self._parser = parser or (lambda data: parse_feed(data, logger=logger))

    async def load(self, feed_url: str, base_directory: Path) -> ParsedFeed:
        """Resolve ``feed_url`` through the cache and parse the document.

        Raises:
            FetchError: If the feed cannot be downloaded.
            FileSystemError: If the cached document cannot be read.
            ParseError: If the document is not a valid feed.
        """
        path = await self._cache.resolve(feed_url, base_directory)
        data = await self._file_store.read_bytes(path)
        # feedparser is synchronous; keep it off the event loop
        feed = await asyncio.to_thread(self._parser, data)
        self._logger.debug(f"Parsed feed {feed.title!r} with {len(feed.items)} items")
        return feed
