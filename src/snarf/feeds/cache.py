"""Time-to-live cache for feed documents.

Each feed URL maps to one file under ``<base>/feeds``, named after a hash of
the URL. A cached document is reused until it is older than the freshness
threshold, judged purely by its modification time.
"""

import time
import typing as t
from pathlib import Path

from ..domain.naming import feed_key
from ..downloads.fetcher import Fetcher
from ..events import BaseEmitter, FeedFetchedEvent, NullEmitter
from ..infrastructure.logging import get_logger
from ..storage.filestore import FileStore

if t.TYPE_CHECKING:
    import loguru

FEEDS_DIRECTORY = "feeds"
DEFAULT_MAX_AGE_SECONDS = 7 * 24 * 60 * 60


class FeedCache:
    """Resolves a feed URL to a local, fresh-enough feed document.

    Usage:
        cache = FeedCache(fetcher, file_store)
        path = await cache.resolve("https://example.com/rss", Path("~/.config/snarf"))
    """

    def __init__(
        self,
        fetcher: Fetcher,
        file_store: FileStore,
        max_age_seconds: float = DEFAULT_MAX_AGE_SECONDS,
        clock: t.Callable[[], float] = time.time,
        emitter: BaseEmitter | None = None,
        logger: "loguru.Logger" = get_logger(__name__),
    ) -> None:
        """Initialise the feed cache.

        Args:
            fetcher: Used to download the feed document
            file_store: Used for existence and modification time checks
            max_age_seconds: Cached documents older than this are re-fetched
            clock: Returns the current POSIX time. Injectable for tests.
            emitter: Receives ``feed.fetched`` events. Defaults to NullEmitter.
            logger: Logger instance for cache decisions
        """
        self._fetcher = fetcher
        self._file_store = file_store
        self.max_age_seconds = max_age_seconds
        self._clock = clock
        self._emitter = emitter or NullEmitter()
        self._logger = logger

    def path_for(self, feed_url: str, base_directory: Path) -> Path:
        """Location of the cached document for ``feed_url``."""
        return base_directory / FEEDS_DIRECTORY / feed_key(feed_url)

    async def is_stale(self, path: Path) -> bool:
        """True when the document at ``path`` is older than the threshold."""
        age = self._clock() - await self._file_store.modified_at(path)
        return age > self.max_age_seconds

    async def resolve(self, feed_url: str, base_directory: Path) -> Path:
        """Return the path of a local copy of the feed, fetching if needed.

        Raises:
            FetchError: If the feed has to be fetched and the fetch fails.
            FileSystemError: If the cache directory cannot be created.
        """
        path = self.path_for(feed_url, base_directory)
        await self._file_store.ensure_directory(path.parent)

        if not await self._file_store.exists(path):
            self._logger.info(f"Downloading feed contents: {path}")
            await self._fetcher.fetch(feed_url, path)
            refreshed = True
        elif await self.is_stale(path):
            self._logger.info(f"Refreshing feed contents: {path}")
            await self._fetcher.fetch(feed_url, path)
            refreshed = True
        else:
            self._logger.debug(f"Using cached feed contents: {path}")
            refreshed = False

        await self._emitter.emit(
            "feed.fetched",
            FeedFetchedEvent(url=feed_url, path=path, refreshed=refreshed),
        )
        return path
