"""Feed manager: runs one feed through the whole download pipeline.

This module provides the FeedManager class which owns the HTTP session and
wires the feed cache, job builder and dispatcher together.
"""

import time
import typing as t
from dataclasses import dataclass
from pathlib import Path

import aiohttp

from .config.settings import Settings
from .domain.exceptions import ManagerNotInitializedError
from .domain.jobs import JobOutcome, JobResult
from .downloads.decision import DownloadDecider
from .downloads.dispatcher import Dispatcher
from .downloads.fetcher import Fetcher
from .events import BaseEmitter, EventEmitter
from .feeds.cache import FeedCache
from .feeds.source import FeedSource
from .infrastructure.http import create_client_session
from .infrastructure.logging import get_logger
from .jobs.builder import build_jobs, destination_for
from .storage.filestore import FileStore

if t.TYPE_CHECKING:
    import loguru


@dataclass(frozen=True)
class RunReport:
    """Summary of one feed run."""

    feed_title: str
    destination: Path
    results: tuple[JobResult, ...]
    elapsed_seconds: float

    def _count(self, outcome: JobOutcome) -> int:
        return sum(1 for result in self.results if result.outcome == outcome)

    @property
    def downloaded_count(self) -> int:
        return self._count(JobOutcome.DOWNLOADED)

    @property
    def failed_count(self) -> int:
        return self._count(JobOutcome.FAILED)

    @property
    def skipped_count(self) -> int:
        return len(self.results) - self.downloaded_count - self.failed_count


class FeedManager:
    """Coordinates feed retrieval and concurrent enclosure downloads.

    Key responsibilities:
    - HTTP session lifecycle management
    - Building the component graph from Settings
    - Running the feed-level steps sequentially, then the worker pool

    Feed-level failures (FetchError, ParseError, FileSystemError) propagate
    out of ``sync``. Item-level failures are reported in the RunReport.

    Usage:
        async with FeedManager(settings) as manager:
            manager.emitter.on("job.completed", on_result)
            report = await manager.sync("https://example.com/rss")

    Or with custom dependencies:
        async with FeedManager(settings, client=custom_session) as manager:
            # Uses provided session instead of creating one
    """

    def __init__(
        self,
        settings: Settings | None = None,
        client: aiohttp.ClientSession | None = None,
        emitter: BaseEmitter | None = None,
        logger: "loguru.Logger" = get_logger(__name__),
        clock: t.Callable[[], float] = time.time,
    ) -> None:
        """Initialise the feed manager.

        Args:
            settings: Destination, worker count, cooldown and cache policy.
                Defaults to ``Settings()``.
            client: HTTP session for all requests. If None, one is created on
                entry and closed on exit.
            emitter: Receives ``feed.fetched`` and ``job.completed`` events.
                If None, an EventEmitter is created.
            logger: Logger instance passed to every component
            clock: Current POSIX time, used for cache freshness
        """
        self.settings = settings or Settings()
        self._client = client
        self._owns_client = False
        self._emitter = emitter or EventEmitter(logger)
        self._logger = logger
        self._clock = clock
        self.file_store = FileStore(logger)

    @property
    def emitter(self) -> BaseEmitter:
        return self._emitter

    @property
    def client(self) -> aiohttp.ClientSession:
        if self._client is None:
            raise ManagerNotInitializedError(
                "FeedManager must be used as a context manager or initialised with a client"
            )
        return self._client

    async def __aenter__(self) -> "FeedManager":
        if self._client is None:
            self._client = create_client_session()
            self._owns_client = True
        return self

    async def __aexit__(self, *args: t.Any) -> None:
        if self._owns_client and self._client is not None:
            await self._client.close()
            self._client = None
            self._owns_client = False

    def _build_components(self) -> tuple[FeedSource, Dispatcher]:
        fetcher = Fetcher(
            self.client,
            logger=self._logger,
            file_store=self.file_store,
            chunk_size=self.settings.chunk_size,
        )
        cache = FeedCache(
            fetcher,
            self.file_store,
            max_age_seconds=self.settings.feed_max_age_seconds,
            clock=self._clock,
            emitter=self._emitter,
            logger=self._logger,
        )
        source = FeedSource(cache, self.file_store, logger=self._logger)
        dispatcher = Dispatcher(
            DownloadDecider(fetcher, self.file_store, logger=self._logger),
            max_workers=self.settings.max_workers,
            cooldown=self.settings.cooldown_seconds,
            emitter=self._emitter,
            logger=self._logger,
        )
        return source, dispatcher

    async def sync(self, feed_url: str, destination: Path | None = None) -> RunReport:
        """Download every enclosure of ``feed_url`` not already on disk.

        Args:
            feed_url: RSS or Atom feed URL
            destination: Root directory for the feed cache and media.
                Defaults to ``settings.destination_dir``.

        Raises:
            FetchError: If the feed document cannot be fetched.
            ParseError: If the feed document cannot be parsed.
            FileSystemError: If the destination cannot be created.
        """
        started = time.monotonic()
        root = (destination or self.settings.destination_dir).expanduser()

        await self.file_store.ensure_directory(root)
        source, dispatcher = self._build_components()

        feed = await source.load(feed_url, root)
        self._logger.info(f"Checking feed contents of {feed.title!r}")

        jobs = build_jobs(feed, root)
        results = await dispatcher.run(jobs)

        return RunReport(
            feed_title=feed.title,
            destination=destination_for(feed, root),
            results=tuple(results),
            elapsed_seconds=time.monotonic() - started,
        )
