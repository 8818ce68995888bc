"""Pytest configuration and fixtures for snarf tests."""

import typing as t
from pathlib import Path

import loguru
import pytest
import pytest_asyncio
from aiohttp import ClientSession
from blockbuster import BlockBuster, blockbuster_ctx
from typer.testing import CliRunner

from snarf.app import create_app
from snarf.cli.app import create_cli_app
from snarf.config.settings import Environment, LogLevel, Settings
from snarf.domain.feed import Enclosure, Item, ParsedFeed
from snarf.domain.jobs import Job
from snarf.downloads import Fetcher
from snarf.events import EventEmitter
from snarf.infrastructure.logging import reset_logging
from snarf.storage import FileStore


@pytest.fixture(autouse=True)
def blockbuster() -> t.Iterator[BlockBuster]:
    """Detect blocking calls in async event loop during tests.

    This fixture automatically activates Blockbuster for all tests,
    which will raise a BlockingError if any blocking I/O operations
    (like synchronous file.write()) are called within an async context.
    """
    with blockbuster_ctx(
        scanned_modules=["snarf"],
    ) as bb:
        # Third party modules use these functions, so we deactivate them
        # for now
        bb.functions["os.path.abspath"].deactivate()

        yield bb


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Provide test-specific settings writing under tmp_path."""
    return Settings(
        environment=Environment.TESTING,
        log_level=LogLevel.CRITICAL,  # Minimal logging during tests
        destination_dir=tmp_path,
        cooldown_seconds=0,
    )


@pytest.fixture
def test_app(test_settings):
    """Provide a test app with clean logging state."""
    reset_logging()
    app = create_app(settings=test_settings)
    yield app
    reset_logging()


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger for testing that captures log calls."""
    logger = mocker.Mock(spec=loguru.logger)
    return logger


@pytest.fixture
def real_emitter(mock_logger):
    """Provide a real EventEmitter for testing actual event emission."""
    return EventEmitter(mock_logger)


@pytest.fixture(autouse=True)
def clean_logging_state():
    """Automatically reset logging before each test for isolation."""
    reset_logging()
    yield
    reset_logging()


@pytest_asyncio.fixture
async def aio_client():
    """Provide a real aiohttp ClientSession for integration testing."""
    session = ClientSession()
    yield session
    await session.close()


@pytest.fixture
def file_store(mock_logger) -> FileStore:
    """Provide a real FileStore with mocked logger."""
    return FileStore(mock_logger)


@pytest.fixture
def fetcher(aio_client, file_store, mock_logger) -> Fetcher:
    """Provide a real Fetcher with real client and mocked logger."""
    return Fetcher(aio_client, mock_logger, file_store=file_store)


@pytest.fixture
def make_item():
    """Factory fixture to create Items with enclosure URLs."""

    def _make_item(title: str = "Episode 1", *urls: str) -> Item:
        return Item(title=title, enclosures=tuple(Enclosure(url=url) for url in urls))

    return _make_item


@pytest.fixture
def make_job(make_item, tmp_path: Path):
    """Factory fixture to create Jobs pointing under tmp_path."""

    def _make_job(
        title: str = "Episode 1",
        *urls: str,
        sequence_index: int = 0,
        destination: Path | None = None,
    ) -> Job:
        return Job(
            sequence_index=sequence_index,
            item=make_item(title, *urls),
            destination_directory=destination or tmp_path / "my_show",
        )

    return _make_job


@pytest.fixture
def sample_feed(make_item) -> ParsedFeed:
    """A small parsed feed, newest item first like a real feed."""
    return ParsedFeed(
        title="My Show",
        items=(
            make_item("Ep 3", "https://example.com/ep3.mp3"),
            make_item("Ep 2"),
            make_item("Ep 1", "https://example.com/ep1.mp3"),
        ),
    )


@pytest.fixture
def rss_document() -> t.Callable[..., bytes]:
    """Factory fixture building RSS 2.0 documents.

    Items are (title, enclosure_url or None) pairs in document order.
    """

    def _rss_document(title: str, items: list[tuple[str, str | None]]) -> bytes:
        entries = []
        for item_title, url in items:
            enclosure = (
                f'<enclosure url="{url}" length="1024" type="audio/mpeg"/>' if url else ""
            )
            entries.append(f"<item><title>{item_title}</title>{enclosure}</item>")
        return (
            '<?xml version="1.0" encoding="UTF-8"?>'
            '<rss version="2.0"><channel>'
            f"<title>{title}</title><link>https://example.com</link>"
            "<description>Test feed</description>"
            f"{''.join(entries)}"
            "</channel></rss>"
        ).encode("utf-8")

    return _rss_document


# CLI-specific fixtures (shared across all tests)


@pytest.fixture
def cli_runner():
    """Provide Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def default_app():
    """Provide CLI app with default settings."""
    return create_cli_app()
