"""Fixtures for feed loading tests."""

import pytest

from snarf.feeds import FeedCache

FIXED_NOW = 1_700_000_000.0
DAY = 24 * 60 * 60


@pytest.fixture
def now() -> float:
    """Fixed POSIX time used as the cache clock."""
    return FIXED_NOW


@pytest.fixture
def feed_cache(fetcher, file_store, now, real_emitter, mock_logger):
    """Provide a FeedCache with a 7 day threshold and a frozen clock."""
    return FeedCache(
        fetcher,
        file_store,
        max_age_seconds=7 * DAY,
        clock=lambda: now,
        emitter=real_emitter,
        logger=mock_logger,
    )
