"""Turning a parsed feed into download jobs."""

from pathlib import Path

from ..domain.feed import ParsedFeed
from ..domain.jobs import Job
from ..domain.naming import slug


def destination_for(feed: ParsedFeed, destination_root: Path) -> Path:
    """Directory that receives every download of ``feed``."""
    return destination_root / slug(feed.title)


def build_jobs(feed: ParsedFeed, destination_root: Path) -> list[Job]:
    """Create one job per item, oldest item first.

    Feeds list their newest item first, so jobs are produced in reverse
    document order. Each job keeps the item's document position as its
    ``sequence_index``.
    """
    destination = destination_for(feed, destination_root)
    return [
        Job(sequence_index=index, item=feed.items[index], destination_directory=destination)
        for index in reversed(range(len(feed.items)))
    ]
