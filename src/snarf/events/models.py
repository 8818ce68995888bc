"""Events emitted while a feed is processed."""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from ..domain.jobs import JobResult


@dataclass
class FeedFetchedEvent:
    """Emitted after the feed cache resolves a feed to a local document.

    ``refreshed`` is False when a fresh cached copy was reused.
    """

    url: str
    path: Path
    refreshed: bool
    timestamp: datetime = field(default_factory=datetime.now)
    event_type: str = "feed.fetched"


@dataclass
class JobCompletedEvent:
    """Emitted by a dispatcher worker as soon as it has a job's result."""

    worker_id: int
    result: JobResult
    timestamp: datetime = field(default_factory=datetime.now)
    event_type: str = "job.completed"
