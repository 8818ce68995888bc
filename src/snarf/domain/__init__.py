"""Domain layer - feed and job models, naming rules and exceptions."""

from .exceptions import (
    DispatcherAlreadyRunningError,
    FetchError,
    FileSystemError,
    ManagerNotInitializedError,
    ParseError,
    SnarfError,
)
from .feed import Enclosure, Item, ParsedFeed
from .jobs import Job, JobOutcome, JobResult
from .naming import extension_from_url, feed_key, slug

__all__ = [
    # Feed Models
    "Enclosure",
    "Item",
    "ParsedFeed",
    # Job Models
    "Job",
    "JobOutcome",
    "JobResult",
    # Naming
    "extension_from_url",
    "feed_key",
    "slug",
    # Exceptions
    "SnarfError",
    "FetchError",
    "ParseError",
    "FileSystemError",
    "DispatcherAlreadyRunningError",
    "ManagerNotInitializedError",
]
