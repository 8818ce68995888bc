"""snarf - download the media enclosures of an RSS/Atom feed."""

from .config.settings import Settings
from .domain import Job, JobOutcome, JobResult, ParsedFeed
from .downloads import Dispatcher, DownloadDecider, Fetcher
from .feeds import FeedCache, FeedSource
from .jobs import build_jobs
from .manager import FeedManager, RunReport

__all__ = [
    "Dispatcher",
    "DownloadDecider",
    "FeedCache",
    "FeedManager",
    "FeedSource",
    "Fetcher",
    "Job",
    "JobOutcome",
    "JobResult",
    "ParsedFeed",
    "RunReport",
    "Settings",
    "build_jobs",
]
