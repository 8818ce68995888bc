"""Download operations - fetcher, per-item decision and worker pool."""

from .decision import DownloadDecider
from .dispatcher import Dispatcher, Sleeper
from .fetcher import Fetcher

__all__ = [
    "DownloadDecider",
    "Dispatcher",
    "Fetcher",
    "Sleeper",
]
