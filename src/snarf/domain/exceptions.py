"""Custom exceptions for snarf.

Feed-level failures (fetching or parsing the feed, preparing the destination)
are raised and abort the run. Item-level failures are caught by the download
decision and reported as results instead.
"""

from pathlib import Path


class SnarfError(Exception):
    """Base exception for snarf errors."""

    pass


class FetchError(SnarfError):
    """Raised when a URL cannot be retrieved.

    Covers transport failures and any response status outside 200-299.
    """

    def __init__(self, url: str, reason: str, status: int | None = None) -> None:
        self.url = url
        self.reason = reason
        self.status = status
        super().__init__(reason)


class ParseError(SnarfError):
    """Raised when a feed document cannot be parsed."""

    pass


class FileSystemError(SnarfError):
    """Raised when a directory or file cannot be created or inspected."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path}")


class DispatcherAlreadyRunningError(SnarfError):
    """Raised when a dispatcher is asked to run while a run is in progress."""

    pass


class ManagerNotInitializedError(SnarfError):
    """Raised when FeedManager is used before it has an HTTP session.

    This typically occurs when calling ``sync`` without entering the manager
    as a context manager or providing a client.
    """

    pass
