"""Deterministic names for cached feeds and downloaded files."""

import hashlib
from pathlib import PurePosixPath
from urllib.parse import urlparse


def slug(title: str) -> str:
    """Derive a filesystem name from a title.

    Lowercases, turns spaces into underscores and drops colons. Distinct
    titles can map to the same slug; callers do not detect this.

    Examples:
        >>> slug("My Show: Live")
        'my_show_live'
    """
    return title.lower().replace(" ", "_").replace(":", "")


def feed_key(feed_url: str) -> str:
    """Stable cache key for a feed URL, independent of the feed's content."""
    return hashlib.md5(feed_url.encode("utf-8")).hexdigest()  # noqa: S324


def extension_from_url(url: str) -> str | None:
    """Return the file extension of the last path segment of ``url``.

    The extension starts at the first ``.`` of the segment, so
    ``archive.tar.gz`` yields ``.tar.gz``. Query strings and fragments are
    ignored. Returns None when the segment has no ``.`` or the URL cannot
    be parsed.

    Examples:
        >>> extension_from_url("https://x.com/path/song.mp3?x=1")
        '.mp3'
        >>> extension_from_url("https://x.com/path/noext") is None
        True
    """
    try:
        path = urlparse(url).path
    except ValueError:
        # e.g. an unbalanced "[" in the host
        return None
    filename = PurePosixPath(path).name
    pivot = filename.find(".")
    if pivot == -1:
        return None
    return filename[pivot:]
