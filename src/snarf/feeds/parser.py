"""Conversion of raw feed documents into ParsedFeed models."""

import io
import typing as t

import feedparser

from ..domain.exceptions import ParseError
from ..domain.feed import Enclosure, Item, ParsedFeed
from ..infrastructure.logging import get_logger

if t.TYPE_CHECKING:
    import loguru


def _parse_length(value: t.Any) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _extract_enclosures(entry: t.Any) -> tuple[Enclosure, ...]:
    """Collect enclosures of an entry, keeping document order.

    feedparser exposes enclosure URLs as ``href``; entries without a URL are
    dropped.
    """
    enclosures = []
    for enclosure in entry.get("enclosures", []):
        url = enclosure.get("href") or enclosure.get("url")
        if not url:
            continue
        enclosures.append(
            Enclosure(
                url=url,
                type=enclosure.get("type") or None,
                length=_parse_length(enclosure.get("length")),
            )
        )
    return tuple(enclosures)


def parse_feed(
    data: bytes, logger: "loguru.Logger" = get_logger(__name__)
) -> ParsedFeed:
    """Parse an RSS or Atom document.

    feedparser is lenient and flags recoverable problems (wrong declared
    encoding, undefined entities) through ``bozo``. Those are logged and the
    parsed result is kept. A document that is not recognisable as any feed
    format raises.

    Args:
        data: Raw feed document
        logger: Logger for recoverable parse warnings

    Returns:
        The feed title and its items in document order.

    Raises:
        ParseError: If the document is not a recognisable feed.
    """
    parsed = feedparser.parse(io.BytesIO(data))

    if not parsed.get("version"):
        reason = parsed.get("bozo_exception") or "unrecognised feed format"
        raise ParseError(f"Could not parse feed: {reason}")

    if parsed.get("bozo"):
        logger.warning(f"Feed parsed with errors: {parsed.get('bozo_exception')}")

    items = tuple(
        Item(title=entry.get("title", ""), enclosures=_extract_enclosures(entry))
        for entry in parsed.entries
    )
    return ParsedFeed(title=parsed.feed.get("title", ""), items=items)
