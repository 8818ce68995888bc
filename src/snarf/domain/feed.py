"""Structured feed models produced by parsing a feed document."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Enclosure:
    """A media attachment of a feed item."""

    url: str
    type: str | None = None
    length: int | None = None


@dataclass(frozen=True)
class Item:
    """A single feed entry. Only its first enclosure is ever downloaded."""

    title: str
    enclosures: tuple[Enclosure, ...] = ()

    @property
    def first_enclosure(self) -> Enclosure | None:
        return self.enclosures[0] if self.enclosures else None


@dataclass(frozen=True)
class ParsedFeed:
    """Feed title and items, in the order they appear in the document."""

    title: str
    items: tuple[Item, ...] = field(default_factory=tuple)
