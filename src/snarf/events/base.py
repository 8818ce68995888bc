"""Emitter interface shared by the dispatcher, the feed cache and the CLI."""

import typing as t
from abc import ABC, abstractmethod


class BaseEmitter(ABC):
    """Publish/subscribe contract for pipeline events.

    Event types in use:
        feed.fetched: a feed URL was resolved to a local document
        job.completed: a worker produced the result of one job
    """

    @abstractmethod
    def on(self, event_type: str, handler: t.Callable[[t.Any], t.Any]) -> None:
        """Call ``handler`` for every future ``event_type`` event."""

    @abstractmethod
    def off(self, event_type: str, handler: t.Callable[[t.Any], t.Any]) -> None:
        """Stop calling ``handler`` for ``event_type``."""

    @abstractmethod
    async def emit(self, event_type: str, event_data: t.Any) -> None:
        """Deliver ``event_data`` to the handlers of ``event_type``."""
