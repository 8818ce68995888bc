"""Emitter used when nobody listens."""

import typing as t

from .base import BaseEmitter


class NullEmitter(BaseEmitter):
    """Drops every subscription and event.

    The dispatcher and feed cache default to it so they never need to check
    whether an emitter was supplied.
    """

    def on(self, event_type: str, handler: t.Callable[[t.Any], t.Any]) -> None:
        return None

    def off(self, event_type: str, handler: t.Callable[[t.Any], t.Any]) -> None:
        return None

    async def emit(self, event_type: str, event_data: t.Any) -> None:
        return None
