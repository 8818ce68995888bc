"""In-process publish/subscribe for pipeline events."""

import inspect
import typing as t
from collections import defaultdict

from ..infrastructure.logging import get_logger
from .base import BaseEmitter

if t.TYPE_CHECKING:
    import loguru

EventHandler = t.Callable[[t.Any], t.Awaitable[None] | None]


class EventEmitter(BaseEmitter):
    """Dispatches events to handlers subscribed by event type.

    Handlers may be plain callables or coroutine functions. They run in
    subscription order. A handler that raises is logged and skipped so one
    faulty subscriber cannot break the pipeline that emitted the event.
    """

    def __init__(self, logger: "loguru.Logger" = get_logger(__name__)) -> None:
        self._logger = logger
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)

    def on(self, event_type: str, handler: EventHandler) -> None:
        self._handlers[event_type].append(handler)

    def off(self, event_type: str, handler: EventHandler) -> None:
        handlers = self._handlers.get(event_type)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def has_listeners(self, event_type: str) -> bool:
        return bool(self._handlers.get(event_type))

    async def emit(self, event_type: str, event_data: t.Any) -> None:
        # Copy so handlers can unsubscribe while being called
        for handler in list(self._handlers.get(event_type, ())):
            try:
                outcome = handler(event_data)
                if inspect.isawaitable(outcome):
                    await outcome
            except Exception as exc:
                self._logger.error(
                    f"Handler for {event_type} failed: {type(exc).__name__}: {exc}"
                )
