"""Event infrastructure - event emitter and event types."""

from .base import BaseEmitter
from .emitter import EventEmitter, EventHandler
from .models import FeedFetchedEvent, JobCompletedEvent
from .null import NullEmitter

__all__ = [
    # Base and implementations
    "BaseEmitter",
    "EventEmitter",
    "EventHandler",
    "NullEmitter",
    # Events
    "FeedFetchedEvent",
    "JobCompletedEvent",
]
