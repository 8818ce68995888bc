"""CLI state container."""

import typing as t

from ..config.settings import Settings
from ..manager import FeedManager

ManagerFactory = t.Callable[..., FeedManager]


class CLIState:
    """Application state shared by CLI commands.

    Holds the base Settings and the factory used to build a FeedManager, so
    tests can swap in a mocked manager.
    """

    def __init__(self, settings: Settings, manager_factory: ManagerFactory | None = None):
        self.settings = settings
        self._manager_factory = manager_factory or FeedManager

    def create_manager(self, **kwargs: t.Any) -> FeedManager:
        return self._manager_factory(**kwargs)
