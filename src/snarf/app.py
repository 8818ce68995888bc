"""Application bootstrap shared by the CLI and library callers."""

from dataclasses import dataclass

from .config.settings import Settings
from .infrastructure.logging import setup_logging


@dataclass(frozen=True)
class App:
    """Bootstrapped application: resolved Settings with logging applied."""

    settings: Settings


def create_app(settings: Settings | None = None) -> App:
    """Resolve settings and configure loguru from them.

    Call once per process before building a FeedManager; the CLI calls it
    after applying command line overrides.
    """
    settings = settings or Settings()
    setup_logging(settings)
    return App(settings=settings)
