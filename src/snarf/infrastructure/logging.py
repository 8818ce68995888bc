"""Logging setup built on loguru.

Loguru exposes a single global logger. This module owns its handler
configuration so the rest of the code only ever asks for a bound logger
via ``get_logger``.
"""

import sys
import typing as t

from loguru import logger

from ..config.settings import Environment, LogLevel, Settings

if t.TYPE_CHECKING:
    import loguru

_DEVELOPMENT_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)
_PRODUCTION_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[name]} - {message}"

_configured = False


def configure_logger(
    level: LogLevel | str = LogLevel.INFO,
    environment: Environment = Environment.DEVELOPMENT,
) -> None:
    """Replace loguru handlers with a single stderr sink.

    Development output is colourised; production output is plain text with
    full timestamps so it can be shipped to a log collector.
    """
    global _configured

    level_name = level.value if isinstance(level, LogLevel) else str(level).upper()
    logger.remove()
    logger.configure(extra={"name": "snarf"})

    if environment == Environment.PRODUCTION:
        logger.add(sys.stderr, level=level_name, format=_PRODUCTION_FORMAT, colorize=False)
    else:
        logger.add(
            sys.stderr,
            level=level_name,
            format=_DEVELOPMENT_FORMAT,
            colorize=True,
            backtrace=environment == Environment.DEVELOPMENT,
        )

    _configured = True


def setup_logging(settings: Settings) -> None:
    """Configure logging from application settings."""
    configure_logger(level=settings.log_level, environment=settings.environment)


def get_logger(name: str) -> "loguru.Logger":
    """Return a logger bound to ``name``, configuring defaults if needed."""
    if not _configured:
        configure_logger()
    return logger.bind(name=name)


def is_configured() -> bool:
    """Whether loguru handlers have been set up by this module."""
    return _configured


def reset_logging() -> None:
    """Drop all handlers so the next ``get_logger`` call reconfigures."""
    global _configured

    logger.remove()
    _configured = False
