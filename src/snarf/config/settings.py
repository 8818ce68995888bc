"""Application settings loaded from defaults, environment and CLI overrides."""

import typing as t
from enum import Enum
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Runtime environment for the application."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Log levels understood by loguru."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def default_destination_dir() -> Path:
    """Per-user directory used when no destination is given."""
    return Path.home() / ".config" / "snarf"


class Settings(BaseSettings):
    """Settings container shared by the app, the manager and the CLI.

    Values come from (in order of precedence) explicit arguments,
    ``SNARF_``-prefixed environment variables and the defaults below.

    Example:
        export SNARF_MAX_WORKERS=3
        export SNARF_COOLDOWN_SECONDS=0
    """

    model_config = SettingsConfigDict(
        env_prefix="SNARF_",
        case_sensitive=False,
        frozen=True,
    )

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment, controls log formatting",
    )
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Minimum level for emitted log records",
    )
    destination_dir: Path = Field(
        default_factory=default_destination_dir,
        description="Root directory for cached feeds and downloaded media",
    )
    max_workers: int = Field(
        default=5,
        ge=1,
        description="Number of concurrent download workers",
    )
    cooldown_seconds: float = Field(
        default=5.0,
        ge=0,
        description="Pause a worker takes after each completed download",
    )
    feed_max_age_days: float = Field(
        default=7.0,
        gt=0,
        description="Age after which a cached feed document is re-fetched",
    )
    chunk_size: int = Field(
        default=1024,
        gt=0,
        description="Bytes read per chunk when streaming a response to disk",
    )

    @property
    def feed_max_age_seconds(self) -> float:
        return self.feed_max_age_days * 24 * 60 * 60


def build_settings(**overrides: t.Any) -> Settings:
    """Build Settings, ignoring overrides that were not provided.

    CLI options default to None; dropping them lets environment variables
    and field defaults apply instead.
    """
    return Settings(**{key: value for key, value in overrides.items() if value is not None})
