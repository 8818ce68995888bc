"""CLI application factory."""

import asyncio
from pathlib import Path
from typing import Optional

import typer

from ..app import create_app
from ..config.settings import LogLevel, Settings, build_settings
from ..domain.exceptions import SnarfError
from ..events import EventEmitter
from ..infrastructure.logging import get_logger
from ..manager import RunReport
from .output.report import (
    display_checking,
    display_fatal_error,
    display_job_result,
    display_report,
)
from .state import CLIState


def create_cli_app(
    settings: Settings | None = None, state: CLIState | None = None
) -> typer.Typer:
    """Create CLI application with optional settings or state override.

    Args:
        settings: Optional Settings override for testing
        state: Optional CLIState override (e.g. with a mocked manager factory)

    Returns:
        Configured Typer application
    """
    cli_state = state or CLIState(settings or build_settings())

    app = typer.Typer(
        name="snarf",
        help="Download the media enclosures of an RSS/Atom feed",
        add_completion=False,
    )

    @app.command()
    def sync(
        feed: Optional[str] = typer.Option(
            None,
            "--feed",
            "-f",
            help="The RSS/Atom feed to inspect",
        ),
        destination: Optional[Path] = typer.Option(
            None,
            "--destination",
            "-d",
            help="The destination directory (defaults to ~/.config/snarf)",
        ),
        workers: Optional[int] = typer.Option(
            None,
            "--workers",
            "-w",
            help="Number of concurrent workers",
            min=1,
        ),
        cooldown: Optional[float] = typer.Option(
            None,
            "--cooldown",
            help="Seconds a worker pauses after each download",
            min=0,
        ),
        verbose: bool = typer.Option(
            False,
            "--verbose",
            "-v",
            help="Enable verbose output (DEBUG logging)",
        ),
    ) -> None:
        """Download every enclosure of a feed that is not already on disk.

        Examples:
            snarf -f https://example.com/podcast.rss
            snarf -f https://example.com/podcast.rss -d ~/Podcasts -w 3
        """
        if not feed:
            typer.echo("No feed provided.")
            raise typer.Exit(code=1)

        overrides = {
            "destination_dir": destination,
            "max_workers": workers,
            "cooldown_seconds": cooldown,
            "log_level": LogLevel.DEBUG if verbose else None,
        }
        resolved_settings = cli_state.settings.model_copy(
            update={key: value for key, value in overrides.items() if value is not None}
        )
        create_app(resolved_settings)

        emitter = EventEmitter(get_logger(__name__))
        emitter.on("job.completed", display_job_result)
        manager = cli_state.create_manager(settings=resolved_settings, emitter=emitter)

        async def run() -> RunReport:
            async with manager:
                return await manager.sync(feed)

        display_checking()
        try:
            report = asyncio.run(run())
        except SnarfError as exc:
            display_fatal_error(exc)
            raise typer.Exit(code=1)

        display_report(report)

    return app
