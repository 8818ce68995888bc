"""Console rendering of run progress and results."""

import typer

from ...domain.exceptions import SnarfError
from ...domain.jobs import JobOutcome
from ...events import JobCompletedEvent
from ...manager import RunReport


def display_checking() -> None:
    typer.echo("Checking feed contents...")


def display_job_result(event: JobCompletedEvent) -> None:
    """Print a job result as soon as a worker produces it.

    Only results worth reporting (downloads and failures) are shown.
    """
    result = event.result
    if not result.worth_reporting:
        return

    if result.outcome == JobOutcome.DOWNLOADED:
        typer.secho(f"✓ {result.message}", fg=typer.colors.GREEN)
    else:
        typer.secho(f"✗ {result.message}", fg=typer.colors.RED)


def display_report(report: RunReport) -> None:
    """Print the end-of-run summary."""
    typer.echo(
        f"{report.downloaded_count} downloaded, "
        f"{report.failed_count} failed, "
        f"{report.skipped_count} skipped "
        f"in {report.destination}"
    )
    typer.echo(f"Took {report.elapsed_seconds:.2f}s")


def display_fatal_error(error: SnarfError) -> None:
    typer.secho(f"✗ {error}", fg=typer.colors.RED, err=True)
