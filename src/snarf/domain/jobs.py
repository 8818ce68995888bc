"""Download jobs and their results."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .feed import Item


@dataclass(frozen=True)
class Job:
    """One unit of work: consider downloading an item's first enclosure.

    ``sequence_index`` is the item's position in the feed document and
    identifies the job across the pool.
    """

    sequence_index: int
    item: Item
    destination_directory: Path


class JobOutcome(Enum):
    """What a worker did with a job.

    Flow: a job ends in exactly one of these states.
    """

    DOWNLOADED = "downloaded"  # Enclosure fetched to disk
    FAILED = "failed"  # Fetch or filesystem failure
    NO_ENCLOSURE = "no_enclosure"  # Nothing downloadable on the item
    ALREADY_DOWNLOADED = "already_downloaded"  # Target file already on disk


@dataclass(frozen=True)
class JobResult:
    """Outcome of processing one job.

    ``worth_reporting`` marks results a human should see: actual downloads
    and hard failures. Skips are not worth reporting.
    """

    sequence_index: int
    message: str
    worth_reporting: bool
    did_download: bool
    outcome: JobOutcome
    path: Path | None = None

    @classmethod
    def no_enclosure(cls, job: Job) -> "JobResult":
        return cls(
            sequence_index=job.sequence_index,
            message="No file to download",
            worth_reporting=False,
            did_download=False,
            outcome=JobOutcome.NO_ENCLOSURE,
        )

    @classmethod
    def already_downloaded(cls, job: Job, path: Path) -> "JobResult":
        return cls(
            sequence_index=job.sequence_index,
            message=f"Already downloaded {path}",
            worth_reporting=False,
            did_download=False,
            outcome=JobOutcome.ALREADY_DOWNLOADED,
            path=path,
        )

    @classmethod
    def failed(cls, job: Job, message: str, path: Path | None = None) -> "JobResult":
        return cls(
            sequence_index=job.sequence_index,
            message=message,
            worth_reporting=True,
            did_download=False,
            outcome=JobOutcome.FAILED,
            path=path,
        )

    @classmethod
    def downloaded(cls, job: Job, path: Path) -> "JobResult":
        return cls(
            sequence_index=job.sequence_index,
            message=f"downloaded: {job.item.title}",
            worth_reporting=True,
            did_download=True,
            outcome=JobOutcome.DOWNLOADED,
            path=path,
        )
