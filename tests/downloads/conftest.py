"""Fixtures for download pipeline tests."""

import asyncio

import pytest

from snarf.domain.jobs import Job, JobResult
from snarf.downloads import DownloadDecider


@pytest.fixture
def decider(fetcher, file_store, mock_logger):
    """Provide a real DownloadDecider wired to the real fetcher."""
    return DownloadDecider(fetcher, file_store, mock_logger)


class ScriptedDecider:
    """Stand-in decider returning results chosen per job.

    Records every job it sees and the peak number of concurrent decisions.
    """

    def __init__(self, outcome=None, delay: float = 0.0):
        self._outcome = outcome or (lambda job: JobResult.no_enclosure(job))
        self._delay = delay
        self.seen: list[Job] = []
        self.active = 0
        self.peak = 0

    async def decide(self, job: Job) -> JobResult:
        self.seen.append(job)
        self.active += 1
        self.peak = max(self.peak, self.active)
        try:
            if self._delay:
                await asyncio.sleep(self._delay)
            return self._outcome(job)
        finally:
            self.active -= 1


@pytest.fixture
def scripted_decider():
    """Factory fixture to create ScriptedDecider instances.

    Usage:
        decider = scripted_decider(outcome=lambda job: ..., delay=0.01)
    """

    def _make(outcome=None, delay: float = 0.0) -> ScriptedDecider:
        return ScriptedDecider(outcome=outcome, delay=delay)

    return _make


@pytest.fixture
def make_jobs(make_job):
    """Factory fixture to create numbered jobs with one enclosure each."""

    def _make_jobs(count: int) -> list[Job]:
        return [
            make_job(f"Episode {index}", f"https://example.com/{index}.mp3", sequence_index=index)
            for index in range(count)
        ]

    return _make_jobs
