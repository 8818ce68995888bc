"""Per-item decision: skip, download, or report a failure."""

import typing as t

from ..domain.exceptions import FetchError, FileSystemError
from ..domain.jobs import Job, JobResult
from ..domain.naming import extension_from_url, slug
from ..infrastructure.logging import get_logger
from ..storage.filestore import FileStore
from .fetcher import Fetcher

if t.TYPE_CHECKING:
    import loguru


class DownloadDecider:
    """Decides what to do with a single job and does it.

    An item is downloaded only when it has an enclosure with a usable file
    extension and no file exists yet at its target path. The existence
    check on the target path is the only deduplication: there is no
    content hashing.

    ``decide`` never raises for expected failures. Fetch and filesystem
    errors come back as results so one bad item cannot stop the others.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        file_store: FileStore,
        logger: "loguru.Logger" = get_logger(__name__),
    ) -> None:
        self._fetcher = fetcher
        self._file_store = file_store
        self._logger = logger

    async def decide(self, job: Job) -> JobResult:
        enclosure = job.item.first_enclosure
        if enclosure is None:
            return JobResult.no_enclosure(job)

        extension = extension_from_url(enclosure.url)
        if extension is None:
            self._logger.debug(f"No file extension in {enclosure.url}, skipping")
            return JobResult.no_enclosure(job)

        try:
            await self._file_store.ensure_directory(job.destination_directory)
        except FileSystemError as exc:
            return JobResult.failed(job, str(exc))

        path = self._file_store.join(
            job.destination_directory, slug(job.item.title) + extension
        )

        if await self._file_store.exists(path):
            return JobResult.already_downloaded(job, path)

        try:
            await self._fetcher.fetch(enclosure.url, path)
        except FetchError as exc:
            return JobResult.failed(job, str(exc), path=path)

        self._logger.info(f"Downloaded {enclosure.url} to {path}")
        return JobResult.downloaded(job, path)
