"""Fixed-size worker pool that runs download decisions concurrently."""

import asyncio
import typing as t

from ..domain.exceptions import DispatcherAlreadyRunningError
from ..domain.jobs import Job, JobResult
from ..events import BaseEmitter, JobCompletedEvent, NullEmitter
from ..infrastructure.logging import get_logger
from .decision import DownloadDecider

if t.TYPE_CHECKING:
    import loguru

Sleeper = t.Callable[[float], t.Awaitable[None]]

# Queued once per worker after the last job; a worker exits when it takes one
_END_OF_INPUT = None


class Dispatcher:
    """Distributes jobs across a fixed number of concurrent workers.

    The coordinator puts every job on a single queue in order, then closes
    the queue by adding one end-of-input marker per worker, then waits for
    every worker to exit. Workers take jobs in whatever order they become
    free, so results arrive in no particular order, but each job is handled
    by exactly one worker.

    A worker that completes an actual download pauses for ``cooldown``
    seconds before taking its next job. Skips and failures do not pause.
    The pause is per worker, so with N workers up to N downloads can start
    back to back.

    Usage:
        dispatcher = Dispatcher(decider, max_workers=5, cooldown=5.0)
        dispatcher.emitter.on("job.completed", print_result)
        results = await dispatcher.run(jobs)
    """

    def __init__(
        self,
        decider: DownloadDecider,
        max_workers: int = 5,
        cooldown: float = 5.0,
        emitter: BaseEmitter | None = None,
        logger: "loguru.Logger" = get_logger(__name__),
        sleep: Sleeper = asyncio.sleep,
    ) -> None:
        """Initialise the dispatcher.

        Args:
            decider: Makes the per-job download decision
            max_workers: Number of concurrent workers. Must be at least 1.
            cooldown: Seconds a worker waits after a download. 0 disables it.
            emitter: Receives a ``job.completed`` event per result as soon
                as it is produced. Defaults to NullEmitter.
            logger: Logger instance for pool activity
            sleep: Awaitable used for the cooldown. Injectable for tests.
        """
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        if cooldown < 0:
            raise ValueError(f"cooldown must not be negative, got {cooldown}")

        self._decider = decider
        self.max_workers = max_workers
        self.cooldown = cooldown
        self._emitter = emitter or NullEmitter()
        self._logger = logger
        self._sleep = sleep
        self._is_running = False

    @property
    def emitter(self) -> BaseEmitter:
        return self._emitter

    @property
    def is_running(self) -> bool:
        return self._is_running

    async def run(self, jobs: t.Sequence[Job]) -> list[JobResult]:
        """Process every job and return one result per job.

        Returns only after all workers have drained the queue and exited.

        Raises:
            DispatcherAlreadyRunningError: If a run is already in progress.
        """
        if self._is_running:
            raise DispatcherAlreadyRunningError("Dispatcher is already running")

        self._is_running = True
        queue: asyncio.Queue[Job | None] = asyncio.Queue()
        results: list[JobResult] = []
        workers: list[asyncio.Task[None]] = []

        try:
            workers = [
                asyncio.create_task(self._work(worker_id, queue, results))
                for worker_id in range(self.max_workers)
            ]

            for job in jobs:
                await queue.put(job)
            for _ in workers:
                await queue.put(_END_OF_INPUT)

            await asyncio.gather(*workers)
        except BaseException:
            # No worker may keep pulling jobs once run() has returned
            await self._stop_workers(workers)
            raise
        finally:
            self._is_running = False

        self._logger.debug(f"Dispatcher finished {len(results)} jobs")
        return results

    async def _stop_workers(self, workers: list["asyncio.Task[None]"]) -> None:
        pending = [worker for worker in workers if not worker.done()]
        for worker in pending:
            worker.cancel()
        if pending:
            self._logger.warning(f"Cancelling {len(pending)} remaining workers")
        await asyncio.gather(*workers, return_exceptions=True)

    async def _work(
        self,
        worker_id: int,
        queue: "asyncio.Queue[Job | None]",
        results: list[JobResult],
    ) -> None:
        while True:
            job = await queue.get()
            try:
                if job is _END_OF_INPUT:
                    self._logger.debug(f"Worker {worker_id} shutting down")
                    return

                result = await self._process(worker_id, job)
                results.append(result)
                await self._emitter.emit(
                    "job.completed",
                    JobCompletedEvent(worker_id=worker_id, result=result),
                )

                if result.did_download and self.cooldown > 0:
                    await self._sleep(self.cooldown)
            finally:
                queue.task_done()

    async def _process(self, worker_id: int, job: Job) -> JobResult:
        self._logger.debug(
            f"Worker {worker_id} processing job {job.sequence_index}: {job.item.title}"
        )
        try:
            return await self._decider.decide(job)
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            # Keep the worker alive so the remaining jobs still get handled
            self._logger.error(
                f"Worker {worker_id} failed on job {job.sequence_index}: "
                f"{type(exc).__name__}: {exc}"
            )
            return JobResult.failed(job, f"Unexpected error: {exc}")
