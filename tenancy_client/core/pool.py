"""
Bounded concurrent work dispatch.

A WorkPool runs a fixed number of asyncio workers. Units of work are
submitted to a bounded queue and each one is received by exactly one worker,
which awaits the task on it and publishes a Result. Results come out of an
unbounded queue in completion order, so workers never wait on a slow consumer.

    async with WorkPool(10, create_user) as pool:
        for name in names:
            await pool.submit(name)
        async for result in pool.results(len(names)):
            ...
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, AsyncIterator, Awaitable, Callable, Generic, Iterable, TypeVar

from tenancy_client import config

from .exceptions import TaskError

logger = logging.getLogger(__name__)

U = TypeVar("U")


@dataclass(frozen=True)
class Result(Generic[U]):
    """Outcome of one unit of work. `error` is None on success."""

    unit: U
    error: TaskError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class WorkPool(Generic[U]):
    def __init__(
        self,
        worker_count: int,
        task: Callable[[U], Awaitable[Any]],
        queue_size: int | None = None,
    ) -> None:
        if not isinstance(worker_count, int) or isinstance(worker_count, bool) or worker_count < 1:
            raise ValueError(f"worker_count must be a positive integer, got {worker_count!r}")
        if queue_size is None:
            queue_size = config.WORK_QUEUE_SIZE or 0
        self.worker_count = worker_count
        self.task = task
        self.in_flight = 0
        self._pending: asyncio.Queue[U] = asyncio.Queue(maxsize=queue_size or 2 * worker_count)
        self._results: asyncio.Queue[Result[U]] = asyncio.Queue()
        self._workers: list[asyncio.Task] = []

    @property
    def started(self) -> bool:
        return bool(self._workers)

    def start(self) -> None:
        """Spawn the workers. Calling it again has no effect."""
        if self._workers:
            return
        self._workers = [
            asyncio.create_task(self._work(), name=f"work-pool-{i}")
            for i in range(self.worker_count)
        ]
        logger.debug("Started %d workers", self.worker_count)

    async def _work(self) -> None:
        while True:
            unit = await self._pending.get()
            self.in_flight += 1
            try:
                await self.task(unit)
            except Exception as e:
                logger.debug("Task failed for %r: %r", unit, e)
                error = TaskError(unit, e)
                error.__cause__ = e
                result = Result(unit, error)
            else:
                result = Result(unit)
            finally:
                self.in_flight -= 1
                self._pending.task_done()
            self._results.put_nowait(result)

    async def submit(self, unit: U) -> None:
        """Queue a unit of work, waiting while the queue is full."""
        if not self._workers:
            raise RuntimeError("WorkPool is not started")
        await self._pending.put(unit)

    async def get_result(self) -> Result[U]:
        """Wait for the next result, in completion order."""
        return await self._results.get()

    async def results(self, count: int) -> AsyncIterator[Result[U]]:
        """Yield exactly `count` results."""
        for _ in range(count):
            yield await self._results.get()

    async def close(self) -> None:
        """Cancel the workers. Units still queued are dropped."""
        workers, self._workers = self._workers, []
        for worker in workers:
            worker.cancel()
        await asyncio.gather(*workers, return_exceptions=True)

    async def __aenter__(self) -> "WorkPool[U]":
        self.start()
        return self

    async def __aexit__(self, *exc) -> None:
        await self.close()


async def dispatch(
    worker_count: int | None,
    task: Callable[[U], Awaitable[Any]],
    units: Iterable[U],
) -> list[Result[U]]:
    """Run `task` on every unit with at most `worker_count` (default WORKER_COUNT) running at once."""
    units = list(units)
    if worker_count is None:
        worker_count = config.WORKER_COUNT
    async with WorkPool(worker_count, task) as pool:
        submitting = asyncio.create_task(_submit_all(pool, units))
        try:
            results = [result async for result in pool.results(len(units))]
            await submitting
        finally:
            submitting.cancel()
            await asyncio.gather(submitting, return_exceptions=True)
    failures = sum(1 for result in results if not result.ok)
    if failures:
        logger.warning("%d out of %d tasks failed", failures, len(units))
    return results


async def _submit_all(pool: WorkPool[U], units: list[U]) -> None:
    for unit in units:
        await pool.submit(unit)
