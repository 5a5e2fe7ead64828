import asyncio
import logging
from typing import Awaitable, Optional, Set


logger = logging.getLogger(__name__)

DEFAULT_WORKERS = 4


class ExecutionPool:
    """Runs at most ``workers`` jobs at once.

    ``submit`` waits for a free slot, so a producer feeding the pool is held
    back while every worker is busy. Jobs are independent: no ordering between
    them and no cancellation once started.
    """

    def __init__(self, workers: int = DEFAULT_WORKERS):
        if workers < 1:
            raise ValueError("ExecutionPool needs at least one worker")
        self._workers = workers
        self._slots = asyncio.Semaphore(workers)
        self._tasks: Set[asyncio.Task] = set()

    @property
    def workers(self) -> int:
        return self._workers

    @property
    def active(self) -> int:
        return len(self._tasks)

    async def submit(self, job: Awaitable, name: Optional[str] = None) -> asyncio.Task:
        try:
            await self._slots.acquire()
        except asyncio.CancelledError:
            # never scheduled: close it so it is not reported as never awaited
            if asyncio.iscoroutine(job):
                job.close()
            raise
        task = asyncio.ensure_future(job)
        if name:
            task.set_name(name)
        self._tasks.add(task)
        task.add_done_callback(self._finished)
        return task

    def _finished(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        self._slots.release()
        if task.cancelled():
            logger.warning("Task %s was cancelled", task.get_name())
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Task %s failed", task.get_name(), exc_info=exc)

    async def drain(self) -> None:
        """Wait until every submitted job, including ones submitted meanwhile, is done."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
