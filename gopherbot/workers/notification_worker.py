"""Bounded worker pool running delayed Slack responses off the request path."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Awaitable, Callable

from gopherbot.metrics.prometheus_exporter import notify_queue_depth

logger = logging.getLogger(__name__)

NotifyCallable = Callable[[bytes], Awaitable[None]]


class NotificationDispatcher:
    """
    Queue of raw slash-command bodies drained by a fixed number of workers.

    ``submit`` never waits: when the queue is full the body is refused and the
    caller decides what to answer. Errors raised by a job are logged and the
    worker moves on to the next one.
    """

    def __init__(self, notify: NotifyCallable, workers: int = 4, queue_size: int = 100) -> None:
        self._notify = notify
        self._worker_count = workers
        self._queue: asyncio.Queue[bytes] = asyncio.Queue(maxsize=queue_size)
        self._workers: list[asyncio.Task[None]] = []

    @property
    def running(self) -> bool:
        return any(not task.done() for task in self._workers)

    def start(self) -> None:
        """Spawn the worker tasks on the running event loop."""

        if self.running:
            return
        self._workers = [
            asyncio.create_task(self._run(index), name=f"gopher-notify-{index}")
            for index in range(self._worker_count)
        ]
        logger.info("Notification workers started (workers: %d)", self._worker_count)

    def submit(self, raw_body: bytes) -> bool:
        """Enqueue a job; return ``False`` if the pool is saturated."""

        try:
            self._queue.put_nowait(raw_body)
        except asyncio.QueueFull:
            logger.warning("Notification queue is full, dropping delayed response.")
            return False
        notify_queue_depth.set(self._queue.qsize())
        return True

    async def join(self) -> None:
        """Wait until every submitted job has been processed."""

        await self._queue.join()

    async def stop(self, timeout: float = 10.0) -> None:
        """Drain pending jobs for up to ``timeout`` seconds, then cancel the workers."""

        if self._workers:
            try:
                await asyncio.wait_for(self._queue.join(), timeout=timeout)
            except asyncio.TimeoutError:
                logger.warning("Dropping %d pending delayed response(s) on shutdown.", self._queue.qsize())
        for task in self._workers:
            task.cancel()
        for task in self._workers:
            with contextlib.suppress(asyncio.CancelledError):
                await task
        self._workers = []
        logger.info("Notification workers stopped")

    async def _run(self, index: int) -> None:
        while True:
            raw_body = await self._queue.get()
            notify_queue_depth.set(self._queue.qsize())
            try:
                await self._notify(raw_body)
            except Exception:
                logger.exception("Notification worker %d failed to deliver a gopher", index)
            finally:
                self._queue.task_done()
