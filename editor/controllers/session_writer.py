"""
Byte Package Builder - Session Writer

Runs config store saves off the UI loop, one at a time and in submit order.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, List

logger = logging.getLogger(__name__)


class SessionWriter:
    """
    Fire-and-forget queue for persistence jobs.

    Jobs run on a single worker thread so writes to the same document never
    interleave. A failed job is logged and dropped; callers never wait on or
    see the result. With background=False jobs run inline, which keeps tests
    and scripts deterministic.
    """

    def __init__(self, background: bool = True):
        self.background = background
        self._executor = (
            ThreadPoolExecutor(max_workers=1, thread_name_prefix="session-writer")
            if background
            else None
        )
        self._pending: List[Future] = []

    def submit(self, job: Callable[[], None], description: str = "save"):
        """Queue job; returns immediately in background mode."""
        if self._executor is None:
            self._run(job, description)
            return
        self._pending = [f for f in self._pending if not f.done()]
        self._pending.append(self._executor.submit(self._run, job, description))

    def flush(self):
        """Block until every queued job has finished."""
        for future in self._pending:
            future.result()
        self._pending.clear()

    def shutdown(self):
        """Finish queued jobs and stop the worker."""
        self.flush()
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    @staticmethod
    def _run(job: Callable[[], None], description: str):
        try:
            job()
            logger.debug("Persisted %s", description)
        except Exception:
            logger.exception("Persisting %s failed", description)
