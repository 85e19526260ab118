"""Cancellable delayed task for debouncing bursts of input."""

import asyncio
import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)


class Debouncer:
    """Runs the most recently scheduled action once ``delay`` seconds pass quietly.

    Scheduling again before the delay elapses cancels the pending action.
    Must be used from within a running event loop.
    """

    def __init__(self, delay: float):
        self.delay = delay
        self._task: asyncio.Task | None = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def schedule(self, action: Callable[[], Awaitable[None]]) -> asyncio.Task:
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._run(action))
        return self._task

    def cancel(self) -> None:
        if self.pending:
            logger.debug("Cancelling superseded debounced action")
            self._task.cancel()
        self._task = None

    async def wait(self) -> None:
        """Wait for the pending action, if any, to finish or be cancelled."""
        task = self._task
        if task is None:
            return
        try:
            await task
        except asyncio.CancelledError:
            if not task.cancelled():
                raise

    async def _run(self, action: Callable[[], Awaitable[None]]) -> None:
        await asyncio.sleep(self.delay)
        await action()
