# src/search/debouncer.py

"""Cancellable delayed call for search-as-you-type input."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

from src.config.settings import Settings

logger = logging.getLogger("jewel_search.debouncer")

T = TypeVar("T")


class Debouncer(Generic[T]):
    """Run *callback* once input has been idle for *delay* seconds.

    Each :meth:`trigger` cancels the pending call (if any) and schedules
    a new one with the latest value, so at most one callback fires per
    quiet window and results are never applied out of order.  Must be
    used from a running event loop.
    """

    def __init__(
        self,
        callback: Callable[[T], Awaitable[None] | None],
        delay: float | None = None,
    ) -> None:
        self._callback = callback
        self._delay = Settings.DEBOUNCE_DELAY if delay is None else delay
        self._task: asyncio.Task[None] | None = None

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> bool:
        """True while a scheduled call has not fired yet."""
        return self._task is not None and not self._task.done()

    def trigger(self, value: T) -> None:
        """Schedule the callback for *value*, replacing any pending call."""
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(
            self._fire_later(value)
        )

    def cancel(self) -> bool:
        """Drop the pending call.  Returns True if one was cancelled."""
        task, self._task = self._task, None
        if task is None or task.done():
            return False
        task.cancel()
        logger.debug("Pending debounced call cancelled")
        return True

    async def flush(self) -> None:
        """Wait for the pending call (if any) to complete."""
        task = self._task
        if task is not None and not task.done():
            await asyncio.wait({task})

    async def _fire_later(self, value: T) -> None:
        await asyncio.sleep(self._delay)
        try:
            result = self._callback(value)
            if asyncio.iscoroutine(result):
                await result
        except Exception:
            logger.error(
                "Debounced callback failed for %r", value, exc_info=True
            )
