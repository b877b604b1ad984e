"""Cancelable debounce timer for a single logical channel."""

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from types import TracebackType

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_SECONDS = 0.5

Trigger = Callable[[], Awaitable[None] | None]


class Debouncer:
    """Run only the most recent trigger once input has been quiet for ``interval``.

    Each ``schedule`` call cancels whatever is pending, including a trigger
    that already fired and is still awaiting I/O, so at most one trigger is
    alive at a time. Triggers run as tasks on the running event loop.

    Use as an async context manager to guarantee cancellation on teardown.

    Args:
        interval: Quiet period in seconds before the trigger fires.
    """

    def __init__(self, interval: float = DEFAULT_DEBOUNCE_SECONDS) -> None:
        if interval < 0:
            raise ValueError("interval must be non-negative")
        self._interval = interval
        self._task: asyncio.Task[None] | None = None
        self._armed: Trigger | None = None

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def pending(self) -> bool:
        """Whether a trigger is armed or still running."""
        return self._task is not None and not self._task.done()

    def schedule(self, trigger: Trigger) -> None:
        """Replace any pending trigger with ``trigger`` and restart the timer.

        Must be called from within a running event loop.
        """
        self.cancel()
        self._armed = trigger
        self._task = asyncio.get_running_loop().create_task(self._fire_after_delay())

    def cancel(self) -> None:
        """Drop the pending trigger, if any."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
        self._armed = None

    async def flush(self) -> None:
        """Fire an armed trigger now and wait until it has finished.

        If the trigger already fired, waits for it to complete instead.
        """
        task = self._task
        if task is None:
            return
        if self._armed is not None:
            trigger = self._armed
            self.cancel()
            self._task = asyncio.get_running_loop().create_task(_invoke(trigger))
            task = self._task
        await asyncio.wait({task})

    async def aclose(self) -> None:
        """Cancel any pending trigger and wait for it to unwind."""
        task = self._task
        self.cancel()
        if task is not None:
            await asyncio.wait({task})

    async def __aenter__(self) -> "Debouncer":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def _fire_after_delay(self) -> None:
        await asyncio.sleep(self._interval)
        trigger, self._armed = self._armed, None
        if trigger is None:
            return
        await _invoke(trigger)


async def _invoke(trigger: Trigger) -> None:
    try:
        result = trigger()
        if inspect.isawaitable(result):
            await result
    except Exception:
        logger.exception("Debounced trigger failed")
