"""Cancellable timer that coalesces bursts of calls into one."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

SEARCH_DEBOUNCE_SECONDS = 0.3


class Debouncer:
    """
    Run ``callback`` once the calls have been quiet for ``delay`` seconds.

    Every ``trigger`` cancels the running timer and starts a new one, so only
    the arguments of the last call within a burst are ever emitted.
    """

    def __init__(self, callback: Callable[..., Any], delay: float = SEARCH_DEBOUNCE_SECONDS):
        self._callback = callback
        self._delay = delay
        self._timer: asyncio.Task[None] | None = None

    @property
    def pending(self) -> bool:
        return self._timer is not None and not self._timer.done()

    def trigger(self, *args: Any) -> asyncio.Task[None]:
        self.cancel()
        self._timer = asyncio.create_task(self._fire_after_delay(args))
        return self._timer

    def cancel(self) -> None:
        if self._timer is not None and not self._timer.done():
            self._timer.cancel()
        self._timer = None

    async def wait(self) -> None:
        """Wait for the running timer (if any) to fire or be cancelled."""
        timer = self._timer
        if timer is not None and not timer.done():
            await asyncio.wait([timer])

    async def _fire_after_delay(self, args: tuple[Any, ...]) -> None:
        await asyncio.sleep(self._delay)
        # Not cancellable once the callback runs
        self._timer = None
        self._callback(*args)
