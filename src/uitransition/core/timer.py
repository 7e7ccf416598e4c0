"""
Timer Scheduler

Owns at most one delayed callback on an asyncio event loop. Scheduling
always replaces the outstanding callback, and a zero delay still runs on a
later loop iteration, never inside the caller's stack.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class TimerScheduler:
    """Single-slot scheduler backed by ``loop.call_later``."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def loop(self) -> asyncio.AbstractEventLoop:
        """The loop timers run on.

        Raises:
            RuntimeError: If no loop was given and none is running
        """
        return self._loop or asyncio.get_running_loop()

    def schedule(self, duration_ms: float, callback: Callable[..., Any], *args: Any) -> None:
        """Run ``callback(*args)`` after ``duration_ms`` milliseconds, replacing any pending callback."""
        loop = self.loop()
        self.cancel()
        logger.debug("Scheduling %s in %sms", getattr(callback, "__name__", callback), duration_ms)
        self._handle = loop.call_later(duration_ms / 1000.0, self._fire, callback, args)

    def cancel(self) -> None:
        if self._handle is None:
            return
        self._handle.cancel()
        self._handle = None
        logger.debug("Cancelled pending timer")

    def _fire(self, callback: Callable[..., Any], args: tuple) -> None:
        # clear first so the callback may schedule the next timer
        self._handle = None
        callback(*args)


__all__ = ["TimerScheduler"]
