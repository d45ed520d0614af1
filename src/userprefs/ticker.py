"""Cancelable periodic tick on an asyncio event loop.

The ticker never blocks and never spawns a thread: each tick schedules
the next one with ``loop.call_later``, and ``stop()`` cancels the pending
handle so no callback fires afterwards.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any, Final, Optional, Protocol

from userprefs.constants import PREVIEW_TICK_SECONDS

logger: Final = logging.getLogger(__name__)


class TimerHandle(Protocol):
    """Subset of ``asyncio.TimerHandle`` used by the ticker."""

    def cancel(self) -> None: ...


class TimerLoop(Protocol):
    """Subset of ``asyncio.AbstractEventLoop`` used by the ticker."""

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> TimerHandle: ...


class Ticker:
    """Invoke a callback on a fixed cadence until stopped.

    Usable as a context manager; leaving the block stops the ticker on
    every exit path.
    """

    def __init__(
        self,
        callback: Callable[[], None],
        interval: float = PREVIEW_TICK_SECONDS,
        loop: Optional[TimerLoop] = None,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}")
        self._callback = callback
        self._interval = interval
        self._loop = loop
        self._handle: Optional[TimerHandle] = None
        self._running = False
        self.ticks = 0

    @property
    def running(self) -> bool:
        return self._running

    def start(self, loop: Optional[TimerLoop] = None) -> None:
        """Begin ticking on *loop*, the constructor loop, or the running loop.

        Raises:
            RuntimeError: If no loop is given and none is running
        """
        if self._running:
            return
        self._loop = loop or self._loop or asyncio.get_running_loop()
        self._running = True
        self._schedule()
        logger.debug("Ticker started (every %.1fs)", self._interval)

    def stop(self) -> None:
        """Cancel the pending tick. Safe to call more than once."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        if self._running:
            self._running = False
            logger.debug("Ticker stopped after %d ticks", self.ticks)

    def _schedule(self) -> None:
        assert self._loop is not None
        self._handle = self._loop.call_later(self._interval, self._fire)

    def _fire(self) -> None:
        # A handle cancelled after it was already queued may still run
        if not self._running:
            return
        self.ticks += 1
        try:
            self._callback()
        finally:
            if self._running:
                self._schedule()

    def __enter__(self) -> Ticker:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()
