"""Shared test doubles."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

# Sunday 5 January 2025, 14:30:00 UTC
FIXED_INSTANT = datetime(2025, 1, 5, 14, 30, tzinfo=UTC)


class FakeHandle:
    def __init__(self, loop: FakeLoop, callback: Callable[..., Any]) -> None:
        self.loop = loop
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeLoop:
    """Records call_later requests; ``advance`` fires them in order."""

    def __init__(self) -> None:
        self.pending: list[FakeHandle] = []
        self.delays: list[float] = []

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> FakeHandle:
        handle = FakeHandle(self, callback)
        self.pending.append(handle)
        self.delays.append(delay)
        return handle

    def advance(self, ticks: int = 1, *, ignore_cancel: bool = False) -> None:
        for _ in range(ticks):
            if not self.pending:
                return
            handle = self.pending.pop(0)
            if handle.cancelled and not ignore_cancel:
                continue
            handle.callback()
