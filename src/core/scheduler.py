"""Deferred-callback schedulers used for active expiration.

Both implementations satisfy the Scheduler protocol: schedule a callback to
run after a delay and hand back a handle that can later be cancelled.
Cancelling a handle that already fired (or was already cancelled) is a no-op.
"""

from __future__ import annotations

import asyncio
import threading
from typing import Callable, Optional

from core.errors import ValidationError
from core.interfaces import Scheduler


class ThreadingScheduler:
    # One threading.Timer (one OS thread) per pending callback, so thread count
    # grows with the number of live entries and start() fails at the process
    # thread limit. Use AsyncioScheduler for large caches.
    def schedule_after(self, delay: float, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(max(0.0, float(delay)), callback)

        # Daemon timers so a pending eviction never keeps the process alive.
        timer.daemon = True
        timer.start()
        return timer

    def cancel(self, handle: threading.Timer) -> None:
        handle.cancel()


class AsyncioScheduler:
    # Uses loop.call_later on the given loop, or the loop running at schedule time
    def __init__(self, *, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    def schedule_after(self, delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(max(0.0, float(delay)), callback)

    def cancel(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()


def get_scheduler(kind: str = "thread") -> Scheduler:
    """
    Factory that returns the scheduler for a configured kind.

    - "thread"  -> ThreadingScheduler (works with or without an event loop).
    - "asyncio" -> AsyncioScheduler (cache must be mutated from inside a running loop).
    """
    name = (kind or "").strip().lower()

    if name == "thread":
        return ThreadingScheduler()
    if name == "asyncio":
        return AsyncioScheduler()

    raise ValidationError(f"Unknown scheduler kind: {kind!r}")
