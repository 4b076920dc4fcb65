"""Core protocol and interface definitions.

Defines the Clock and Scheduler protocols the cache depends on, so the
timer facility can be swapped (threads, asyncio, or a manual fake in tests).
"""

from __future__ import annotations

from typing import Any, Callable, Protocol


class Clock(Protocol):
    """Returns a monotonic-enough reading in seconds."""
    def __call__(self) -> float:
        ...


class Scheduler(Protocol):
    """Contract for a cancellable deferred-callback facility."""
    def schedule_after(self, delay: float, callback: Callable[[], None]) -> Any:
        ...

    def cancel(self, handle: Any) -> None:
        ...
