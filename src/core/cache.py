"""In-memory cache with per-entry TTL and active expiration.

Every entry stores its value with an absolute monotonic expiration timestamp
and gets a scheduled eviction that removes it when the TTL elapses. Reads and
enumerations also expire entries lazily, so callers never observe a stale
value even if a timer is late.

The value store and the timer store are always mutated together under one
lock: a key has a pending eviction handle if and only if it has an entry.
"""

from __future__ import annotations

import logging
import math
import threading
import time
from dataclasses import dataclass
from typing import Any, Dict, Generic, Hashable, List, Optional, TypeVar

from core.errors import ValidationError
from core.interfaces import Clock, Scheduler
from core.scheduler import ThreadingScheduler

T = TypeVar("T")

DEFAULT_TTL_SECONDS = 60.0

# Returned by get_remaining_ttl for keys that are not stored at all
NOT_FOUND_TTL = -1.0

logger = logging.getLogger(__name__)


@dataclass(slots=True, eq=False)
class CacheEntry(Generic[T]):
    # Stores value + monotonic expiration time
    value: T
    expires_at: float  # clock() reading


def _check_ttl(ttl: float) -> float:
    ttl = float(ttl)
    if not math.isfinite(ttl) or ttl < 0:
        raise ValidationError(f"TTL must be a finite non-negative number, got {ttl}")
    return ttl


class ExpiringCache(Generic[T]):
    # TTL cache with lazy expiry on read and a scheduled eviction per entry
    def __init__(
        self,
        *,
        default_ttl: float = DEFAULT_TTL_SECONDS,
        clock: Optional[Clock] = None,
        scheduler: Optional[Scheduler] = None,
    ) -> None:
        self._default_ttl = _check_ttl(default_ttl)
        self._clock = clock or time.monotonic
        self._scheduler = scheduler or ThreadingScheduler()

        self._store: Dict[Hashable, CacheEntry[T]] = {}
        self._timers: Dict[Hashable, Any] = {}

        # Re-entrant: set() and get_lru() go through delete() while holding it,
        # and timer callbacks from other threads must take the same lock.
        self._lock = threading.RLock()

    @property
    def default_ttl(self) -> float:
        return self._default_ttl

    def set(self, key: Hashable, value: T, ttl: Optional[float] = None) -> None:
        ttl = self._default_ttl if ttl is None else _check_ttl(ttl)

        with self._lock:
            entry = CacheEntry(value=value, expires_at=self._clock() + ttl)

            # Schedule first: if it raises, the previous entry and its timer stay intact
            handle = self._scheduler.schedule_after(ttl, lambda: self._expire(key, entry))

            if key in self._store:
                logger.debug("Replacing cache entry %r", key)
                self.delete(key)

            self._store[key] = entry
            self._timers[key] = handle

    def get(self, key: Hashable) -> Optional[T]:
        if not key:
            return None

        with self._lock:
            entry = self._live_entry(key)
            return None if entry is None else entry.value

    def get_lru(self, key: Hashable) -> Optional[T]:
        """Read a value and restart its lifetime with the default TTL.

        The refreshed entry always gets the cache-wide default TTL, not the
        TTL it was originally stored with.
        """
        if not key:
            return None

        with self._lock:
            entry = self._live_entry(key)
            if entry is None:
                return None

            value = entry.value
            self.delete(key)
            self.set(key, value)
            return value

    def delete(self, key: Hashable) -> bool:
        with self._lock:
            handle = self._timers.pop(key, None)
            if handle is not None:
                self._scheduler.cancel(handle)

            return self._store.pop(key, None) is not None

    def cleanup(self) -> None:
        with self._lock:
            now = self._clock()
            # Snapshot keys; delete() mutates the store
            for key in list(self._store):
                if now >= self._store[key].expires_at:
                    self.delete(key)

    def size(self) -> int:
        with self._lock:
            self.cleanup()
            return len(self._store)

    def keys(self) -> List[Hashable]:
        with self._lock:
            self.cleanup()
            return list(self._store)

    def clear(self) -> None:
        with self._lock:
            for key in list(self._store):
                self.delete(key)

    def get_remaining_ttl(self, key: Hashable) -> float:
        """Seconds until ``key`` expires, or -1.0 when it is not stored.

        Never evicts: an expired entry whose timer has not fired yet reports
        0.0 rather than -1.0.
        """
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return NOT_FOUND_TTL

            return max(0.0, entry.expires_at - self._clock())

    def _live_entry(self, key: Hashable) -> Optional[CacheEntry[T]]:
        # Caller holds the lock
        entry = self._store.get(key)
        if entry is None:
            return None

        if self._clock() >= entry.expires_at:
            self.delete(key)
            return None

        return entry

    def _expire(self, key: Hashable, entry: CacheEntry[T]) -> None:
        # Timer callback; may run on another thread
        with self._lock:
            # A timer that started before its cancel() must not remove a newer entry
            if self._store.get(key) is not entry:
                logger.debug("Ignoring stale eviction for %r", key)
                return

            logger.debug("Evicting expired cache entry %r", key)
            self.delete(key)
