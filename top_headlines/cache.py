"""
In-memory headline cache with expiry and a size bound.

Entries expire a fixed time after they are written and the least recently
used entry is evicted once the cache holds `max_entries` keys. All access is
serialized with a lock so request threads can share one instance.
"""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass
import threading
import time
from typing import Callable, Generic, TypeVar

V = TypeVar("V")


@dataclass
class CacheEntry(Generic[V]):
    """A cached value and the monotonic time it stops being valid."""
    value: V
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


class TTLCache(Generic[V]):
    """Thread-safe expire-after-write cache with LRU eviction.

    Attributes:
        ttl_seconds: Lifetime of an entry from the moment it is stored
        max_entries: Maximum number of live keys
    """

    def __init__(
        self,
        ttl_seconds: float,
        max_entries: int,
        clock: Callable[[], float] = time.monotonic,
    ):
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds}")
        if max_entries < 1:
            raise ValueError(f"max_entries must be at least 1, got {max_entries}")
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._entries: OrderedDict[str, CacheEntry[V]] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: str) -> V | None:
        """Return the live value for key, or None on a miss or expiry."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.is_expired(self._clock()):
                del self._entries[key]
                return None
            self._entries.move_to_end(key)
            return entry.value

    def put(self, key: str, value: V, ttl_seconds: float | None = None) -> None:
        """Store value under key, evicting the oldest entries if over the bound."""
        ttl = self.ttl_seconds if ttl_seconds is None else ttl_seconds
        with self._lock:
            now = self._clock()
            self._entries[key] = CacheEntry(value=value, expires_at=now + ttl)
            self._entries.move_to_end(key)
            self._purge_expired(now)
            while len(self._entries) > self.max_entries:
                self._entries.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            self._purge_expired(self._clock())
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def _purge_expired(self, now: float) -> None:
        expired = [key for key, entry in self._entries.items() if entry.is_expired(now)]
        for key in expired:
            del self._entries[key]
