"""
Bounded LRU cache of generated names.

The cache is an explicitly constructed object owned by the caller and injected into
BucketNameGenerator. It is safe to share between threads; every operation holds
the cache lock.
"""

import threading
from collections import OrderedDict
from datetime import datetime, timezone

from lcp_lib.naming.models import CacheEntry, GeneratedName


class ResultCache:
    """
    Thread-safe least-recently-used cache keyed by raw request.

    Entries never expire; callers that need re-validation against a changed namespace
    should bypass the cache (``generate(..., use_cache=False)``) or ``clear()`` it.

    Example:
    -------
        >>> cache = ResultCache(capacity=100)
        >>> generator = BucketNameGenerator(config, oracle, creator, cache=cache)

    """

    def __init__(self, capacity: int = 100):
        """
        Initialize the cache.

        Args:
        ----
            capacity: Maximum number of entries (0 disables caching)

        """
        if capacity < 0:
            raise ValueError("capacity must be >= 0")
        self._capacity = capacity
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        """Maximum number of entries."""
        return self._capacity

    def get(self, key: str) -> GeneratedName | None:
        """Return the cached name for ``key`` and mark it most recently used."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            self._entries.move_to_end(key)
            return entry.value

    def set(self, key: str, value: GeneratedName) -> None:
        """Insert or replace ``key``, evicting the least recently used entry when full."""
        if self._capacity == 0:
            return
        with self._lock:
            self._entries[key] = CacheEntry(key=key, value=value, inserted_at=datetime.now(timezone.utc))
            self._entries.move_to_end(key)
            while len(self._entries) > self._capacity:
                self._entries.popitem(last=False)

    def delete(self, key: str) -> bool:
        """Remove ``key``; returns True if it was present."""
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        """Remove all entries."""
        with self._lock:
            self._entries.clear()

    def entries(self) -> list[CacheEntry]:
        """Snapshot of entries, least recently used first."""
        with self._lock:
            return list(self._entries.values())

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"ResultCache(capacity={self._capacity}, size={len(self)})"
