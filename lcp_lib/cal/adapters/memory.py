"""
In-memory object storage adapter.

Used as a mock naming authority in tests and local experiments. Bucket names live in
a process-local set; nothing touches the network.
"""

import threading
from collections.abc import Iterable
from typing import Any

from lcp_lib.cal.protocols import ObjectStorageProtocol
from lcp_lib.config.schemas import ProviderConfig


class InMemoryObjectStorage:
    """
    Thread-safe set of bucket names implementing ObjectStorageProtocol.

    Example:
    -------
        >>> storage = InMemoryObjectStorage(existing=["lcp-prod-data-config"])
        >>> storage.bucket_exists("lcp-prod-data-config")
        True
        >>> storage.create_bucket("lcp-prod-data-config")
        False

    """

    def __init__(self, existing: Iterable[str] | None = None):
        self._buckets: set[str] = set(existing or ())
        self._lock = threading.Lock()

    def list_buckets(self) -> list[str]:
        """List all buckets in name order."""
        with self._lock:
            return sorted(self._buckets)

    def bucket_exists(self, bucket_name: str) -> bool:
        """Check whether a bucket exists."""
        with self._lock:
            return bucket_name in self._buckets

    def create_bucket(self, bucket_name: str) -> bool:
        """Create a bucket; returns False if it already exists."""
        with self._lock:
            if bucket_name in self._buckets:
                return False
            self._buckets.add(bucket_name)
            return True

    def delete_bucket(self, bucket_name: str) -> None:
        """Delete a bucket (no-op if it does not exist)."""
        with self._lock:
            self._buckets.discard(bucket_name)


class MemoryProvider:
    """
    Cloud provider backed by a single shared InMemoryObjectStorage.

    Every call to ``create_object_storage`` returns the same storage, so buckets created
    through one client are visible through the next.
    """

    def __init__(
        self,
        config: ProviderConfig | None = None,
        existing: Iterable[str] | None = None,
    ):
        self._config = config
        self._storage = InMemoryObjectStorage(existing)

    def create_object_storage(self) -> ObjectStorageProtocol:
        """Return the shared in-memory storage."""
        return self._storage

    def close(self) -> None:
        """Nothing to release."""

    def __enter__(self) -> "MemoryProvider":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager exit with cleanup."""
        self.close()

    async def __aenter__(self) -> "MemoryProvider":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with cleanup."""
        self.close()
