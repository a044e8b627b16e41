"""Advisory in-memory cache of bucket and object existence."""

import logging
import threading
import time
from collections import OrderedDict
from collections.abc import Callable

logger = logging.getLogger(__name__)


class ExistenceCache:
    """
    Maps bucket names and ``bucket/key`` identifiers to an existence flag.

    A missing entry means "unknown", never "absent". Entries are not
    invalidated by changes made through other clients; they only change when
    this process performs a mutating operation, expires them through
    ``ttl_seconds`` or evicts them through ``max_entries``.

    Args:
        ttl_seconds: Entry lifetime in seconds. Zero or None keeps entries forever.
        max_entries: Capacity across buckets and objects, least recently used
            entries are evicted first. Zero or None means unbounded.
        clock: Monotonic time source, injectable for tests.
    """

    def __init__(
        self,
        ttl_seconds: float | None = None,
        max_entries: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._ttl_seconds = ttl_seconds or None
        self._max_entries = max_entries or None
        self._clock = clock
        self._entries: OrderedDict[str, tuple[bool, float]] = OrderedDict()
        self._lock = threading.Lock()

    @staticmethod
    def _bucket_key(name: str) -> str:
        return f"bucket:{name}"

    @staticmethod
    def _object_key(bucket: str, key: str) -> str:
        return f"object:{bucket}/{key}"

    def bucket_exists_cached(self, name: str) -> bool | None:
        return self._get(self._bucket_key(name))

    def object_exists_cached(self, bucket: str, key: str) -> bool | None:
        return self._get(self._object_key(bucket, key))

    def mark_bucket(self, name: str, exists: bool) -> None:
        self._set(self._bucket_key(name), exists)

    def mark_object(self, bucket: str, key: str, exists: bool) -> None:
        self._set(self._object_key(bucket, key), exists)

    def unmark_bucket(self, name: str) -> None:
        self._delete(self._bucket_key(name))

    def unmark_object(self, bucket: str, key: str) -> None:
        self._delete(self._object_key(bucket, key))

    def clear(self) -> None:
        """Drops every entry, e.g. after out-of-band changes to the store."""
        with self._lock:
            self._entries.clear()
        logger.info("Existence cache cleared")

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _get(self, entry_key: str) -> bool | None:
        with self._lock:
            entry = self._entries.get(entry_key)
            if entry is None:
                return None
            exists, stored_at = entry
            if self._ttl_seconds and self._clock() - stored_at >= self._ttl_seconds:
                del self._entries[entry_key]
                return None
            self._entries.move_to_end(entry_key)
            return exists

    def _set(self, entry_key: str, exists: bool) -> None:
        with self._lock:
            self._entries[entry_key] = (exists, self._clock())
            self._entries.move_to_end(entry_key)
            if self._max_entries:
                while len(self._entries) > self._max_entries:
                    self._entries.popitem(last=False)

    def _delete(self, entry_key: str) -> None:
        with self._lock:
            self._entries.pop(entry_key, None)
