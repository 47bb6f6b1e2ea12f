"""
urlsucker/url_discovery/store.py

Concurrent-safe, deduplicating store of discovered URLs grouped by origin.

Each origin owns a bucket with its own lock, so inserts for unrelated origins
never wait on each other. The structural lock is only taken to create a
bucket, to swap in an empty mapping on clear(), and to copy the bucket list
for a snapshot.
"""

import threading

from urlsucker.url_discovery.models import DiscoveredUrl, SnapshotRow
from urlsucker.utils.logger import get_logger
from urlsucker.utils.url_utils import UNKNOWN, host_and_path

logger = get_logger(name=__name__)


class _OriginBucket:
    """Insertion-ordered set of DiscoveredUrl for one origin."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[DiscoveredUrl, None] = {}

    def add(self, entry: DiscoveredUrl) -> bool:
        with self._lock:
            if entry in self._entries:
                return False
            self._entries[entry] = None
            return True

    def copy(self) -> list[DiscoveredUrl]:
        with self._lock:
            return list(self._entries)


def _to_row(entry: DiscoveredUrl) -> SnapshotRow:
    """Project a stored entry onto a view row, degrading when the URL does not parse."""
    try:
        host, path = host_and_path(entry.url)
    except ValueError:
        host, path = UNKNOWN, entry.url
    return SnapshotRow(host=host, path=path, source_file=entry.source_file, url=entry.url)


def _matches(row: SnapshotRow, needle: str) -> bool:
    haystack = " ".join((row.url, row.source_file, row.host, row.path)).lower()
    return needle in haystack


class DiscoveryStore:
    """
    Process-wide mapping of origin key -> set of DiscoveredUrl.

    Usage:
        store = DiscoveryStore()
        store.insert("https://example.com", DiscoveredUrl(url="https://example.com/api", source_file="app.js"))
        rows = store.snapshot("api")
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._origins: dict[str, _OriginBucket] = {}

    def _bucket(self, origin_key: str) -> _OriginBucket:
        bucket = self._origins.get(origin_key)
        if bucket is not None:
            return bucket
        with self._lock:
            return self._origins.setdefault(origin_key, _OriginBucket())

    def insert(self, origin_key: str, entry: DiscoveredUrl) -> bool:
        """
        Add entry under origin_key, creating the origin's set if needed.

        Returns:
            True if the entry was not already stored for that origin.
        """
        added = self._bucket(origin_key).add(entry)
        if added:
            logger.debug("Stored %s under %s", entry, origin_key)
        return added

    def clear(self) -> None:
        """Empty the whole store."""
        with self._lock:
            self._origins = {}
        logger.info("Discovery store cleared")

    def origins(self) -> list[str]:
        """Origin keys currently present, sorted."""
        with self._lock:
            return sorted(self._origins)

    def entries(self, origin_key: str) -> list[DiscoveredUrl]:
        """Entries stored for one origin, in insertion order."""
        bucket = self._origins.get(origin_key)
        return bucket.copy() if bucket is not None else []

    def __len__(self) -> int:
        with self._lock:
            buckets = list(self._origins.values())
        return sum(len(bucket.copy()) for bucket in buckets)

    def snapshot(self, search_filter: str = "") -> list[SnapshotRow]:
        """
        Flatten the store into view rows.

        Rows are sorted by url, then source file, and kept only if the filter
        occurs (case-insensitively) in the url, source file, host or path.
        An empty filter keeps every row. The store itself is not modified.

        Args:
            search_filter: Substring to filter rows on.

        Returns:
            List of SnapshotRow.
        """
        with self._lock:
            buckets = list(self._origins.values())

        entries = [entry for bucket in buckets for entry in bucket.copy()]
        entries.sort(key=lambda e: (e.url, e.source_file))

        rows = [_to_row(entry) for entry in entries]
        needle = search_filter.lower()
        if needle:
            rows = [row for row in rows if _matches(row, needle)]
        return rows
