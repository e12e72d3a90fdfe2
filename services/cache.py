"""
Geo Cache Module
Process-local, time-bounded store of geolocation records
"""

import time
from collections import namedtuple

from config import Config
from utils.rwlock import ReadWriteLock

CacheLookup = namedtuple('CacheLookup', ['record', 'found', 'fresh'])

_CacheEntry = namedtuple('_CacheEntry', ['record', 'fetched_at'])


class GeoCache:
    """
    Thread-safe IP -> GeoRecord map with a fixed freshness window.

    Entries are never evicted. Staleness is checked when an entry is read
    and a stale entry is replaced by the next successful fetch, so the map
    grows with the number of distinct IPs seen over the process lifetime.
    """

    def __init__(self, ttl=None, clock=None):
        """
        Args:
            ttl: Freshness window in seconds (default Config.GEO_CACHE_TTL)
            clock: Zero-argument callable returning seconds (default
                time.monotonic)
        """
        self.ttl = Config.GEO_CACHE_TTL if ttl is None else ttl
        self._clock = clock or time.monotonic
        self._entries = {}
        self._lock = ReadWriteLock()

    def get(self, key):
        """
        Look up a record

        Returns:
            CacheLookup(record, found, fresh). A stale entry is reported with
            found=True, fresh=False and its old record.
        """
        with self._lock.read_locked():
            entry = self._entries.get(key)
        if entry is None:
            return CacheLookup(None, False, False)
        fresh = self._clock() - entry.fetched_at < self.ttl
        return CacheLookup(entry.record, True, fresh)

    def put(self, key, record):
        """Insert or overwrite a record, stamping it with the current time"""
        entry = _CacheEntry(record, self._clock())
        with self._lock.write_locked():
            self._entries[key] = entry

    def __len__(self):
        with self._lock.read_locked():
            return len(self._entries)
