# cache_utils.py
#
# Purpose:
# A small in-memory cache with a time-to-live, used so repeated lookups of
# the same username within a few minutes don't hit the GitHub API again.
#
# The clock is injectable (any zero-argument callable returning seconds) and
# the cache holds at most max_entries items; when full, the oldest entry is
# dropped first.

import logging
import time
from collections import OrderedDict

logger = logging.getLogger(__name__)


class TTLCache:
    """
    Key/value cache where each entry expires ttl_seconds after it was set.

    Expired entries are removed lazily on get(). Setting an existing key
    refreshes its timestamp and moves it to the back of the eviction order.
    """

    def __init__(self, ttl_seconds, max_entries=1000, clock=time.time):
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        if max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self.clock = clock
        self._entries = OrderedDict()

    def get(self, key):
        """Return the cached value, or None if missing or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None

        stored_at, value = entry
        if self.clock() - stored_at >= self.ttl_seconds:
            del self._entries[key]
            return None

        logger.debug("Cache hit for %s", key)
        return value

    def set(self, key, value):
        if key in self._entries:
            del self._entries[key]
        self._entries[key] = (self.clock(), value)

        while len(self._entries) > self.max_entries:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("Evicted %s from cache", evicted)

    def delete(self, key):
        self._entries.pop(key, None)

    def clear(self):
        self._entries.clear()

    def __len__(self):
        return len(self._entries)

    def __contains__(self, key):
        return self.get(key) is not None


def make_user_key(username):
    """Normalise a GitHub username into a cache key (GitHub logins are case-insensitive)."""
    return (username or "").strip().lower()
