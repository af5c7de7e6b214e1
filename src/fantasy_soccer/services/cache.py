"""
Result Cache

Fixed-TTL in-memory cache for API responses. One instance is created per
application and handed to request handlers as a dependency.
"""

import logging
import threading
import time
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class ResultCache:
    """
    Key/value cache where every entry expires after a fixed TTL.

    Usage:
        cache = ResultCache(ttl=600)
        cache.set("players:all", response)
        cached = cache.get("players:all")
    """

    def __init__(self, ttl: float = 600, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self._clock = clock
        self._entries: dict[str, tuple[float, Any]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        """Get a cached value, or None if missing or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                logger.debug("Cache miss: %s", key)
                return None

            expires_at, value = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                logger.debug("Cache expired: %s", key)
                return None

            logger.debug("Cache hit: %s", key)
            return value

    def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        """Store a value, optionally overriding the default TTL."""
        ttl = self.ttl if ttl is None else ttl
        with self._lock:
            self._entries[key] = (self._clock() + ttl, value)

    def delete(self, key: str) -> None:
        """Remove a single entry."""
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._entries.clear()
        logger.info("Cache cleared")

    def has(self, key: str) -> bool:
        """Check whether a live entry exists for the key."""
        return self.get(key) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
