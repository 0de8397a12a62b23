"""
Process-local TTL cache.

Entries carry their own lifetime so a degraded value can be kept
for a different duration than a fresh one. Nothing survives a restart.
"""

import logging
import threading
import time
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class TTLCache:
    """Small in-memory cache keyed by string with per-entry expiry."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, tuple[float, Any]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None if missing or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            expires_at, value = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                logger.debug("Cache entry expired: %s", key)
                return None

            return value

    def set(self, key: str, value: Any, ttl_seconds: float) -> None:
        """Store a value that expires after ``ttl_seconds``."""
        with self._lock:
            self._entries[key] = (self._clock() + ttl_seconds, value)

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._entries.clear()
