"""
Process-wide cache for application-level access tokens.

One entry per application key. Entries are only superseded by a newer
``set`` or dropped when read after their expiry.
"""

from __future__ import annotations

import threading
import time
from typing import Callable


class AccessTokenCache:
    """Thread-safe key -> (token, expiry) mapping."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: dict[str, tuple[str, float]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        """Return the token for ``key``, or None if absent or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            token, expires_at = entry
            # valid strictly before expiry
            if self._clock() >= expires_at:
                del self._entries[key]
                return None
            return token

    def set(self, key: str, token: str, ttl_seconds: float) -> None:
        """Store ``token`` until now + ``ttl_seconds``, replacing any prior entry."""
        with self._lock:
            self._entries[key] = (token, self._clock() + ttl_seconds)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


_cache: AccessTokenCache | None = None
_cache_lock = threading.Lock()


def get_cache() -> AccessTokenCache:
    global _cache

    with _cache_lock:
        if _cache is None:
            _cache = AccessTokenCache()
        return _cache
