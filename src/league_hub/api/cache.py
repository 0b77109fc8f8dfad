"""In-memory caching layer with TTL support."""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional
import hashlib
import threading


class SimpleCache:
    """Thread-safe in-memory cache with TTL."""

    def __init__(self, default_ttl: int = 300, enabled: bool = True):
        """
        Initialize cache with default TTL.

        Args:
            default_ttl: Default time-to-live in seconds (default: 5 minutes)
            enabled: When False, `set` stores nothing and every `get` misses
        """
        self._cache: dict[str, tuple[Any, datetime]] = {}
        self._lock = threading.RLock()
        self.default_ttl = default_ttl
        self.enabled = enabled
        self._hits = 0
        self._misses = 0

    def _make_key(self, *args) -> str:
        """
        Create cache key from arguments.

        Returns:
            MD5 hash of concatenated arguments
        """
        key_str = "|".join(str(arg) for arg in args)
        return hashlib.md5(key_str.encode()).hexdigest()

    def get(self, *args) -> Optional[Any]:
        """
        Get cached value if not expired.

        Returns:
            Cached value if exists and not expired, None otherwise
        """
        key = self._make_key(*args)

        with self._lock:
            if key in self._cache:
                value, expiry = self._cache[key]
                if datetime.now(timezone.utc) < expiry:
                    self._hits += 1
                    return value
                del self._cache[key]
            self._misses += 1

        return None

    def set(self, value: Any, *args, ttl: Optional[int] = None):
        """
        Set cached value with TTL.

        Args:
            value: Value to cache
            *args: Arguments to create cache key from
            ttl: Time-to-live in seconds (uses default_ttl if None)
        """
        if not self.enabled:
            return

        key = self._make_key(*args)
        ttl = ttl or self.default_ttl
        expiry = datetime.now(timezone.utc) + timedelta(seconds=ttl)

        with self._lock:
            self._cache[key] = (value, expiry)

    def size(self) -> int:
        """Get number of cached entries."""
        with self._lock:
            return len(self._cache)

    def get_stats(self) -> dict[str, Any]:
        with self._lock:
            return {"enabled": self.enabled, "entries": self.size(), "hits": self._hits, "misses": self._misses}

