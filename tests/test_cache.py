"""
Tests for the in-memory response cache.
"""

from league_hub.api.cache import SimpleCache


class TestSimpleCache:
    def test_hit_and_miss(self):
        cache = SimpleCache()
        assert cache.get("stats", "passing") is None

        cache.set({"count": 2}, "stats", "passing")

        assert cache.get("stats", "passing") == {"count": 2}
        stats = cache.get_stats()
        assert (stats["hits"], stats["misses"]) == (1, 1)

    def test_entries_match_size(self):
        cache = SimpleCache()
        cache.set(1, "a")
        cache.set(2, "b")
        cache.set(3, "a")

        assert cache.size() == 2
        assert cache.get_stats()["entries"] == cache.size()

    def test_expired_entry_is_dropped(self):
        cache = SimpleCache()
        cache.set("old", "key", ttl=-1)

        assert cache.get("key") is None
        assert cache.size() == 0

    def test_disabled_cache_stores_nothing(self):
        cache = SimpleCache(enabled=False)
        cache.set("value", "key")

        assert cache.get("key") is None
        assert cache.get_stats() == {"enabled": False, "entries": 0, "hits": 0, "misses": 1}
