"""In-memory translation cache implementation."""

import threading
from typing import Any, Callable, Dict, Optional

from translation_manager.caching.cache import TranslationCache
from translation_manager.logging import get_module_logger

logger = get_module_logger()


class InMemoryTranslationCache(TranslationCache):
    """Process-local translation cache backed by a dict.

    Thread-safe for concurrent lookups. The compute callable runs outside the
    lock, so two threads missing the same key at once may both compute it;
    the first stored value wins and is returned to both.

    Attributes:
        _entries: Mapping of cache key to cached value.
        _lock: Threading lock guarding entries and counters.
    """

    def __init__(self):
        """Initialize an empty cache."""
        self._entries: Dict[str, Any] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def remember_forever(self, key: str, compute: Callable[[], Any]) -> Any:
        with self._lock:
            if key in self._entries:
                self._hits += 1
                logger.debug("translation_cache_hit", key=key)
                return self._entries[key]
            self._misses += 1

        value = compute()

        with self._lock:
            stored = self._entries.setdefault(key, value)
            logger.debug(
                "translation_cache_stored",
                key=key,
                cache_size=len(self._entries),
            )
        return stored

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            return self._entries.get(key)

    def forget(self, key: str) -> bool:
        with self._lock:
            removed = key in self._entries
            self._entries.pop(key, None)
        if removed:
            logger.debug("translation_cache_forgot", key=key)
        return removed

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0
        logger.debug("translation_cache_cleared")

    def get_stats(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "backend": "memory",
                "entries": len(self._entries),
                "hits": self._hits,
                "misses": self._misses,
            }
