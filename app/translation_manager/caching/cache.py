"""Translation cache abstract base class."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional


class TranslationCache(ABC):
    """Abstract base class for translation cache implementations.

    Entries are kept forever: there is no TTL, and the only way an entry
    leaves the cache is an explicit ``forget``/``clear`` or an eviction by
    the backing store. Implementations are responsible for their own
    concurrency safety.
    """

    @abstractmethod
    def remember_forever(self, key: str, compute: Callable[[], Any]) -> Any:
        """Return the cached value for ``key``, computing and storing it on a miss.

        Args:
            key: Cache key.
            compute: Zero-argument callable producing the value on a miss.

        Returns:
            The cached or freshly computed value.

        Raises:
            Whatever ``compute`` raises; nothing is stored in that case.
        """
        pass

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Get the cached value for ``key``, or None if absent."""
        pass

    @abstractmethod
    def forget(self, key: str) -> bool:
        """Remove ``key`` from the cache.

        Returns:
            True if an entry was removed.
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Clear all cached entries."""
        pass

    @abstractmethod
    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dict with cache statistics (implementation-specific).
        """
        pass
