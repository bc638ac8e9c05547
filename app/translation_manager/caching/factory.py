"""Translation cache factory."""

from typing import Optional

from translation_manager.caching.cache import TranslationCache
from translation_manager.caching.memory import InMemoryTranslationCache
from translation_manager.logging import get_module_logger

logger = get_module_logger()

# Singleton cache instance
_cache_instance: Optional[TranslationCache] = None


def get_cache() -> TranslationCache:
    """Get the translation cache singleton.

    Returns:
        InMemoryTranslationCache shared by every resolver in the process.
    """
    global _cache_instance

    if _cache_instance is not None:
        return _cache_instance

    _cache_instance = InMemoryTranslationCache()
    logger.info("initialized_translation_cache", backend="memory")

    return _cache_instance


def reset_cache() -> None:
    """Reset the cache singleton (for testing only)."""
    global _cache_instance
    _cache_instance = None
    logger.debug("reset_cache_singleton")
