"""Translation cache.

Memoizes resolved translations under keys of the form
``{prefix}.{locale}.{package|APP}.{group}.{item}``. Entries never expire.

Usage:

    from translation_manager.caching import get_cache

    cache = get_cache()
    value = cache.remember_forever(cache_key, lambda: fetch(...))
"""

from translation_manager.caching.cache import TranslationCache
from translation_manager.caching.factory import get_cache, reset_cache
from translation_manager.caching.key_builder import build_cache_key
from translation_manager.caching.memory import InMemoryTranslationCache

__all__ = [
    "TranslationCache",
    "InMemoryTranslationCache",
    "build_cache_key",
    "get_cache",
    "reset_cache",
]
