"""Cache key builder for resolved translations."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from translation_manager.i18n.models import TranslationKey

APP_PACKAGE_PLACEHOLDER = "APP"


def build_cache_key(prefix: str, locale: str, key: "TranslationKey") -> str:
    """Build the cache key for a parsed translation key.

    Keys without a package are filed under ``APP``; a missing group leaves an
    empty segment.

    Example:
        >>> build_cache_key("utm_translations", "en", TranslationKey("shop", "cart", "empty"))
        'utm_translations.en.shop.cart.empty'
        >>> build_cache_key("utm_translations", "en", TranslationKey(None, None, "hello"))
        'utm_translations.en.APP..hello'
    """
    package = key.package if key.package is not None else APP_PACKAGE_PLACEHOLDER
    group = key.group if key.group is not None else ""
    return f"{prefix}.{locale}.{package}.{group}.{key.item}"
