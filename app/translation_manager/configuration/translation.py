"""Translation resolution settings."""

from typing import Literal, Optional

from pydantic import Field

from translation_manager.configuration.base import TranslationManagerSettings


class TranslationSettings(TranslationManagerSettings):
    """Resolver configuration for package translations.

    Environment Variables:
        APP_LOCALE: Default locale when no current locale is set (default: en)
        APP_FALLBACK_LOCALE: Locale consulted by the host translator on a miss
            (default: en)
        TRANSLATION_CACHE_ENABLED: Memoize resolved translations (default: false)
        TRANSLATION_CACHE_PREFIX: Prefix for every cache key
            (default: utm_translations)
        TRANSLATION_LANG_PATH: Base language directory registered for the core
            package at bootstrap (default: unset)
        TRANSLATION_FILE_EXTENSION: Extension of translation files (default: yml)
        TRANSLATION_CORE_PACKAGE: Package name used for the bootstrap
            registration (default: core)

    Example:
        ```python
        from translation_manager.configuration import get_settings

        settings = get_settings()
        if settings.translation.cache_enabled:
            prefix = settings.translation.cache_prefix
        ```
    """

    default_locale: str = Field(default="en", alias="APP_LOCALE")
    fallback_locale: str = Field(default="en", alias="APP_FALLBACK_LOCALE")
    cache_enabled: bool = Field(default=False, alias="TRANSLATION_CACHE_ENABLED")
    cache_prefix: str = Field(
        default="utm_translations", alias="TRANSLATION_CACHE_PREFIX"
    )
    lang_path: Optional[str] = Field(default=None, alias="TRANSLATION_LANG_PATH")
    file_extension: Literal["yml", "yaml", "json"] = Field(
        default="yml", alias="TRANSLATION_FILE_EXTENSION"
    )
    core_package: str = Field(default="core", alias="TRANSLATION_CORE_PACKAGE")
