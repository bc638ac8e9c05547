"""Factory functions for creating i18n components.

``create_resolver`` is the composition root: it wires configuration, store,
cache and locale provider into a resolver, performs the bootstrap
registration of the core package and attaches the host translator.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from translation_manager.caching import TranslationCache, get_cache
from translation_manager.configuration import Settings, get_settings
from translation_manager.i18n.errors import ErrorReporter, LoggingErrorReporter
from translation_manager.i18n.fallback import FallbackTranslator
from translation_manager.i18n.filesystem import (
    LocalTranslationFileSystem,
    TranslationFileSystem,
)
from translation_manager.i18n.host import HostCatalogTranslator
from translation_manager.i18n.locale import ProcessLocaleProvider
from translation_manager.i18n.models import ResolverConfig
from translation_manager.i18n.resolver import TranslationResolver
from translation_manager.i18n.store import PackageTranslationStore
from translation_manager.logging import get_module_logger

logger = get_module_logger()


def create_resolver(
    settings: Optional[Settings] = None,
    cache: Optional[TranslationCache] = None,
    file_system: Optional[TranslationFileSystem] = None,
    fallback_translator: Optional[FallbackTranslator] = None,
    error_reporter: Optional[ErrorReporter] = None,
) -> TranslationResolver:
    """Create and configure a TranslationResolver.

    When ``TRANSLATION_LANG_PATH`` is configured, the core package is
    registered from it and, unless ``fallback_translator`` is given, a
    HostCatalogTranslator over the same directory is attached.

    Args:
        settings: Settings instance (default: process settings).
        cache: Cache backend (default: process cache when caching is enabled).
        file_system: File system provider (default: local disk).
        fallback_translator: Host translator to attach.
        error_reporter: Reporter for degraded operations.

    Returns:
        TranslationResolver: Configured resolver.

    Usage:
        # Defaults from the environment
        resolver = create_resolver()

        # Explicit host translator
        resolver = create_resolver(fallback_translator=my_translator)
    """
    settings = settings or get_settings()
    translation_settings = settings.translation
    config = ResolverConfig.from_settings(translation_settings)
    file_system = file_system or LocalTranslationFileSystem()
    error_reporter = error_reporter or LoggingErrorReporter()

    store = PackageTranslationStore(
        file_system=file_system,
        file_extension=translation_settings.file_extension,
        error_reporter=error_reporter,
    )
    if cache is None and config.cache_enabled:
        cache = get_cache()

    resolver = TranslationResolver(
        config=config,
        store=store,
        cache=cache,
        locale_provider=ProcessLocaleProvider(),
        error_reporter=error_reporter,
    )

    lang_path = translation_settings.lang_path
    if lang_path:
        resolver.register_package_translations(
            translation_settings.core_package, Path(lang_path)
        )

    if fallback_translator is None and lang_path:
        fallback_translator = HostCatalogTranslator(
            lang_path,
            default_locale=config.default_locale,
            fallback_locale=config.fallback_locale,
            file_system=file_system,
            file_extension=translation_settings.file_extension,
        )

    if fallback_translator is not None:
        resolver.set_fallback_translator(fallback_translator)

    logger.info(
        "translation_resolver_configured",
        lang_path=lang_path,
        cache_enabled=config.cache_enabled,
        state=resolver.state.value,
    )
    return resolver


@lru_cache
def get_translation_manager() -> TranslationResolver:
    """Get the process-wide resolver singleton.

    Returns:
        TranslationResolver: Cached resolver built from the environment.
    """
    return create_resolver()
