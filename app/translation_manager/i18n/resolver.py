"""Package-aware translation resolver.

Resolves ``package::group.item`` keys against the package translation store
first and falls back to a host translator, optionally memoizing each result.
A missing translation resolves to the key that was asked for.

Lifecycle: a resolver starts UNINITIALIZED and becomes ATTACHED once a
fallback translator is injected with ``set_fallback_translator``. The host
translator is usually created after the resolver, hence the setter. Until
then, store lookups and locale handling work and everything needing the
fallback degrades to the raw key or a no-op.
"""

import copy
from typing import Any, List, Mapping, Optional

from translation_manager.caching import TranslationCache, build_cache_key, get_cache
from translation_manager.i18n.errors import (
    ErrorReporter,
    LoggingErrorReporter,
    TranslationErrorCode,
    TranslatorAlreadyAttachedError,
)
from translation_manager.i18n.fallback import FallbackTranslator, supports_namespaces
from translation_manager.i18n.filesystem import PathLike
from translation_manager.i18n.locale import LocaleProvider, ProcessLocaleProvider
from translation_manager.i18n.models import (
    DEFAULT_LOCALE,
    ResolverConfig,
    ResolverState,
    TranslationKey,
    TranslationTree,
    TranslationValue,
    missing_key_marker,
)
from translation_manager.i18n.parser import parse_key
from translation_manager.i18n.placeholders import replace_placeholders
from translation_manager.i18n.store import PackageTranslationStore
from translation_manager.logging import get_module_logger

logger = get_module_logger()


class _UncachedResult(Exception):
    """Carries a fetch result that must not be stored in the cache."""

    def __init__(self, value: TranslationValue):
        super().__init__(value)
        self.value = value


class TranslationResolver:
    """Resolves translation keys for the application.

    Attributes:
        config: Locale and cache configuration.
        store: Package translations consulted before the fallback.
        cache: Cache used when ``config.cache_enabled`` is set.
        locale_provider: Holder of the process-wide current locale.
        error_reporter: Receives reports of degraded operations.
    """

    def __init__(
        self,
        config: Optional[ResolverConfig] = None,
        store: Optional[PackageTranslationStore] = None,
        cache: Optional[TranslationCache] = None,
        locale_provider: Optional[LocaleProvider] = None,
        error_reporter: Optional[ErrorReporter] = None,
    ):
        self.config = config or ResolverConfig.from_settings()
        self.error_reporter = error_reporter or LoggingErrorReporter()
        self.store = store or PackageTranslationStore(error_reporter=self.error_reporter)
        self.cache = cache if cache is not None else (
            get_cache() if self.config.cache_enabled else None
        )
        self.locale_provider = locale_provider or ProcessLocaleProvider()
        self._fallback: Optional[FallbackTranslator] = None
        logger.debug(
            "translation_resolver_created",
            cache_enabled=self.config.cache_enabled,
            default_locale=self.config.default_locale,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def state(self) -> ResolverState:
        """Current lifecycle state."""
        if self._fallback is None:
            return ResolverState.UNINITIALIZED
        return ResolverState.ATTACHED

    @property
    def fallback_translator(self) -> Optional[FallbackTranslator]:
        """The attached fallback translator, if any."""
        return self._fallback

    def set_fallback_translator(self, translator: FallbackTranslator) -> None:
        """Attach the host translator. Allowed exactly once.

        Raises:
            TranslatorAlreadyAttachedError: If a translator is already attached.
        """
        if self._fallback is not None:
            raise TranslatorAlreadyAttachedError(
                "A fallback translator is already attached"
            )
        self._fallback = translator
        logger.debug(
            "fallback_translator_attached", translator=type(translator).__name__
        )

    # ------------------------------------------------------------------
    # Translator operations
    # ------------------------------------------------------------------

    def get(
        self,
        key: str,
        replacements: Optional[Mapping[str, Any]] = None,
        locale: Optional[str] = None,
    ) -> Any:
        """Translate a key.

        Placeholders are substituted after the cache, so cached values never
        carry one call's replacements into another.

        Args:
            key: Raw key (``package::group.item``, ``group.item`` or ``item``).
            replacements: Values for ``:name`` placeholders.
            locale: Locale to translate to; defaults to ``get_locale()``.

        Returns:
            The translated string, a copy of a structured group, or ``key``
            unchanged when no translation exists.
        """
        logger.debug("translation_requested", key=key, locale=locale)
        parsed = parse_key(key)
        locale = locale or self.get_locale()

        value = self._resolve(parsed, locale)
        if value == missing_key_marker(parsed):
            logger.debug("translation_missing", key=key, locale=locale)
            return key

        return self._present(value, replacements)

    def has(self, key: str, locale: Optional[str] = None) -> bool:
        """Check whether a key resolves from the store or the fallback."""
        parsed = parse_key(key)
        value = self._resolve(parsed, locale or self.get_locale())
        return value != missing_key_marker(parsed)

    def choice(
        self,
        key: str,
        number: Any,
        replacements: Optional[Mapping[str, Any]] = None,
        locale: Optional[str] = None,
    ) -> str:
        """Translate a key choosing the plural form for ``number``.

        Pluralization always belongs to the fallback translator. Without one
        the key is returned unchanged.
        """
        if self._fallback is None:
            logger.error("choice_without_fallback_translator", key=key)
            self.error_reporter.report(
                TranslationErrorCode.FALLBACK_UNAVAILABLE,
                {"operation": "choice", "key": key},
            )
            return key

        logger.debug("choice_delegated", key=key, number=number)
        return self._fallback.choice(
            key, number, dict(replacements or {}), locale or self.get_locale()
        )

    def get_locale(self) -> str:
        """Return the current locale, else the configured default, else ``en``."""
        return (
            self.locale_provider.get_locale()
            or self.config.default_locale
            or DEFAULT_LOCALE
        )

    def set_locale(self, locale: str) -> None:
        """Set the process-wide current locale; a no-op if already current."""
        if self.locale_provider.get_locale() != locale:
            self.locale_provider.set_locale(locale)
            logger.info("application_locale_set", locale=locale)

    def get_fallback_locale(self) -> str:
        """Return the configured fallback locale."""
        return self.config.fallback_locale

    def add_namespace(self, namespace: str, hint: PathLike) -> None:
        """Register a namespace with the fallback translator.

        Logs an error and does nothing when no capable translator is attached.
        """
        if self._fallback is not None and supports_namespaces(self._fallback):
            logger.debug("add_namespace_delegated", namespace=namespace, hint=str(hint))
            self._fallback.add_namespace(namespace, hint)
            return

        logger.error(
            "add_namespace_unavailable",
            namespace=namespace,
            hint=str(hint),
            state=self.state.value,
        )
        self.error_reporter.report(
            TranslationErrorCode.FALLBACK_UNAVAILABLE,
            {"operation": "add_namespace", "namespace": namespace},
        )

    # ------------------------------------------------------------------
    # Package registration
    # ------------------------------------------------------------------

    def register_package_translations(
        self, package: str, base_lang_path: PathLike
    ) -> List[str]:
        """Register a package's translation files with the store.

        Returns:
            Locales loaded by this call.
        """
        return self.store.register(package, base_lang_path)

    def get_package_translations(
        self, package: str, locale: str
    ) -> Optional[TranslationTree]:
        """Return the stored tree for (package, locale), or None."""
        return self.store.get_translations(package, locale)

    # ------------------------------------------------------------------
    # Resolution pipeline
    # ------------------------------------------------------------------

    def _resolve(self, key: TranslationKey, locale: str) -> TranslationValue:
        if not self.config.cache_enabled or self.cache is None:
            try:
                return self._fetch(key, locale)
            except _UncachedResult as result:
                return result.value

        cache_key = build_cache_key(self.config.cache_prefix, locale, key)
        try:
            return self.cache.remember_forever(
                cache_key, lambda: self._fetch(key, locale)
            )
        except _UncachedResult as result:
            # A miss seen before the fallback is attached is not remembered.
            return result.value

    def _fetch(self, key: TranslationKey, locale: str) -> TranslationValue:
        logger.debug(
            "translation_fetch_started",
            package=key.package,
            group=key.group,
            item=key.item,
            locale=locale,
        )

        if key.package and self.store.has_locale(key.package, locale):
            for path in self._store_paths(key):
                found, value = self.store.lookup(key.package, locale, path)
                if found:
                    logger.debug("translation_found_in_store", path=path)
                    return value
            logger.debug("translation_not_in_store", package=key.package, locale=locale)
        else:
            logger.debug("package_locale_not_in_store", package=key.package, locale=locale)

        canonical = str(key)
        if self._fallback is None:
            logger.error("fallback_translator_unavailable", key=canonical)
            self.error_reporter.report(
                TranslationErrorCode.FALLBACK_UNAVAILABLE,
                {"operation": "get", "key": canonical, "locale": locale},
            )
            raise _UncachedResult(missing_key_marker(key))

        translation = self._fallback.get(canonical, {}, locale)
        if translation == canonical:
            logger.warning("translation_not_found", key=canonical, locale=locale)
            self.error_reporter.report(
                TranslationErrorCode.MISSING_TRANSLATION,
                {"key": canonical, "locale": locale},
            )
            return missing_key_marker(key)

        logger.debug("translation_found_via_fallback", key=canonical)
        return translation

    @staticmethod
    def _store_paths(key: TranslationKey) -> List[str]:
        # Files may nest items under their group or hold them at the top level.
        paths = [key.path]
        if key.item != key.path:
            paths.append(key.item)
        return paths

    @staticmethod
    def _present(value: TranslationValue, replacements: Optional[Mapping[str, Any]]) -> Any:
        if isinstance(value, str):
            return replace_placeholders(value, replacements)
        if isinstance(value, (dict, list)):
            return copy.deepcopy(value)
        if value is None:
            return ""
        return str(value)
