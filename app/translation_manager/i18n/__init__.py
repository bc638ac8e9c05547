"""i18n system - package-aware translation resolution.

Resolves ``package::group.item`` keys against translations registered by
packages, falling back to a host translator and optionally caching results.

Main components:
- models: TranslationKey, ResolverConfig, ResolverState, missing_key_marker
- parser / placeholders / tree: key parsing, ``:name`` substitution, dot paths
- store: PackageTranslationStore loading ``{lang}/{locale}/{package}.yml``
- host: HostCatalogTranslator, the catalog-backed fallback translator
- resolver: TranslationResolver
- factory / service: composition root, singleton and DI facade
"""

from translation_manager.i18n.errors import (
    ErrorReporter,
    LoggingErrorReporter,
    TranslationError,
    TranslationErrorCode,
    TranslationFileError,
    TranslatorAlreadyAttachedError,
)
from translation_manager.i18n.factory import create_resolver, get_translation_manager
from translation_manager.i18n.fallback import FallbackTranslator
from translation_manager.i18n.filesystem import (
    LocalTranslationFileSystem,
    TranslationFileSystem,
)
from translation_manager.i18n.host import HostCatalogTranslator, select_plural_form
from translation_manager.i18n.locale import LocaleProvider, ProcessLocaleProvider
from translation_manager.i18n.models import (
    ResolverConfig,
    ResolverState,
    TranslationKey,
    missing_key_marker,
)
from translation_manager.i18n.parser import parse_key
from translation_manager.i18n.placeholders import replace_placeholders
from translation_manager.i18n.resolver import TranslationResolver
from translation_manager.i18n.service import TranslationService
from translation_manager.i18n.store import PackageTranslationStore

__all__ = [
    "ErrorReporter",
    "FallbackTranslator",
    "HostCatalogTranslator",
    "LocalTranslationFileSystem",
    "LocaleProvider",
    "LoggingErrorReporter",
    "PackageTranslationStore",
    "ProcessLocaleProvider",
    "ResolverConfig",
    "ResolverState",
    "TranslationError",
    "TranslationErrorCode",
    "TranslationFileError",
    "TranslationFileSystem",
    "TranslationKey",
    "TranslationResolver",
    "TranslationService",
    "TranslatorAlreadyAttachedError",
    "create_resolver",
    "get_translation_manager",
    "missing_key_marker",
    "parse_key",
    "replace_placeholders",
    "select_plural_form",
]
