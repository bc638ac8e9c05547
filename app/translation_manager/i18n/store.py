"""In-memory store of package translations.

Translations are kept as ``{package: {locale: tree}}`` and populated by
registering a package's language directory::

    {base_lang_path}/
        en/shop.yml
        fr/shop.yml
        en_US/shop.yml

Directories whose name is 2 or 5 characters long are treated as locales.
Registering the same package and locale again merges the new top-level keys
into the existing tree; nothing is ever removed.
"""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

from translation_manager.i18n.errors import (
    ErrorReporter,
    LoggingErrorReporter,
    TranslationErrorCode,
    TranslationFileError,
)
from translation_manager.i18n.filesystem import (
    LocalTranslationFileSystem,
    PathLike,
    TranslationFileSystem,
)
from translation_manager.i18n.models import TranslationTree, TranslationValue
from translation_manager.i18n.tree import lookup_path
from translation_manager.logging import bind_translation_context, get_module_logger

logger = get_module_logger()

LOCALE_DIRECTORY_LENGTHS = (2, 5)


def is_locale_directory(name: str) -> bool:
    """Check whether a directory name looks like a locale code (en, en_US)."""
    return len(name) in LOCALE_DIRECTORY_LENGTHS


class PackageTranslationStore:
    """Holds translations registered by packages.

    Not synchronized: registration is expected to finish before concurrent
    lookups begin.

    Attributes:
        file_system: Provider used to discover and load translation files.
        file_extension: Extension of package translation files (without dot).
        error_reporter: Receives reports of skipped registrations.
    """

    def __init__(
        self,
        file_system: Optional[TranslationFileSystem] = None,
        file_extension: str = "yml",
        error_reporter: Optional[ErrorReporter] = None,
    ):
        self.file_system = file_system or LocalTranslationFileSystem()
        self.file_extension = file_extension.lstrip(".")
        self.error_reporter = error_reporter or LoggingErrorReporter()
        self._translations: Dict[str, Dict[str, TranslationTree]] = {}

    def register(self, package: str, base_lang_path: PathLike) -> List[str]:
        """Register the translation files of a package.

        Never raises: an invalid path, missing locale directories, missing
        files and unloadable or non-mapping files are reported and skipped.

        Args:
            package: Package name; also the translation file's stem.
            base_lang_path: Directory holding one subdirectory per locale.

        Returns:
            Locales whose translations were loaded by this call.
        """
        with bind_translation_context(package=package):
            if not self.file_system.is_directory(base_lang_path):
                logger.warning(
                    "package_registration_invalid_path", path=str(base_lang_path)
                )
                self.error_reporter.report(
                    TranslationErrorCode.REGISTRATION_SKIPPED,
                    {"package": package, "path": str(base_lang_path), "reason": "invalid_path"},
                )
                return []

            logger.info("registering_package_translations", path=str(base_lang_path))

            locales = self.available_locales(base_lang_path)
            if not locales:
                logger.warning(
                    "package_registration_no_locales", path=str(base_lang_path)
                )
                self.error_reporter.report(
                    TranslationErrorCode.REGISTRATION_SKIPPED,
                    {"package": package, "path": str(base_lang_path), "reason": "no_locales"},
                )
                return []

            loaded = []
            for locale in locales:
                if self._register_locale(package, base_lang_path, locale):
                    loaded.append(locale)

            logger.info(
                "registered_package_translations",
                locale_count=len(loaded),
                locales=loaded,
            )
            return loaded

    def _register_locale(self, package: str, base_lang_path: PathLike, locale: str) -> bool:
        file_path = self.translation_file_path(base_lang_path, locale, package)
        logger.debug("checking_translation_file", locale=locale, file=str(file_path))

        if not self.file_system.exists(file_path):
            logger.debug("translation_file_not_found", locale=locale, file=str(file_path))
            self.error_reporter.report(
                TranslationErrorCode.REGISTRATION_SKIPPED,
                {"package": package, "locale": locale, "file": str(file_path), "reason": "file_not_found"},
            )
            return False

        try:
            translations = self.file_system.load(file_path)
        except TranslationFileError as e:
            logger.error(
                "translation_file_load_failed",
                locale=locale,
                file=str(file_path),
                error=str(e),
            )
            self.error_reporter.report(
                TranslationErrorCode.FILE_LOAD_ERROR,
                {"package": package, "locale": locale, "file": str(file_path)},
                exception=e,
            )
            return False

        if not isinstance(translations, dict):
            logger.warning(
                "translation_file_not_mapping",
                locale=locale,
                file=str(file_path),
                content_type=type(translations).__name__,
            )
            self.error_reporter.report(
                TranslationErrorCode.REGISTRATION_SKIPPED,
                {"package": package, "locale": locale, "file": str(file_path), "reason": "not_mapping"},
            )
            return False

        self.load_translations(package, locale, translations)
        logger.debug("translations_loaded", locale=locale)
        return True

    def load_translations(
        self, package: str, locale: str, translations: Mapping[str, Any]
    ) -> None:
        """Merge a translation tree into the store.

        Top-level keys of ``translations`` are added to, or replace those of,
        the existing tree for (package, locale).

        Args:
            package: Package name.
            locale: Locale code.
            translations: Translation tree to merge.
        """
        package_locales = self._translations.setdefault(package, {})
        existing = package_locales.get(locale, {})
        package_locales[locale] = {**existing, **translations}

    def available_locales(self, base_lang_path: PathLike) -> List[str]:
        """List locale directory names under ``base_lang_path``."""
        locales = [
            name
            for name in self.file_system.list_directories(base_lang_path)
            if is_locale_directory(name)
        ]
        logger.debug("locales_found", path=str(base_lang_path), locales=locales)
        return locales

    def translation_file_path(
        self, base_lang_path: PathLike, locale: str, package: str
    ) -> Path:
        """Build ``{base_lang_path}/{locale}/{package}.{extension}``."""
        return Path(base_lang_path) / locale / f"{package}.{self.file_extension}"

    def has_locale(self, package: str, locale: str) -> bool:
        """Check whether translations exist for (package, locale)."""
        return locale in self._translations.get(package, {})

    def get_translations(self, package: str, locale: str) -> Optional[TranslationTree]:
        """Get the translation tree for (package, locale), or None."""
        return self._translations.get(package, {}).get(locale)

    def lookup(
        self, package: str, locale: str, path: str
    ) -> Tuple[bool, TranslationValue]:
        """Look up a dot path in the tree for (package, locale).

        Returns:
            Tuple of (found, value).
        """
        tree = self.get_translations(package, locale)
        if tree is None:
            return False, None
        return lookup_path(tree, path)

    def packages(self) -> List[str]:
        """List registered package names."""
        return list(self._translations.keys())

    def locales(self, package: str) -> List[str]:
        """List locales loaded for ``package``."""
        return list(self._translations.get(package, {}).keys())
