"""Translation service for dependency injection.

Provides a class-based interface to the resolver for easier DI and testing.
"""

from typing import Any, Mapping, Optional

from translation_manager.i18n.factory import get_translation_manager
from translation_manager.i18n.filesystem import PathLike
from translation_manager.i18n.resolver import TranslationResolver


class TranslationService:
    """Class-based translation service.

    A thin facade: all work is delegated to the underlying
    TranslationResolver, by default the process singleton.

    Usage:
        service = TranslationService()
        service.register_package("shop", "/srv/shop/lang")
        message = service.translate("shop::cart.empty")
    """

    def __init__(self, resolver: Optional[TranslationResolver] = None):
        """Initialize translation service.

        Args:
            resolver: Optional pre-configured resolver. If not provided, uses
                the process singleton from the factory.
        """
        self._resolver = resolver or get_translation_manager()

    def translate(
        self,
        key: str,
        replacements: Optional[Mapping[str, Any]] = None,
        locale: Optional[str] = None,
    ) -> Any:
        """Translate a key; returns the key itself when no translation exists."""
        return self._resolver.get(key, replacements, locale)

    def translate_choice(
        self,
        key: str,
        number: Any,
        replacements: Optional[Mapping[str, Any]] = None,
        locale: Optional[str] = None,
    ) -> str:
        """Translate a key choosing the plural form for ``number``."""
        return self._resolver.choice(key, number, replacements, locale)

    def has_translation(self, key: str, locale: Optional[str] = None) -> bool:
        """Check whether a translation exists for key in locale."""
        return self._resolver.has(key, locale)

    def register_package(self, package: str, base_lang_path: PathLike) -> list[str]:
        """Register a package's translation directory.

        Returns:
            Locales loaded for the package.
        """
        return self._resolver.register_package_translations(package, base_lang_path)

    @property
    def locale(self) -> str:
        """Current locale."""
        return self._resolver.get_locale()

    @locale.setter
    def locale(self, value: str) -> None:
        self._resolver.set_locale(value)

    @property
    def resolver(self) -> TranslationResolver:
        """Access the underlying resolver."""
        return self._resolver
