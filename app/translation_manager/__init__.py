"""Translation manager - package-aware translation resolution layer."""

from translation_manager.i18n import (
    TranslationResolver,
    TranslationService,
    create_resolver,
    get_translation_manager,
)

__all__ = [
    "TranslationResolver",
    "TranslationService",
    "create_resolver",
    "get_translation_manager",
]
