"""Tests for translation_manager.i18n.service module."""

from unittest.mock import MagicMock

import pytest

from translation_manager.i18n import TranslationResolver, TranslationService
from tests.factories.i18n import write_package_translations

pytestmark = pytest.mark.unit


class TestTranslationService:
    """Tests for the TranslationService facade."""

    def test_translate(self, attached_resolver):
        service = TranslationService(resolver=attached_resolver)

        assert service.translate("shop::cart.empty", locale="en") == "Your cart is empty"
        assert service.translate("greeting", {"name": "Ann"}) == "Hello Ann"

    def test_translate_choice(self, attached_resolver, stub_translator):
        service = TranslationService(resolver=attached_resolver)

        assert service.translate_choice("apples", 2) == "apples#2"

    def test_has_translation(self, attached_resolver):
        service = TranslationService(resolver=attached_resolver)

        assert service.has_translation("shop::title", "fr") is True
        assert service.has_translation("shop::missing", "fr") is False

    def test_register_package(self, resolver, tmp_path):
        write_package_translations(tmp_path, "blog", {"en": {"title": "Blog"}})
        service = TranslationService(resolver=resolver)

        assert service.register_package("blog", tmp_path) == ["en"]
        assert service.translate("blog::title", locale="en") == "Blog"

    def test_locale_property(self, resolver):
        service = TranslationService(resolver=resolver)

        service.locale = "fr"

        assert service.locale == "fr"
        assert service.translate("shop::title") == "Boutique"

    def test_delegates_to_resolver(self):
        mock_resolver = MagicMock(spec=TranslationResolver)
        service = TranslationService(resolver=mock_resolver)

        service.translate("a.b", {"x": 1}, "de")

        mock_resolver.get.assert_called_once_with("a.b", {"x": 1}, "de")
        assert service.resolver is mock_resolver

    def test_defaults_to_singleton(self, clean_translation_env):
        from translation_manager.i18n import get_translation_manager

        assert TranslationService().resolver is get_translation_manager()
