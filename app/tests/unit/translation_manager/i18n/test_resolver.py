"""Tests for translation_manager.i18n.resolver module."""

# pylint: disable=protected-access

from unittest.mock import MagicMock

import pytest

from translation_manager.i18n import (
    ProcessLocaleProvider,
    ResolverState,
    TranslationErrorCode,
    TranslationResolver,
    TranslatorAlreadyAttachedError,
)
from tests.factories.i18n import (
    NamespacedStubTranslator,
    StubFallbackTranslator,
    make_resolver_config,
)

pytestmark = pytest.mark.unit


class TestLifecycle:
    """Tests for the Uninitialized -> Attached lifecycle."""

    def test_starts_uninitialized(self, resolver):
        assert resolver.state is ResolverState.UNINITIALIZED
        assert resolver.fallback_translator is None

    def test_attach_once(self, resolver, stub_translator):
        resolver.set_fallback_translator(stub_translator)
        assert resolver.state is ResolverState.ATTACHED
        assert resolver.fallback_translator is stub_translator

    def test_second_attachment_raises(self, attached_resolver):
        with pytest.raises(TranslatorAlreadyAttachedError):
            attached_resolver.set_fallback_translator(StubFallbackTranslator())

    def test_defaults_without_arguments(self, clean_translation_env):
        resolver = TranslationResolver()
        assert resolver.config.default_locale == "en"
        assert resolver.cache is None
        assert resolver.get_locale() == "en"


class TestGetFromStore:
    """Tests for get() answered by the package store."""

    def test_end_to_end_store_hit(self, resolver):
        assert resolver.get("shop::cart.empty", {}, "en") == "Your cart is empty"

    def test_end_to_end_miss_without_fallback(self, resolver):
        assert resolver.get("shop::cart.missing", {}, "en") == "shop::cart.missing"

    def test_other_locale(self, resolver):
        assert resolver.get("shop::cart.empty", {}, "fr") == "Votre panier est vide"
        assert resolver.get("shop::title", {}, "en_US") == "Store"

    def test_top_level_item_without_group(self, resolver):
        assert resolver.get("shop::title", locale="en") == "Shop"

    def test_item_at_top_level_of_group_file(self, resolver):
        """With no nested group entry the item is looked up at the top level."""
        resolver.store.load_translations("shop", "de", {"empty": "Leer"})
        assert resolver.get("shop::cart.empty", locale="de") == "Leer"

    def test_placeholders_are_substituted(self, resolver):
        result = resolver.get("shop::cart.items", {"count": 3, "name": "Ann"}, "en")
        assert result == "You have 3 items, Ann"

    def test_empty_string_is_a_translation(self, resolver):
        """An empty translation is returned, not treated as missing."""
        assert resolver.get("shop::blank", {}, "en") == ""

    def test_group_returns_structure_copy(self, resolver):
        group = resolver.get("shop::cart", {}, "en")
        assert group["empty"] == "Your cart is empty"

        group["empty"] = "mutated"
        assert resolver.get("shop::cart.empty", {}, "en") == "Your cart is empty"

    def test_non_string_leaf_is_stringified(self, resolver):
        resolver.store.load_translations("shop", "en", {"limit": 5, "nothing": None})
        assert resolver.get("shop::limit", locale="en") == "5"
        assert resolver.get("shop::nothing", locale="en") == ""

    def test_uses_current_locale(self, resolver):
        resolver.set_locale("fr")
        assert resolver.get("shop::title") == "Boutique"

    def test_unregistered_locale_falls_through(self, resolver):
        assert resolver.get("shop::title", {}, "de") == "shop::title"

    def test_list_indexes(self, resolver):
        resolver.store.load_translations("shop", "en", {"tags": ["new", "sale"]})

        assert resolver.get("shop::tags.1", {}, "en") == "sale"

    def test_non_ascii_digit_segment_returns_key(self, resolver):
        """Superscript digits are ordinary key text, never list indexes."""
        resolver.store.load_translations("shop", "en", {"tags": ["new", "sale"]})

        assert resolver.get("shop::tags.\N{SUPERSCRIPT TWO}", {}, "en") == (
            "shop::tags.\N{SUPERSCRIPT TWO}"
        )


class TestGetFromFallback:
    """Tests for get() answered by the fallback translator."""

    def test_application_key(self, attached_resolver, stub_translator):
        assert attached_resolver.get("messages.welcome", {}, "en") == "Welcome!"
        assert stub_translator.get_calls[-1] == ("messages.welcome", {}, "en")

    def test_greeting_substitution_is_applied_after_fallback(self, attached_resolver):
        assert attached_resolver.get("greeting", {"name": "Ann"}, "en") == "Hello Ann"

    def test_fallback_called_without_replacements(self, attached_resolver, stub_translator):
        attached_resolver.get("greeting", {"name": "Ann"}, "en")
        assert stub_translator.get_calls[-1][1] == {}

    def test_package_key_missing_from_store_delegates_canonical_key(
        self, attached_resolver, stub_translator
    ):
        assert attached_resolver.get("shop::cart.checkout", {}, "en") == "Checkout"
        assert stub_translator.get_calls[-1][0] == "shop::cart.checkout"

    def test_store_hit_skips_fallback(self, attached_resolver, stub_translator):
        attached_resolver.get("shop::cart.empty", {}, "en")
        assert stub_translator.get_calls == []

    def test_missing_everywhere_returns_key(self, attached_resolver):
        assert attached_resolver.get("nowhere.to_be_found", {}, "en") == "nowhere.to_be_found"
        assert attached_resolver.get("plain", {}, "en") == "plain"

    def test_missing_key_with_placeholders_is_returned_raw(self, attached_resolver):
        assert attached_resolver.get("unknown.:name", {"name": "Ann"}, "en") == "unknown.:name"

    def test_missing_is_reported(self, store):
        reporter = MagicMock()
        resolver = TranslationResolver(
            config=make_resolver_config(), store=store, error_reporter=reporter
        )
        resolver.set_fallback_translator(StubFallbackTranslator())

        resolver.get("nope", {}, "en")

        reporter.report.assert_called_once_with(
            TranslationErrorCode.MISSING_TRANSLATION, {"key": "nope", "locale": "en"}
        )

    def test_unavailable_fallback_is_reported(self, resolver):
        reporter = MagicMock()
        resolver.error_reporter = reporter

        assert resolver.get("messages.welcome", {}, "en") == "messages.welcome"
        assert reporter.report.call_args.args[0] == TranslationErrorCode.FALLBACK_UNAVAILABLE


class TestHas:
    def test_has(self, attached_resolver):
        assert attached_resolver.has("shop::cart.empty", "en") is True
        assert attached_resolver.has("messages.welcome", "en") is True
        assert attached_resolver.has("shop::cart.nothing", "en") is False


class TestChoice:
    """Tests for choice()."""

    def test_delegates_to_fallback(self, attached_resolver, stub_translator):
        result = attached_resolver.choice("apples", 3, {"kind": "red"}, "fr")
        assert result == "apples#3"
        assert stub_translator.choice_calls == [("apples", 3, {"kind": "red"}, "fr")]

    def test_uses_current_locale(self, attached_resolver, stub_translator):
        attached_resolver.set_locale("fr")
        attached_resolver.choice("apples", 1)
        assert stub_translator.choice_calls[-1][3] == "fr"

    def test_without_fallback_returns_key(self, resolver):
        reporter = MagicMock()
        resolver.error_reporter = reporter

        assert resolver.choice("apples", 3) == "apples"
        reporter.report.assert_called_once_with(
            TranslationErrorCode.FALLBACK_UNAVAILABLE,
            {"operation": "choice", "key": "apples"},
        )


class TestLocale:
    """Tests for get_locale()/set_locale()."""

    def test_precedence(self, store):
        provider = ProcessLocaleProvider()
        resolver = TranslationResolver(
            config=make_resolver_config(default_locale="de"),
            store=store,
            locale_provider=provider,
        )
        assert resolver.get_locale() == "de"

        provider.set_locale("fr")
        assert resolver.get_locale() == "fr"

    def test_en_when_nothing_configured(self, store):
        resolver = TranslationResolver(
            config=make_resolver_config(default_locale=""), store=store
        )
        assert resolver.get_locale() == "en"

    def test_explicit_locale_wins(self, resolver):
        resolver.set_locale("fr")
        assert resolver.get("shop::title", {}, "en") == "Shop"

    def test_set_locale_only_on_change(self, store):
        provider = MagicMock()
        provider.get_locale.return_value = "fr"
        resolver = TranslationResolver(
            config=make_resolver_config(), store=store, locale_provider=provider
        )

        resolver.set_locale("fr")
        provider.set_locale.assert_not_called()

        resolver.set_locale("en")
        provider.set_locale.assert_called_once_with("en")

    def test_fallback_locale(self, store):
        resolver = TranslationResolver(
            config=make_resolver_config(fallback_locale="fr"), store=store
        )
        assert resolver.get_fallback_locale() == "fr"


class TestAddNamespace:
    """Tests for add_namespace()."""

    def test_delegates_when_capable(self, resolver):
        translator = NamespacedStubTranslator()
        resolver.set_fallback_translator(translator)

        resolver.add_namespace("billing", "/srv/billing/lang")

        assert translator.namespaces == {"billing": "/srv/billing/lang"}

    def test_no_op_without_fallback(self, resolver):
        reporter = MagicMock()
        resolver.error_reporter = reporter

        resolver.add_namespace("billing", "/srv/billing/lang")

        assert reporter.report.call_args.args[0] == TranslationErrorCode.FALLBACK_UNAVAILABLE

    def test_no_op_when_translator_lacks_namespaces(self, attached_resolver):
        reporter = MagicMock()
        attached_resolver.error_reporter = reporter

        attached_resolver.add_namespace("billing", "/srv/billing/lang")

        reporter.report.assert_called_once()


class TestPackageRegistration:
    def test_register_and_read_back(self, resolver, tmp_path):
        from tests.factories.i18n import write_package_translations

        write_package_translations(tmp_path, "blog", {"en": {"title": "Blog"}})

        assert resolver.register_package_translations("blog", tmp_path) == ["en"]
        assert resolver.get_package_translations("blog", "en") == {"title": "Blog"}
        assert resolver.get("blog::title", {}, "en") == "Blog"
