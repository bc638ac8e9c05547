"""Tests for translation_manager.caching.key_builder module."""

import pytest

from translation_manager.caching import build_cache_key
from translation_manager.i18n import TranslationKey, parse_key

pytestmark = pytest.mark.unit


class TestBuildCacheKey:
    """Tests for build_cache_key()."""

    def test_full_key(self):
        key = TranslationKey("shop", "cart", "empty")
        assert build_cache_key("utm_translations", "en", key) == (
            "utm_translations.en.shop.cart.empty"
        )

    def test_application_key_uses_app_placeholder(self):
        assert build_cache_key("p", "fr", parse_key("messages.welcome")) == (
            "p.fr.APP.messages.welcome"
        )

    def test_missing_group_leaves_empty_segment(self):
        assert build_cache_key("p", "en", parse_key("hello")) == "p.en.APP..hello"
        assert build_cache_key("p", "en", parse_key("shop::title")) == "p.en.shop..title"

    def test_locales_differ(self):
        key = parse_key("shop::cart.empty")
        assert build_cache_key("p", "en", key) != build_cache_key("p", "fr", key)
