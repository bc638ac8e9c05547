"""Feature-level fixtures for i18n system tests."""

import pytest

from translation_manager.caching import InMemoryTranslationCache
from translation_manager.i18n import (
    PackageTranslationStore,
    ProcessLocaleProvider,
    TranslationResolver,
)
from tests.factories.i18n import (
    StubFallbackTranslator,
    make_resolver_config,
    write_package_translations,
)


@pytest.fixture
def shop_lang_dir(tmp_path):
    """Create a language directory for the ``shop`` package.

    Returns a directory structure like:
    - en/shop.yml
    - fr/shop.yml
    - en_US/shop.yml
    - assets/ (ignored: not a locale)
    """
    base = tmp_path / "lang"
    write_package_translations(
        base,
        "shop",
        {
            "en": {
                "cart": {
                    "empty": "Your cart is empty",
                    "items": "You have :count items, :name",
                },
                "title": "Shop",
                "blank": "",
            },
            "fr": {
                "cart": {"empty": "Votre panier est vide"},
                "title": "Boutique",
            },
            "en_US": {"title": "Store"},
        },
    )
    (base / "assets").mkdir()
    return base


@pytest.fixture
def store():
    """Empty PackageTranslationStore reading from the local disk."""
    return PackageTranslationStore()


@pytest.fixture
def stub_translator():
    """Stub host translator with a couple of application lines."""
    return StubFallbackTranslator(
        {
            "greeting": "Hello :name",
            "messages.welcome": "Welcome!",
            "shop::cart.checkout": "Checkout",
        }
    )


@pytest.fixture
def resolver(store, shop_lang_dir):
    """Uninitialized resolver with the shop package registered."""
    resolver = TranslationResolver(
        config=make_resolver_config(),
        store=store,
        locale_provider=ProcessLocaleProvider(),
    )
    resolver.register_package_translations("shop", shop_lang_dir)
    return resolver


@pytest.fixture
def attached_resolver(resolver, stub_translator):
    """Resolver with the stub host translator attached."""
    resolver.set_fallback_translator(stub_translator)
    return resolver


@pytest.fixture
def caching_resolver(store, shop_lang_dir, stub_translator):
    """Attached resolver with caching enabled over a private cache."""
    resolver = TranslationResolver(
        config=make_resolver_config(cache_enabled=True, cache_prefix="test"),
        store=store,
        cache=InMemoryTranslationCache(),
        locale_provider=ProcessLocaleProvider(),
    )
    resolver.register_package_translations("shop", shop_lang_dir)
    resolver.set_fallback_translator(stub_translator)
    return resolver
