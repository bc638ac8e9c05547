import pytest

from translation_manager.caching import reset_cache
from translation_manager.configuration import get_settings
from translation_manager.i18n import get_translation_manager
from translation_manager.logging import clear_translation_context


@pytest.fixture(autouse=True)
def reset_singletons():
    """Give every test fresh process singletons."""
    reset_cache()
    get_settings.cache_clear()
    get_translation_manager.cache_clear()
    yield
    reset_cache()
    get_settings.cache_clear()
    get_translation_manager.cache_clear()
    clear_translation_context()


@pytest.fixture
def clean_translation_env(monkeypatch):
    """Remove translation environment variables so defaults apply."""
    for name in (
        "APP_LOCALE",
        "APP_FALLBACK_LOCALE",
        "TRANSLATION_CACHE_ENABLED",
        "TRANSLATION_CACHE_PREFIX",
        "TRANSLATION_LANG_PATH",
        "TRANSLATION_FILE_EXTENSION",
        "TRANSLATION_CORE_PACKAGE",
        "LOG_LEVEL",
        "PREFIX",
    ):
        monkeypatch.delenv(name, raising=False)
