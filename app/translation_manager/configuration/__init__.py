"""Configuration module - public API.

Centralized configuration for the translation manager using Pydantic
BaseSettings.

Exports:
    Settings: Main settings class (for testing/overrides)
    TranslationSettings: Resolver configuration section
    get_settings: Process-wide settings singleton
"""

from translation_manager.configuration.settings import Settings, get_settings
from translation_manager.configuration.translation import TranslationSettings

__all__ = ["Settings", "TranslationSettings", "get_settings"]
