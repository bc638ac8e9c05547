"""Top-level settings object for the translation manager."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from translation_manager.configuration.translation import TranslationSettings

# Section name -> settings class built from the environment when not passed in.
SECTIONS = {
    "translation": TranslationSettings,
}


class Settings(BaseSettings):
    """Process settings: logging options plus one attribute per section.

    Environment Variables:
        PREFIX: Deployment prefix; unset in production, where logs are JSON
        LOG_LEVEL: Root log level (default: INFO)

    Example:
        ```python
        from translation_manager.configuration import get_settings

        settings = get_settings()
        if settings.translation.cache_enabled:
            prefix = settings.translation.cache_prefix
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    translation: TranslationSettings

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    def __init__(self, **kwargs):
        """Build every section not given explicitly from the environment.

        Args:
            **kwargs: Field values, or ready-made section instances such as
                ``translation=TranslationSettings(...)``.
        """
        for name, section_class in SECTIONS.items():
            if name not in kwargs:
                kwargs[name] = section_class()
        super().__init__(**kwargs)

    @property
    def is_production(self) -> bool:
        """True when no deployment PREFIX is set."""
        return not self.PREFIX


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings singleton."""
    return Settings()
