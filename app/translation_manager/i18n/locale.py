"""Process-wide current locale."""

from abc import ABC, abstractmethod
from typing import Optional


class LocaleProvider(ABC):
    """Holds the process-wide current locale."""

    @abstractmethod
    def get_locale(self) -> Optional[str]:
        """Return the current locale, or None when none has been set."""
        pass

    @abstractmethod
    def set_locale(self, locale: str) -> None:
        """Set the current locale."""
        pass


class ProcessLocaleProvider(LocaleProvider):
    """LocaleProvider keeping the current locale on the instance.

    One instance is shared by everything resolving translations in the
    process; it is not tied to a request or thread.
    """

    def __init__(self, locale: Optional[str] = None):
        self._locale = locale

    def get_locale(self) -> Optional[str]:
        return self._locale

    def set_locale(self, locale: str) -> None:
        self._locale = locale
