"""Contract of the host translator consulted when the store has no entry."""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional


class FallbackTranslator(ABC):
    """Host-provided translator.

    ``get`` must return the key unchanged when it has no translation: the
    resolver relies on that to detect a miss. Implementations may also offer
    ``add_namespace(namespace, hint)``; the resolver checks for it before
    delegating.
    """

    @abstractmethod
    def get(
        self,
        key: str,
        replacements: Optional[Mapping[str, Any]] = None,
        locale: Optional[str] = None,
    ) -> Any:
        """Translate ``key``, or return it unchanged when unknown."""
        pass

    @abstractmethod
    def choice(
        self,
        key: str,
        number: Any,
        replacements: Optional[Mapping[str, Any]] = None,
        locale: Optional[str] = None,
    ) -> str:
        """Translate ``key`` selecting the plural form for ``number``."""
        pass


def supports_namespaces(translator: Any) -> bool:
    """Check whether a translator can register namespaces."""
    return callable(getattr(translator, "add_namespace", None))
