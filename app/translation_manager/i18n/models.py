"""Translation models for the i18n system.

Defines the parsed key, the resolver configuration, the lifecycle states and
the missing-translation marker.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from translation_manager.configuration import TranslationSettings

# A translation tree leaf is a string (or scalar); inner nodes are mappings
# or lists, arbitrarily nested.
TranslationValue = Union[str, int, float, bool, None, Dict[str, Any], List[Any]]
TranslationTree = Dict[str, TranslationValue]

DEFAULT_LOCALE = "en"
DEFAULT_CACHE_PREFIX = "utm_translations"


@dataclass(frozen=True)
class TranslationKey:
    """A parsed translation key.

    ``"shop::cart.empty"`` parses to package ``shop``, group ``cart`` and
    item ``empty``. Frozen to ensure immutability and hashability.

    Attributes:
        package: Package namespace, or None for application keys.
        group: Translation group (first dot segment), or None.
        item: Leaf key within the group, possibly dot-nested.
    """

    package: Optional[str]
    group: Optional[str]
    item: str

    def __str__(self) -> str:
        """Return the canonical key string.

        Returns:
            ``{package}::{group}.{item}``, omitting absent parts.
        """
        canonical = f"{self.group}.{self.item}" if self.group else self.item
        if self.package:
            canonical = f"{self.package}::{canonical}"
        return canonical

    @property
    def path(self) -> str:
        """Dot path of the key within a package tree (``group.item``)."""
        return f"{self.group}.{self.item}" if self.group is not None else self.item

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Create TranslationKey from a raw key string.

        Args:
            key_string: Raw key (e.g., "shop::cart.empty").

        Returns:
            TranslationKey instance.
        """
        from translation_manager.i18n.parser import parse_key

        return parse_key(key_string)


def missing_key_marker(key: TranslationKey) -> str:
    """Return the marker cached in place of a translation that does not exist.

    The marker embeds package, group and item so two different missing keys
    never share a cache value.
    """
    return (
        f"@@__MISSING_TRANSLATION__{key.package or ''}::"
        f"{key.group or ''}.{key.item}__@@"
    )


class ResolverState(str, Enum):
    """Lifecycle states of a TranslationResolver.

    UNINITIALIZED: no fallback translator attached; store lookups and locale
        handling work, fallback-backed operations degrade.
    ATTACHED: fallback translator attached, full functionality.
    """

    UNINITIALIZED = "uninitialized"
    ATTACHED = "attached"


@dataclass(frozen=True)
class ResolverConfig:
    """Configuration a TranslationResolver reads.

    Attributes:
        default_locale: Locale used when no current locale is set.
        fallback_locale: Locale the host translator falls back to.
        cache_enabled: Whether resolved translations are memoized.
        cache_prefix: Prefix for every cache key.
    """

    default_locale: str = DEFAULT_LOCALE
    fallback_locale: str = DEFAULT_LOCALE
    cache_enabled: bool = False
    cache_prefix: str = DEFAULT_CACHE_PREFIX

    @classmethod
    def from_settings(
        cls, settings: Optional[TranslationSettings] = None
    ) -> "ResolverConfig":
        """Build a ResolverConfig from environment-derived settings.

        Args:
            settings: TranslationSettings section; read from the environment
                when not provided.

        Returns:
            ResolverConfig instance.
        """
        settings = settings or TranslationSettings()
        return cls(
            default_locale=settings.default_locale or DEFAULT_LOCALE,
            fallback_locale=settings.fallback_locale or DEFAULT_LOCALE,
            cache_enabled=settings.cache_enabled,
            cache_prefix=settings.cache_prefix or DEFAULT_CACHE_PREFIX,
        )
