"""Catalog-backed host translator.

Application translations live in a language directory laid out per locale
and per group::

    {lang_path}/
        en/messages.yml        -> "messages.welcome"
        en.yml                 -> "Welcome!" (keys without a group)
        fr/messages.yml

Namespaces registered with ``add_namespace`` map ``namespace::group.item``
keys to their own directory with the same layout. Catalog files are loaded
lazily and kept for the lifetime of the translator.
"""

import copy
import re
from collections.abc import Sized
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

from translation_manager.i18n.errors import TranslationFileError
from translation_manager.i18n.fallback import FallbackTranslator
from translation_manager.i18n.filesystem import (
    LocalTranslationFileSystem,
    PathLike,
    TranslationFileSystem,
)
from translation_manager.i18n.models import TranslationKey, TranslationTree
from translation_manager.i18n.parser import parse_key
from translation_manager.i18n.placeholders import replace_placeholders
from translation_manager.i18n.tree import lookup_path
from translation_manager.logging import get_module_logger

logger = get_module_logger()

PLURAL_SEPARATOR = "|"
_EXACT_CONDITION = re.compile(r"^\s*\{\s*(-?\d+)\s*\}\s*(.*)$", re.DOTALL)
_RANGE_CONDITION = re.compile(
    r"^\s*\[\s*(-?\d+|\*)\s*,\s*(-?\d+|\*)\s*\]\s*(.*)$", re.DOTALL
)


def _count(number: Any) -> float:
    if isinstance(number, Sized):
        return len(number)
    return number


def _matches_condition(segment: str, count: float) -> Tuple[bool, Optional[str]]:
    exact = _EXACT_CONDITION.match(segment)
    if exact:
        return count == int(exact.group(1)), exact.group(2)

    ranged = _RANGE_CONDITION.match(segment)
    if ranged:
        low, high, line = ranged.groups()
        above_low = low == "*" or count >= int(low)
        below_high = high == "*" or count <= int(high)
        return above_low and below_high, line

    return False, None


def _strip_condition(segment: str) -> str:
    for pattern in (_EXACT_CONDITION, _RANGE_CONDITION):
        match = pattern.match(segment)
        if match:
            return match.groups()[-1]
    return segment


def select_plural_form(line: str, number: Any) -> str:
    """Choose the form of a pipe-separated line for ``number``.

    Explicit conditions (``{0} none``, ``[2,*] many``) are honored first;
    otherwise the first form is singular and the second plural.

    Example:
        >>> select_plural_form("{0} No items|[1,1] One item|[2,*] :count items", 5)
        ':count items'
        >>> select_plural_form("apple|apples", 1)
        'apple'
    """
    count = _count(number)
    segments = line.split(PLURAL_SEPARATOR)

    for segment in segments:
        matched, form = _matches_condition(segment, count)
        if matched:
            return form.strip()

    forms = [_strip_condition(segment).strip() for segment in segments]
    if len(forms) == 1:
        return forms[0]
    return forms[0] if count == 1 else forms[1]


class HostCatalogTranslator(FallbackTranslator):
    """Translator over application catalogs, used as the resolver's fallback.

    Attributes:
        lang_path: Directory holding the application's catalogs.
        default_locale: Locale used when a call does not pass one.
        fallback_locale: Locale tried when the requested one has no line.
        file_system: Provider used to load catalog files.
        file_extension: Extension of catalog files (without dot).
    """

    def __init__(
        self,
        lang_path: PathLike,
        default_locale: str = "en",
        fallback_locale: str = "en",
        file_system: Optional[TranslationFileSystem] = None,
        file_extension: str = "yml",
    ):
        self.lang_path = Path(lang_path)
        self.default_locale = default_locale
        self.fallback_locale = fallback_locale
        self.file_system = file_system or LocalTranslationFileSystem()
        self.file_extension = file_extension.lstrip(".")
        self._namespaces: Dict[str, Path] = {}
        self._catalogs: Dict[Tuple[Path, str, Optional[str]], TranslationTree] = {}
        logger.info(
            "initialized_host_translator",
            lang_path=str(self.lang_path),
            fallback_locale=fallback_locale,
        )

    def add_namespace(self, namespace: str, hint: PathLike) -> None:
        """Register a directory for ``namespace::group.item`` keys.

        Args:
            namespace: Namespace prefix used in keys.
            hint: Directory with the same layout as the application catalogs.
        """
        self._namespaces[namespace] = Path(hint)
        logger.info("namespace_added", namespace=namespace, hint=str(hint))

    @property
    def namespaces(self) -> Dict[str, Path]:
        """Registered namespaces and their directories."""
        return dict(self._namespaces)

    def get(
        self,
        key: str,
        replacements: Optional[Mapping[str, Any]] = None,
        locale: Optional[str] = None,
    ) -> Any:
        found, line = self._find_line(parse_key(key), locale or self.default_locale)
        if not found:
            logger.debug("host_translation_not_found", key=key)
            return key

        if isinstance(line, str):
            return replace_placeholders(line, replacements)
        if isinstance(line, (dict, list)):
            return copy.deepcopy(line)
        return str(line)

    def choice(
        self,
        key: str,
        number: Any,
        replacements: Optional[Mapping[str, Any]] = None,
        locale: Optional[str] = None,
    ) -> str:
        found, line = self._find_line(parse_key(key), locale or self.default_locale)
        if not found or not isinstance(line, str):
            logger.debug("host_choice_not_found", key=key)
            return key

        values = {"count": _count(number)}
        values.update(replacements or {})
        return replace_placeholders(select_plural_form(line, number), values)

    def _find_line(self, key: TranslationKey, locale: str) -> Tuple[bool, Any]:
        if key.package is not None:
            directory = self._namespaces.get(key.package)
            if directory is None:
                logger.debug("host_namespace_unknown", namespace=key.package)
                return False, None
        else:
            directory = self.lang_path

        locales = [locale]
        if self.fallback_locale and self.fallback_locale != locale:
            locales.append(self.fallback_locale)

        for candidate in locales:
            catalog = self._catalog(directory, candidate, key.group)
            found, line = lookup_path(catalog, key.item)
            if found:
                if candidate != locale:
                    logger.info(
                        "used_fallback_translation",
                        key=str(key),
                        requested_locale=locale,
                        fallback_locale=candidate,
                    )
                return True, line
        return False, None

    def _catalog(
        self, directory: Path, locale: str, group: Optional[str]
    ) -> TranslationTree:
        cache_key = (directory, locale, group)
        if cache_key in self._catalogs:
            return self._catalogs[cache_key]

        if group is None:
            file_path = directory / f"{locale}.{self.file_extension}"
        else:
            file_path = directory / locale / f"{group}.{self.file_extension}"

        catalog: TranslationTree = {}
        if self.file_system.exists(file_path):
            try:
                data = self.file_system.load(file_path)
            except TranslationFileError as e:
                logger.warning(
                    "host_catalog_load_failed", file=str(file_path), error=str(e)
                )
            else:
                if isinstance(data, dict):
                    catalog = data
                else:
                    logger.warning("host_catalog_not_mapping", file=str(file_path))

        self._catalogs[cache_key] = catalog
        return catalog

    def clear_cache(self) -> None:
        """Forget all loaded catalogs so they are read again on next use."""
        self._catalogs.clear()
        logger.info("cleared_host_catalogs")
