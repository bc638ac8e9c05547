"""Translation key parsing."""

from translation_manager.i18n.models import TranslationKey
from translation_manager.logging import get_module_logger

logger = get_module_logger()

PACKAGE_SEPARATOR = "::"
GROUP_SEPARATOR = "."


def parse_key(key: str) -> TranslationKey:
    """Split a raw key into package, group and item.

    Only the first ``::`` and the first ``.`` after it are significant, so
    ``"pkg::a.b.c"`` yields group ``a`` and item ``b.c``. Every string is
    valid input, including empty segments.

    Args:
        key: Raw translation key.

    Returns:
        TranslationKey with the parsed parts.
    """
    package = None
    rest = key
    if PACKAGE_SEPARATOR in key:
        package, rest = key.split(PACKAGE_SEPARATOR, 1)

    group = None
    item = rest
    if GROUP_SEPARATOR in rest:
        group, item = rest.split(GROUP_SEPARATOR, 1)

    logger.debug(
        "translation_key_parsed",
        key=key,
        package=package,
        group=group,
        item=item,
    )
    return TranslationKey(package=package, group=group, item=item)
