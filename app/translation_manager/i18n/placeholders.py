"""Placeholder substitution for translation lines."""

import re
from typing import Any, Mapping, Optional

PLACEHOLDER_PREFIX = ":"


def replace_placeholders(
    template: str, replacements: Optional[Mapping[str, Any]] = None
) -> str:
    """Replace ``:name`` placeholders in a translation line.

    Matching is case-sensitive and runs once, left to right; inserted values
    are never scanned for further placeholders. A leading colon on a mapping
    key is ignored. When two names overlap (``:name``/``:names``) the longer
    one wins. A None value is inserted as an empty string.

    Args:
        template: Translation line (e.g., "Hello :name").
        replacements: Mapping of placeholder name to value.

    Returns:
        The line with placeholders replaced.

    Example:
        >>> replace_placeholders("Hello :name", {"name": "World"})
        'Hello World'
    """
    if not replacements:
        return template

    values = {
        str(name).lstrip(PLACEHOLDER_PREFIX): "" if value is None else str(value)
        for name, value in replacements.items()
    }
    names = sorted((name for name in values if name), key=len, reverse=True)
    if not names:
        return template

    pattern = re.compile(
        re.escape(PLACEHOLDER_PREFIX) + "(" + "|".join(map(re.escape, names)) + ")"
    )
    return pattern.sub(lambda match: values[match.group(1)], template)
