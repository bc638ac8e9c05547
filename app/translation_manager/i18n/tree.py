"""Dot-path traversal over nested translation trees."""

from typing import Any, Mapping, Tuple

from translation_manager.i18n.models import TranslationValue

PATH_SEPARATOR = "."

_MISSING = object()


def _walk(tree: Mapping[str, Any], path: str) -> Any:
    # A literal key containing dots wins over traversal, as with flat files
    # such as {"cart.empty": "..."}.
    if path in tree:
        return tree[path]

    node: Any = tree
    for segment in path.split(PATH_SEPARATOR):
        if isinstance(node, Mapping) and segment in node:
            node = node[segment]
        elif isinstance(node, list) and segment.isdecimal() and int(segment) < len(node):
            node = node[int(segment)]
        else:
            return _MISSING
    return node


def lookup_path(tree: Mapping[str, Any], path: str) -> Tuple[bool, TranslationValue]:
    """Look up a dot path in a translation tree.

    Args:
        tree: Nested mapping of translations.
        path: Dot-separated path (e.g., "cart.empty").

    Returns:
        Tuple of (found, value); value is None when not found.
    """
    value = _walk(tree, path)
    if value is _MISSING:
        return False, None
    return True, value
