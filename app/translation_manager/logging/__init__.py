"""Structured logging infrastructure.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_logger(): Get a logger instance with a specific name
    - get_module_logger(): Get a logger for the calling module
    - bind_translation_context(): Context manager for scoped log context
    - get_bound_context(): Inspect the bound context
    - clear_translation_context(): Clear all bound context
"""

from translation_manager.logging.setup import (
    configure_logging,
    get_logger,
    get_module_logger,
)
from translation_manager.logging.context import (
    bind_translation_context,
    clear_translation_context,
    get_bound_context,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "get_module_logger",
    "bind_translation_context",
    "clear_translation_context",
    "get_bound_context",
]
