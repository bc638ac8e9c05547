"""Context binding for structured logging.

Binds translation-scoped metadata (package, locale, ...) to every log entry
emitted inside a block, using structlog's contextvars.

Usage:
    from translation_manager.logging import bind_translation_context

    with bind_translation_context(package="shop", locale="en"):
        logger.info("registering_package")
"""

from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_translation_context(
    package: Optional[str] = None,
    locale: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind translation context to all logs within the context manager.

    Args:
        package: Package being registered or resolved.
        locale: Locale in effect.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is bound to structlog's context vars.
    """
    context: dict[str, Any] = {}

    if package is not None:
        context["package"] = package

    if locale is not None:
        context["locale"] = locale

    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


def get_bound_context() -> dict[str, Any]:
    """Return the currently bound logging context."""
    return structlog.contextvars.get_contextvars()


def clear_translation_context() -> None:
    """Clear all bound logging context."""
    structlog.contextvars.clear_contextvars()
