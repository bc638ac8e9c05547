"""Structlog configuration for the translation manager.

Logging goes through the standard library with structlog processors in
front of it: bound context, callsite details and exception rendering. Output
is rendered for a console in development and as JSON lines in production,
and silenced entirely while pytest is running.

Usage:
    from translation_manager.logging import configure_logging, get_module_logger

    configure_logging(log_level="DEBUG")

    logger = get_module_logger()
    logger.info("package_registered", package="shop")
"""

import inspect
import logging
import sys
from typing import Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger

from translation_manager.configuration import get_settings

SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def _build_processors(prod_mode: bool) -> List[Any]:
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def _silence() -> None:
    # Calls must stay valid under pytest while nothing reaches a handler.
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.root.setLevel(SILENT_LEVEL)
    logging.basicConfig(format="%(message)s", level=SILENT_LEVEL, force=True)


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the standard library root logger.

    Args:
        log_level: Level name (DEBUG, INFO, WARNING, ...). Defaults to
            ``LOG_LEVEL`` from settings.
        is_production: Render JSON instead of console output. Defaults to
            ``settings.is_production``.

    Returns:
        A logger using the new configuration.
    """
    if _is_test_environment():
        _silence()
        return structlog.stdlib.get_logger()

    settings = get_settings()
    prod_mode = settings.is_production if is_production is None else is_production
    level_name = (log_level or settings.LOG_LEVEL).upper()

    structlog.configure(
        processors=_build_processors(prod_mode),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def _caller_module_name(depth: int) -> Optional[str]:
    """Name of the module ``depth`` frames above the function calling this one."""
    frame = inspect.currentframe()
    for _ in range(depth + 1):
        if frame is None:
            return None
        frame = frame.f_back
    if frame is None:
        return None

    module = inspect.getmodule(frame)
    return module.__name__ if module else None


def get_logger(name: Optional[str] = None) -> BoundLogger:
    """Get a logger bound to ``name``, or to the calling module's name."""
    return logger.bind(logger_name=name or _caller_module_name(1) or "unknown")


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    Example:
        # In translation_manager/i18n/store.py
        logger = get_module_logger()
        # binds component="store", module_path="translation_manager.i18n.store"
    """
    module_name = _caller_module_name(1)
    if module_name is None:
        return logger.bind(component="unknown")

    return logger.bind(
        component=module_name.rsplit(".", 1)[-1],
        module_path=module_name,
    )
