"""Error taxonomy and reporting for the i18n system.

Most translation failures are non-fatal: they are reported through an
ErrorReporter and degrade to a documented fallback value. The exceptions
below are raised only for wiring bugs and, internally, for file loading.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Optional

from translation_manager.logging import get_module_logger

logger = get_module_logger()


class TranslationError(Exception):
    """Base exception for all translation errors."""

    pass


class TranslatorAlreadyAttachedError(TranslationError):
    """Raised when a fallback translator is attached a second time.

    Example:
        >>> resolver.set_fallback_translator(host)
        >>> resolver.set_fallback_translator(other_host)
        Traceback (most recent call last):
        ...
        TranslatorAlreadyAttachedError: A fallback translator is already attached
    """

    pass


class TranslationFileError(TranslationError):
    """Raised when a translation file exists but cannot be read or parsed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load translation file {path}: {reason}")


class TranslationErrorCode(str, Enum):
    """Codes for reported (non-raised) translation conditions.

    Attributes:
        MISSING_TRANSLATION: Key found neither in the store nor the fallback.
        REGISTRATION_SKIPPED: Invalid base path, no locale directories, missing
            file or non-mapping content during registration.
        FALLBACK_UNAVAILABLE: Operation needing the fallback translator was
            called before one was attached.
        FILE_LOAD_ERROR: A translation file failed to load.
    """

    MISSING_TRANSLATION = "missing_translation"
    REGISTRATION_SKIPPED = "registration_skipped"
    FALLBACK_UNAVAILABLE = "fallback_unavailable"
    FILE_LOAD_ERROR = "file_load_error"


class ErrorReporter(ABC):
    """Receives reports of non-fatal translation conditions."""

    @abstractmethod
    def report(
        self,
        error_code: TranslationErrorCode,
        context: Optional[Dict[str, Any]] = None,
        exception: Optional[BaseException] = None,
    ) -> None:
        """Report a translation condition.

        Args:
            error_code: Code identifying the condition.
            context: Structured details (package, locale, key, path, ...).
            exception: Underlying exception, when there is one.
        """
        pass


class LoggingErrorReporter(ErrorReporter):
    """ErrorReporter that writes each report as a structured warning."""

    def report(
        self,
        error_code: TranslationErrorCode,
        context: Optional[Dict[str, Any]] = None,
        exception: Optional[BaseException] = None,
    ) -> None:
        details = dict(context or {})
        if exception is not None:
            details["exception"] = str(exception)
        logger.warning(
            "translation_error_reported",
            error_code=TranslationErrorCode(error_code).value,
            **details,
        )
