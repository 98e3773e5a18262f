"""
Versioning Exceptions

Exception hierarchy for configuration errors and request-time version rejection.
Supports structured error information, error codes, and context.
"""

from enum import Enum
from typing import Any

import structlog

logger = structlog.get_logger(__name__)

UNSUPPORTED_VERSION_MESSAGE = "Requested API version is not supported"


class ErrorCode(str, Enum):
    """Standard error codes for versioning exceptions."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    UNSUPPORTED_API_VERSION = "UNSUPPORTED_API_VERSION"


class VersioningException(Exception):
    """
    Base class for all versioning exceptions.

    Provides structured error information with error codes, context, and metadata.
    """

    log_level = "error"

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        status_code: int = 500,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        """
        Initialize versioning exception.

        Args:
            message: Human-readable error message
            error_code: Standard error code
            status_code: HTTP status code (default: 500)
            context: Additional context data
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.context = context or {}
        self.cause = cause

        getattr(logger, self.log_level)(
            "Versioning exception raised",
            error_code=error_code.value,
            message=message,
            status_code=status_code,
            context=context,
            exception_type=type(self).__name__,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        result = {
            "error": self.error_code.value,
            "message": self.message,
            "type": type(self).__name__,
        }
        if self.context:
            result["context"] = self.context
        return result


class InvalidArgumentError(VersioningException):
    """Raised when a configuration or construction call gets a missing or empty argument."""

    def __init__(self, function: str, argument: str | None = None, **kwargs):
        context = kwargs.pop("context", {})
        context["function"] = function
        if argument:
            context["argument"] = argument

        super().__init__(
            message=f"{function}: bad function arguments",
            error_code=ErrorCode.INVALID_ARGUMENT,
            context=context,
            **kwargs
        )


class UnsupportedVersionError(VersioningException):
    """Raised while handling a request whose version is outside the supported range."""

    log_level = "warning"

    def __init__(self, version: str, **kwargs):
        self.version = version
        context = kwargs.pop("context", {})
        context["version"] = version

        super().__init__(
            message=UNSUPPORTED_VERSION_MESSAGE,
            error_code=ErrorCode.UNSUPPORTED_API_VERSION,
            status_code=400,
            context=context,
            **kwargs
        )

    def to_dict(self) -> dict[str, Any]:
        """Clients only ever see the message."""
        return {"message": self.message}
