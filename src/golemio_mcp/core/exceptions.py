"""Custom exceptions for golemio-mcp."""

from typing import Optional


class GolemioError(Exception):
    """Base exception for all golemio-mcp errors."""

    pass


class ConfigurationError(GolemioError):
    """Raised when required configuration (the API token) is missing."""

    pass


class ParameterValidationError(GolemioError):
    """Raised when a caller-supplied tool parameter is malformed or out of range.

    Always raised before any network I/O happens.
    """

    pass


class UpstreamError(GolemioError):
    """Raised when the Golemio API answers with a non-2xx status or cannot be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None, reason: Optional[str] = None):
        self.status_code = status_code
        self.reason = reason
        super().__init__(message)


class DeserializationError(GolemioError):
    """Raised when an upstream body does not parse into the expected shape."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.original_error = original_error
        if original_error:
            message = f"{message}: {original_error!s}"
        super().__init__(message)
