"""Exceptions raised by functiongraph."""

from typing import Any, Optional


class FunctionGraphError(Exception):
    """Base class for all errors raised by this package."""


class DecodeError(FunctionGraphError, ValueError):
    """Raised when a response body does not match the expected wire shape."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value


class PaginationError(FunctionGraphError):
    """Raised when a paginated listing stops making progress."""


class RequestError(FunctionGraphError):
    """Raised when the service answers a list call with an error status."""

    def __init__(self, message: str, status_code: int, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ConfigurationError(FunctionGraphError, ValueError):
    """Raised when the service configuration is missing or invalid."""
