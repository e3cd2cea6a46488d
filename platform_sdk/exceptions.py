"""Custom exceptions for platform-sdk.

Errors raised by the HTTP layer (``httpx.HTTPError`` subclasses) are not
wrapped: they reach the caller exactly as the transport raised them.
"""


class SDKError(Exception):
    """Base exception for all SDK errors."""


class ValidationError(SDKError):
    """Invalid caller input, detected before any request is sent."""


class InvalidCursorError(SDKError, ValueError):
    """Raised when a cursor string cannot be decoded into cursor data."""


class PaginationTypeMismatchError(SDKError):
    """Raised when a cursor issued for one pagination style is replayed against another."""

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"pagination type mismatch: cursor is for {actual!r} but resource uses {expected!r}"
        )


class ConfigurationError(SDKError):
    """Raised when required client configuration is missing or malformed."""
