"""platform-sdk: async client for the automation cloud platform."""

from platform_sdk.client import PlatformClient
from platform_sdk.core.config import SDKConfig
from platform_sdk.exceptions import (
    ConfigurationError,
    InvalidCursorError,
    PaginationTypeMismatchError,
    SDKError,
    ValidationError,
)
from platform_sdk.pagination import (
    NonPaginatedResponse,
    PaginatedResponse,
    PaginationCursor,
    PaginationType,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "InvalidCursorError",
    "NonPaginatedResponse",
    "PaginatedResponse",
    "PaginationCursor",
    "PaginationType",
    "PaginationTypeMismatchError",
    "PlatformClient",
    "SDKConfig",
    "SDKError",
    "ValidationError",
]
