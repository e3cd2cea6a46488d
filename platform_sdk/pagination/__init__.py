"""Uniform cursor pagination over offset-style and token-style backends."""

from platform_sdk.pagination.assembler import PageAssembler
from platform_sdk.pagination.constants import (
    BUCKET_TOKEN_PARAMS,
    ENTITY_OFFSET_PARAMS,
    ODATA_OFFSET_PARAMS,
    PAGE_SIZE_DEFAULT,
    PAGE_SIZE_MAX,
    PROCESS_INSTANCE_TOKEN_PARAMS,
    PaginationParamNames,
    limited_page_size,
)
from platform_sdk.pagination.cursor import CursorCodec
from platform_sdk.pagination.models import (
    CursorData,
    GetAllConfig,
    InternalPaginationOptions,
    NonPaginatedResponse,
    PageInfo,
    PaginatedResponse,
    PaginationCursor,
    PaginationDetectionInfo,
    PaginationOptions,
    PaginationType,
)
from platform_sdk.pagination.orchestrator import PaginationOrchestrator, RequestExecutor
from platform_sdk.pagination.params import RequestParameterMapper
from platform_sdk.pagination.validator import PaginationValidator, has_pagination_parameters

__all__ = [
    "BUCKET_TOKEN_PARAMS",
    "ENTITY_OFFSET_PARAMS",
    "ODATA_OFFSET_PARAMS",
    "PAGE_SIZE_DEFAULT",
    "PAGE_SIZE_MAX",
    "PROCESS_INSTANCE_TOKEN_PARAMS",
    "CursorCodec",
    "CursorData",
    "GetAllConfig",
    "InternalPaginationOptions",
    "NonPaginatedResponse",
    "PageAssembler",
    "PageInfo",
    "PaginatedResponse",
    "PaginationCursor",
    "PaginationDetectionInfo",
    "PaginationOptions",
    "PaginationOrchestrator",
    "PaginationParamNames",
    "PaginationType",
    "PaginationValidator",
    "RequestExecutor",
    "RequestParameterMapper",
    "has_pagination_parameters",
    "limited_page_size",
]
