"""Data models for the pagination layer.

Everything here is an immutable value: continuation state travels in the
cursor the caller holds, never in these objects or in module state.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from platform_sdk.exceptions import ValidationError
from platform_sdk.pagination.constants import (
    BUCKET_TOKEN_PARAMS,
    DEFAULT_CONTINUATION_TOKEN_FIELD,
    DEFAULT_ITEMS_FIELD,
    DEFAULT_TOTAL_COUNT_FIELD,
    ODATA_OFFSET_PARAMS,
    ODATA_PREFIX,
    PaginationParamNames,
)

T = TypeVar("T")

FOLDER_ID_HEADER = "X-UIPATH-OrganizationUnitId"


class PaginationType(str, enum.Enum):
    """Paging style a backend resource implements."""

    OFFSET = "offset"
    TOKEN = "token"


class CursorData(BaseModel):
    """Decoded cursor payload.

    Wire names are camelCase (``pageNumber``, ``continuationToken``,
    ``pageSize``); Python attributes are snake_case.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: PaginationType
    page_number: int | None = Field(default=None, alias="pageNumber", gt=0)
    continuation_token: str | None = Field(default=None, alias="continuationToken")
    page_size: int | None = Field(default=None, alias="pageSize", gt=0)

    @model_validator(mode="after")
    def _check_type_fields(self) -> CursorData:
        if self.type is PaginationType.OFFSET and self.continuation_token is not None:
            raise ValueError("offset cursor must not carry a continuation token")
        if self.type is PaginationType.TOKEN and self.page_number is not None:
            raise ValueError("token cursor must not carry a page number")
        return self


@dataclass(frozen=True)
class PaginationCursor:
    """Opaque cursor handed to callers. Pass it back unchanged to resume."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PaginationOptions:
    """Caller paging input. ``cursor`` and ``jump_to_page`` are mutually exclusive."""

    page_size: int | None = None
    cursor: PaginationCursor | str | None = None
    jump_to_page: int | None = None

    def __post_init__(self) -> None:
        if self.cursor is not None and self.jump_to_page is not None:
            raise ValidationError("cursor and jump_to_page cannot be used together")


@dataclass(frozen=True)
class InternalPaginationOptions:
    """Normalized paging parameters produced by the validator."""

    page_size: int | None = None
    page_number: int | None = None
    continuation_token: str | None = None
    type: PaginationType | None = None


@dataclass(frozen=True)
class PageInfo:
    """Metadata about one fetched page."""

    has_more: bool
    total_count: int | None = None
    current_page: int | None = None
    page_size: int | None = None
    continuation_token: str | None = None


@dataclass(frozen=True)
class PaginationDetectionInfo:
    """Inputs for deciding whether another page exists."""

    current_page: int
    items_count: int
    total_count: int | None = None
    page_size: int | None = None
    continuation_token: str | None = None


@dataclass
class PaginatedResponse(Generic[T]):
    """One page of a listing plus navigation cursors."""

    items: list[T]
    has_next_page: bool
    supports_page_jump: bool
    total_count: int | None = None
    next_cursor: PaginationCursor | None = None
    previous_cursor: PaginationCursor | None = None
    current_page: int | None = None
    total_pages: int | None = None


@dataclass
class NonPaginatedResponse(Generic[T]):
    """A whole listing fetched in a single request."""

    items: list[T]
    total_count: int | None = None


@dataclass(frozen=True)
class GetAllConfig:
    """Per-resource listing configuration consumed by the orchestrator.

    Attributes:
        endpoint: request path, or a callable mapping the scope id (folder id,
            possibly ``None``) to a path.
        scoped_endpoint: path used instead of *endpoint* when a scope id is
            given.
        transform: applied to every raw item before it is returned.
        pagination_type: paging style of the backend resource.
        items_field: body field holding the item list.
        total_count_field: body field holding the total count.
        continuation_token_field: body field holding the continuation token.
        param_names: wire parameter spellings; defaults to the OData preset
            for OFFSET and the bucket preset for TOKEN.
        exclude_from_prefix: caller keys forwarded without *prefix*.
        prefix: prepended to every other caller key (OData ``$``).
        scope_header: header carrying the scope id.
        process_parameters: ``(extra_params, scope_id) -> extra_params`` hook
            run before prefixing.
    """

    endpoint: str | Callable[[int | None], str]
    scoped_endpoint: str | None = None
    transform: Callable[[Any], Any] | None = None
    pagination_type: PaginationType = PaginationType.OFFSET
    items_field: str = DEFAULT_ITEMS_FIELD
    total_count_field: str = DEFAULT_TOTAL_COUNT_FIELD
    continuation_token_field: str = DEFAULT_CONTINUATION_TOKEN_FIELD
    param_names: PaginationParamNames | None = None
    exclude_from_prefix: tuple[str, ...] = ()
    prefix: str = ODATA_PREFIX
    scope_header: str = FOLDER_ID_HEADER
    process_parameters: (
        Callable[[dict[str, Any], int | None], Mapping[str, Any]] | None
    ) = field(default=None)

    @property
    def resolved_param_names(self) -> PaginationParamNames:
        if self.param_names is not None:
            return self.param_names
        if self.pagination_type is PaginationType.TOKEN:
            return BUCKET_TOKEN_PARAMS
        return ODATA_OFFSET_PARAMS
