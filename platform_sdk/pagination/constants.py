"""Pagination limits, default response field names and wire parameter presets."""

from __future__ import annotations

from dataclasses import dataclass

PAGE_SIZE_MIN = 1
PAGE_SIZE_MAX = 1000
PAGE_SIZE_DEFAULT = 50

# Default response body fields (OData collections)
DEFAULT_ITEMS_FIELD = "value"
DEFAULT_TOTAL_COUNT_FIELD = "@odata.count"
DEFAULT_CONTINUATION_TOKEN_FIELD = "continuationToken"

# Data Fabric entity records
ENTITY_TOTAL_COUNT_FIELD = "totalRecordCount"

# Storage bucket file listings
BUCKET_ITEMS_FIELD = "items"
BUCKET_CONTINUATION_TOKEN_FIELD = "continuationToken"

# Maestro process instances
PROCESS_INSTANCE_ITEMS_FIELD = "instances"
PROCESS_INSTANCE_CONTINUATION_TOKEN_FIELD = "nextPage"

ODATA_PREFIX = "$"


@dataclass(frozen=True)
class PaginationParamNames:
    """Query-parameter spellings a backend uses for paging.

    ``None`` means the backend has no such parameter; the mapper then leaves
    it out of the request.
    """

    page_size: str
    offset: str | None = None
    token: str | None = None
    count: str | None = None


ODATA_OFFSET_PARAMS = PaginationParamNames(page_size="$top", offset="$skip", count="$count")
ENTITY_OFFSET_PARAMS = PaginationParamNames(page_size="limit", offset="start")
BUCKET_TOKEN_PARAMS = PaginationParamNames(page_size="takeHint", token="continuationToken")
PROCESS_INSTANCE_TOKEN_PARAMS = PaginationParamNames(page_size="pageSize", token="nextPage")


def limited_page_size(page_size: int | None) -> int:
    """Clamp *page_size* into ``[PAGE_SIZE_MIN, PAGE_SIZE_MAX]``; ``None`` gives the default."""
    if page_size is None:
        return PAGE_SIZE_DEFAULT
    return max(PAGE_SIZE_MIN, min(page_size, PAGE_SIZE_MAX))
