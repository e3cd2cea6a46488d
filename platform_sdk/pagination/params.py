"""Map internal paging parameters onto backend-specific query parameters."""

from __future__ import annotations

from typing import Any

from platform_sdk.pagination.constants import PaginationParamNames, limited_page_size
from platform_sdk.pagination.models import InternalPaginationOptions, PaginationType


class RequestParameterMapper:
    """Stateless translation to wire parameters."""

    def to_wire_params(
        self,
        pagination_type: PaginationType,
        params: InternalPaginationOptions,
        param_names: PaginationParamNames,
    ) -> dict[str, Any]:
        """Return the query parameters for one page request.

        OFFSET: page size is always sent (clamped, default 50), the offset
        only past the first page, and the count flag whenever the backend
        names one. TOKEN: size hint and continuation token, each only when
        known.
        """
        wire: dict[str, Any] = {}

        if pagination_type is PaginationType.OFFSET:
            page_size = limited_page_size(params.page_size)
            wire[param_names.page_size] = page_size
            if params.page_number is not None and params.page_number > 1:
                if param_names.offset is not None:
                    wire[param_names.offset] = (params.page_number - 1) * page_size
            if param_names.count is not None:
                wire[param_names.count] = True
            return wire

        if params.page_size is not None:
            wire[param_names.page_size] = limited_page_size(params.page_size)
        if params.continuation_token and param_names.token is not None:
            wire[param_names.token] = params.continuation_token
        return wire
