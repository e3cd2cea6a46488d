"""ProcessInstanceService — maestro process instances (token pagination)."""

from __future__ import annotations

from typing import Any

from platform_sdk.pagination import PROCESS_INSTANCE_TOKEN_PARAMS, GetAllConfig, PaginationType
from platform_sdk.pagination.constants import (
    PROCESS_INSTANCE_CONTINUATION_TOKEN_FIELD,
    PROCESS_INSTANCE_ITEMS_FIELD,
)
from platform_sdk.services import endpoints
from platform_sdk.services.base import BaseService, ListResult


class ProcessInstanceService(BaseService):
    async def get_all(self, **options: Any) -> ListResult:
        """List process instances.

        Filters (``processKey``, ``packageId``, ``errorCode``...) are sent
        verbatim; this backend takes no OData prefixes. ``jump_to_page`` is
        rejected with ``ValidationError``.
        """
        config = GetAllConfig(
            endpoint=endpoints.PROCESS_INSTANCES,
            pagination_type=PaginationType.TOKEN,
            items_field=PROCESS_INSTANCE_ITEMS_FIELD,
            continuation_token_field=PROCESS_INSTANCE_CONTINUATION_TOKEN_FIELD,
            param_names=PROCESS_INSTANCE_TOKEN_PARAMS,
            exclude_from_prefix=tuple(options),
        )
        return await self._list(config, options)
