"""CaseInstanceService — maestro case management instances (token pagination)."""

from __future__ import annotations

from typing import Any

from platform_sdk.pagination import PROCESS_INSTANCE_TOKEN_PARAMS, GetAllConfig, PaginationType
from platform_sdk.pagination.constants import (
    PROCESS_INSTANCE_CONTINUATION_TOKEN_FIELD,
    PROCESS_INSTANCE_ITEMS_FIELD,
)
from platform_sdk.services import endpoints
from platform_sdk.services.base import BaseService, ListResult

CASE_MANAGEMENT_PROCESS_TYPE = "CaseManagement"


class CaseInstanceService(BaseService):
    async def get_all(self, **options: Any) -> ListResult:
        """List case instances.

        Shares the process-instance endpoint, always narrowed with
        ``processType=CaseManagement``. Caller filters are sent verbatim.
        """
        options = {**options, "processType": CASE_MANAGEMENT_PROCESS_TYPE}
        config = GetAllConfig(
            endpoint=endpoints.PROCESS_INSTANCES,
            pagination_type=PaginationType.TOKEN,
            items_field=PROCESS_INSTANCE_ITEMS_FIELD,
            continuation_token_field=PROCESS_INSTANCE_CONTINUATION_TOKEN_FIELD,
            param_names=PROCESS_INSTANCE_TOKEN_PARAMS,
            exclude_from_prefix=tuple(options),
        )
        return await self._list(config, options)
