"""ProcessService — orchestrator processes (releases), offset pagination."""

from __future__ import annotations

from typing import Any

from platform_sdk.pagination import ODATA_OFFSET_PARAMS, GetAllConfig, PaginationType
from platform_sdk.services import endpoints
from platform_sdk.services.base import BaseService, ListResult

# Same path with or without a folder; the folder travels only in the header.
PROCESSES_CONFIG = GetAllConfig(
    endpoint=endpoints.PROCESSES,
    scoped_endpoint=endpoints.PROCESSES,
    pagination_type=PaginationType.OFFSET,
    param_names=ODATA_OFFSET_PARAMS,
)


class ProcessService(BaseService):
    async def get_all(self, folder_id: int | None = None, **options: Any) -> ListResult:
        """List processes, optionally within one folder."""
        return await self._list(PROCESSES_CONFIG, options, folder_id)
