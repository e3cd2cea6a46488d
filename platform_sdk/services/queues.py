"""QueueService — queue definitions (offset pagination, OData)."""

from __future__ import annotations

from typing import Any

from platform_sdk.pagination import ODATA_OFFSET_PARAMS, GetAllConfig, PaginationType
from platform_sdk.services import endpoints
from platform_sdk.services.base import BaseService, ListResult

QUEUES_CONFIG = GetAllConfig(
    endpoint=lambda folder_id: (
        endpoints.QUEUES_BY_FOLDER if folder_id is not None else endpoints.QUEUES_ACROSS_FOLDERS
    ),
    scoped_endpoint=endpoints.QUEUES_BY_FOLDER,
    pagination_type=PaginationType.OFFSET,
    param_names=ODATA_OFFSET_PARAMS,
)


class QueueService(BaseService):
    async def get_all(self, folder_id: int | None = None, **options: Any) -> ListResult:
        return await self._list(QUEUES_CONFIG, options, folder_id)
