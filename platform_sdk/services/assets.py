"""AssetService — orchestrator assets (offset pagination, OData)."""

from __future__ import annotations

from typing import Any

from platform_sdk.pagination import ODATA_OFFSET_PARAMS, GetAllConfig, PaginationType
from platform_sdk.services import endpoints
from platform_sdk.services.base import BaseService, ListResult

ASSETS_CONFIG = GetAllConfig(
    endpoint=lambda folder_id: (
        endpoints.ASSETS_BY_FOLDER if folder_id is not None else endpoints.ASSETS_ACROSS_FOLDERS
    ),
    scoped_endpoint=endpoints.ASSETS_BY_FOLDER,
    pagination_type=PaginationType.OFFSET,
    param_names=ODATA_OFFSET_PARAMS,
)


class AssetService(BaseService):
    async def get_all(self, folder_id: int | None = None, **options: Any) -> ListResult:
        """List assets across folders, or in one folder when *folder_id* is given.

        *options* takes ``page_size`` / ``cursor`` / ``jump_to_page`` plus
        OData keys (``filter``, ``orderby``, ``select``, ``expand``...), which
        are sent with a ``$`` prefix.
        """
        return await self._list(ASSETS_CONFIG, options, folder_id)
