"""EntityService — Data Fabric entity records (offset pagination, limit/start)."""

from __future__ import annotations

from typing import Any

from platform_sdk.exceptions import ValidationError
from platform_sdk.pagination import ENTITY_OFFSET_PARAMS, GetAllConfig, PaginationType
from platform_sdk.pagination.constants import ENTITY_TOTAL_COUNT_FIELD
from platform_sdk.services import endpoints
from platform_sdk.services.base import BaseService, ListResult


class EntityService(BaseService):
    async def get_records(self, entity_id: str, **options: Any) -> ListResult:
        """Read records of the entity *entity_id*.

        ``expansionLevel`` is sent as-is; other keys get the OData prefix.

        Raises :class:`ValidationError` if *entity_id* is empty.
        """
        if not entity_id:
            raise ValidationError("entity_id is required for get_records")
        config = GetAllConfig(
            endpoint=endpoints.entity_records(entity_id),
            pagination_type=PaginationType.OFFSET,
            total_count_field=ENTITY_TOTAL_COUNT_FIELD,
            param_names=ENTITY_OFFSET_PARAMS,
            exclude_from_prefix=("expansionLevel",),
        )
        return await self._list(config, options)
