"""BucketService — storage buckets and their file listings."""

from __future__ import annotations

from typing import Any

from platform_sdk.exceptions import ValidationError
from platform_sdk.pagination import (
    BUCKET_TOKEN_PARAMS,
    ODATA_OFFSET_PARAMS,
    GetAllConfig,
    PaginationType,
)
from platform_sdk.pagination.constants import BUCKET_CONTINUATION_TOKEN_FIELD, BUCKET_ITEMS_FIELD
from platform_sdk.services import endpoints
from platform_sdk.services.base import BaseService, ListResult

BUCKETS_CONFIG = GetAllConfig(
    endpoint=lambda folder_id: (
        endpoints.BUCKETS_BY_FOLDER if folder_id is not None else endpoints.BUCKETS_ACROSS_FOLDERS
    ),
    scoped_endpoint=endpoints.BUCKETS_BY_FOLDER,
    pagination_type=PaginationType.OFFSET,
    param_names=ODATA_OFFSET_PARAMS,
)


def _file_metadata_config(bucket_id: int) -> GetAllConfig:
    return GetAllConfig(
        endpoint=endpoints.bucket_file_metadata(bucket_id),
        pagination_type=PaginationType.TOKEN,
        items_field=BUCKET_ITEMS_FIELD,
        continuation_token_field=BUCKET_CONTINUATION_TOKEN_FIELD,
        param_names=BUCKET_TOKEN_PARAMS,
        # bucket listing parameter, not OData
        exclude_from_prefix=("prefix",),
    )


class BucketService(BaseService):
    async def get_all(self, folder_id: int | None = None, **options: Any) -> ListResult:
        """List buckets across folders, or in one folder when *folder_id* is given."""
        return await self._list(BUCKETS_CONFIG, options, folder_id)

    async def get_file_metadata(
        self, bucket_id: int, folder_id: int, **options: Any
    ) -> ListResult:
        """List file metadata in a bucket (token pagination, no page jumps).

        ``prefix`` restricts the listing to a path prefix.

        Raises :class:`ValidationError` if *bucket_id* or *folder_id* is missing.
        """
        if not bucket_id:
            raise ValidationError("bucket_id is required for get_file_metadata")
        if not folder_id:
            raise ValidationError("folder_id is required for get_file_metadata")
        return await self._list(_file_metadata_config(bucket_id), options, folder_id)
