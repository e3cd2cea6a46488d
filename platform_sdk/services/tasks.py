"""TaskService — action center tasks (offset pagination, OData)."""

from __future__ import annotations

from typing import Any

from platform_sdk.exceptions import ValidationError
from platform_sdk.pagination import ODATA_OFFSET_PARAMS, GetAllConfig, PaginationType
from platform_sdk.services import endpoints
from platform_sdk.services.base import BaseService, ListResult

DEFAULT_TASK_EXPAND = "AssignedToUser,CreatorUser,LastModifierUser"


def process_task_parameters(options: dict[str, Any], folder_id: int | None) -> dict[str, Any]:
    """Add the default expansions; narrow ``filter`` to *folder_id* when given."""
    processed = dict(options)
    expand = processed.get("expand")
    processed["expand"] = f"{DEFAULT_TASK_EXPAND},{expand}" if expand else DEFAULT_TASK_EXPAND

    if folder_id is not None:
        folder_filter = f"organizationUnitId eq {folder_id}"
        existing = processed.get("filter")
        processed["filter"] = f"{existing} and {folder_filter}" if existing else folder_filter
    return processed


def _tasks_config(endpoint: str) -> GetAllConfig:
    return GetAllConfig(
        endpoint=endpoint,
        pagination_type=PaginationType.OFFSET,
        param_names=ODATA_OFFSET_PARAMS,
        process_parameters=process_task_parameters,
        exclude_from_prefix=("event",),
    )


TASKS_CONFIG = _tasks_config(endpoints.TASKS_ACROSS_FOLDERS)
ADMIN_TASKS_CONFIG = _tasks_config(endpoints.TASKS_ACROSS_FOLDERS_ADMIN)


class TaskService(BaseService):
    async def get_all(
        self,
        folder_id: int | None = None,
        *,
        as_task_admin: bool = False,
        **options: Any,
    ) -> ListResult:
        """List tasks visible to the caller (or to a task admin)."""
        config = ADMIN_TASKS_CONFIG if as_task_admin else TASKS_CONFIG
        return await self._list(config, options, folder_id)

    async def get_users(self, folder_id: int, **options: Any) -> ListResult:
        """List users that tasks in *folder_id* can be assigned to.

        Raises :class:`ValidationError` if *folder_id* is missing.
        """
        if folder_id is None:
            raise ValidationError("folder_id is required for get_users")
        config = GetAllConfig(
            endpoint=endpoints.task_users(folder_id),
            pagination_type=PaginationType.OFFSET,
            param_names=ODATA_OFFSET_PARAMS,
        )
        return await self._list(config, options, folder_id)
