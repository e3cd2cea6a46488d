"""Base class for resource services."""

from __future__ import annotations

from typing import Any

from platform_sdk.pagination import (
    GetAllConfig,
    NonPaginatedResponse,
    PaginatedResponse,
    PaginationOrchestrator,
    RequestExecutor,
)

ListResult = PaginatedResponse[Any] | NonPaginatedResponse[Any]


class BaseService:
    """Stateless service bound to one request executor."""

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor
        self._paginator = PaginationOrchestrator(executor)

    async def _list(
        self,
        config: GetAllConfig,
        options: dict[str, Any],
        folder_id: int | None = None,
    ) -> ListResult:
        if folder_id is not None:
            options = {**options, "folder_id": folder_id}
        return await self._paginator.get_all(config, options)
