"""PlatformClient — entry point bundling the HTTP executor and resource services."""

from __future__ import annotations

import httpx

from platform_sdk.core.config import SDKConfig
from platform_sdk.core.http import ApiClient
from platform_sdk.services import (
    AssetService,
    BucketService,
    CaseInstanceService,
    EntityService,
    ProcessInstanceService,
    ProcessService,
    QueueService,
    TaskService,
)


class PlatformClient:
    """Async client for one organization/tenant.

    Usage::

        async with PlatformClient(SDKConfig.from_env()) as sdk:
            page = await sdk.assets.get_all(page_size=10)
            if page.has_next_page:
                page = await sdk.assets.get_all(cursor=page.next_cursor)
    """

    def __init__(
        self,
        config: SDKConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or SDKConfig.from_env()
        self.api = ApiClient(self.config, transport=transport)

        self.assets = AssetService(self.api)
        self.queues = QueueService(self.api)
        self.buckets = BucketService(self.api)
        self.processes = ProcessService(self.api)
        self.tasks = TaskService(self.api)
        self.process_instances = ProcessInstanceService(self.api)
        self.case_instances = CaseInstanceService(self.api)
        self.entities = EntityService(self.api)

    async def close(self) -> None:
        await self.api.close()

    async def __aenter__(self) -> PlatformClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()
