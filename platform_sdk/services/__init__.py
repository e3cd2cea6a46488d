"""Resource services — one per platform collection, all sharing the pagination layer."""

from platform_sdk.services.assets import AssetService
from platform_sdk.services.buckets import BucketService
from platform_sdk.services.case_instances import CaseInstanceService
from platform_sdk.services.entities import EntityService
from platform_sdk.services.process_instances import ProcessInstanceService
from platform_sdk.services.processes import ProcessService
from platform_sdk.services.queues import QueueService
from platform_sdk.services.tasks import TaskService

__all__ = [
    "AssetService",
    "BucketService",
    "CaseInstanceService",
    "EntityService",
    "ProcessInstanceService",
    "ProcessService",
    "QueueService",
    "TaskService",
]
