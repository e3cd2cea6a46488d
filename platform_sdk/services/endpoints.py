"""API endpoint paths, relative to ``{base_url}/{org}/{tenant}/``."""

ORCHESTRATOR_BASE = "orchestrator_"
PIMS_BASE = "pims_"
DATAFABRIC_BASE = "datafabric_"

_ODATA_CONFIG = "UiPath.Server.Configuration.OData"

ASSETS_BY_FOLDER = f"{ORCHESTRATOR_BASE}/odata/Assets/{_ODATA_CONFIG}.GetFiltered"
ASSETS_ACROSS_FOLDERS = f"{ORCHESTRATOR_BASE}/odata/Assets/{_ODATA_CONFIG}.GetAssetsAcrossFolders"

QUEUES_BY_FOLDER = f"{ORCHESTRATOR_BASE}/odata/QueueDefinitions"
QUEUES_ACROSS_FOLDERS = (
    f"{ORCHESTRATOR_BASE}/odata/QueueDefinitions/{_ODATA_CONFIG}.GetQueuesAcrossFolders"
)

BUCKETS_BY_FOLDER = f"{ORCHESTRATOR_BASE}/odata/Buckets"
BUCKETS_ACROSS_FOLDERS = f"{ORCHESTRATOR_BASE}/odata/Buckets/{_ODATA_CONFIG}.GetBucketsAcrossFolders"

TASKS_ACROSS_FOLDERS = f"{ORCHESTRATOR_BASE}/odata/Tasks/{_ODATA_CONFIG}.GetTasksAcrossFolders"
TASKS_ACROSS_FOLDERS_ADMIN = (
    f"{ORCHESTRATOR_BASE}/odata/Tasks/{_ODATA_CONFIG}.GetTasksAcrossFoldersForAdmin"
)

PROCESSES = f"{ORCHESTRATOR_BASE}/odata/Releases"

PROCESS_INSTANCES = f"{PIMS_BASE}/api/v1/instances"


def task_users(folder_id: int) -> str:
    return f"{ORCHESTRATOR_BASE}/odata/Tasks/{_ODATA_CONFIG}.GetTaskUsers(organizationUnitId={folder_id})"


def bucket_file_metadata(bucket_id: int) -> str:
    return f"{ORCHESTRATOR_BASE}/api/Buckets/{bucket_id}/ListFiles"


def entity_records(entity_id: str) -> str:
    return f"{DATAFABRIC_BASE}/api/EntityService/entity/{entity_id}/read"
