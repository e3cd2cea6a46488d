"""Tests for the resource services: endpoints, parameter shaping, argument checks."""

import pytest

from platform_sdk.exceptions import ValidationError
from platform_sdk.pagination import NonPaginatedResponse, PaginatedResponse
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
from platform_sdk.services import endpoints
from platform_sdk.services.tasks import DEFAULT_TASK_EXPAND, process_task_parameters

FOLDER_HEADER = "X-UIPATH-OrganizationUnitId"


class TestAssetService:
    @pytest.mark.anyio
    async def test_across_folders(self, executor):
        result = await AssetService(executor).get_all()
        assert isinstance(result, NonPaginatedResponse)
        executor.get.assert_awaited_once_with(
            endpoints.ASSETS_ACROSS_FOLDERS, params={}, headers={}
        )

    @pytest.mark.anyio
    async def test_in_folder(self, executor):
        await AssetService(executor).get_all(folder_id=12, filter="Name eq 'a'")
        executor.get.assert_awaited_once_with(
            endpoints.ASSETS_BY_FOLDER,
            params={"$filter": "Name eq 'a'"},
            headers={FOLDER_HEADER: "12"},
        )

    @pytest.mark.anyio
    async def test_paginated(self, executor):
        executor.request_with_paging.return_value = {"value": [{"Id": 1}], "@odata.count": 1}
        result = await AssetService(executor).get_all(folder_id=12, page_size=10)

        assert isinstance(result, PaginatedResponse)
        assert result.total_pages == 1
        assert result.has_next_page is False
        call = executor.request_with_paging.call_args
        assert call.args[1] == endpoints.ASSETS_BY_FOLDER
        assert call.args[2] == {"$top": 10, "$count": True}
        assert call.kwargs["headers"] == {FOLDER_HEADER: "12"}


class TestQueueService:
    @pytest.mark.anyio
    async def test_endpoints(self, executor):
        service = QueueService(executor)
        await service.get_all()
        await service.get_all(folder_id=3)
        paths = [call.args[0] for call in executor.get.call_args_list]
        assert paths == [endpoints.QUEUES_ACROSS_FOLDERS, endpoints.QUEUES_BY_FOLDER]


class TestBucketService:
    @pytest.mark.anyio
    async def test_get_all(self, executor):
        await BucketService(executor).get_all(folder_id=5, orderby="Name")
        executor.get.assert_awaited_once_with(
            endpoints.BUCKETS_BY_FOLDER,
            params={"$orderby": "Name"},
            headers={FOLDER_HEADER: "5"},
        )

    @pytest.mark.anyio
    async def test_file_metadata_token_paging(self, executor):
        executor.request_with_paging.return_value = {
            "items": [{"fullPath": "/a.txt"}],
            "continuationToken": "next-1",
        }
        result = await BucketService(executor).get_file_metadata(
            9, 5, prefix="/docs", page_size=100
        )

        assert result.items == [{"fullPath": "/a.txt"}]
        assert result.has_next_page is True
        assert result.supports_page_jump is False
        executor.request_with_paging.assert_awaited_once_with(
            "GET",
            endpoints.bucket_file_metadata(9),
            {"takeHint": 100},
            params={"prefix": "/docs"},
            headers={FOLDER_HEADER: "5"},
        )

    @pytest.mark.anyio
    async def test_file_metadata_jump_rejected(self, executor):
        with pytest.raises(ValidationError):
            await BucketService(executor).get_file_metadata(9, 5, jump_to_page=2)
        executor.request_with_paging.assert_not_called()

    @pytest.mark.anyio
    @pytest.mark.parametrize("bucket_id, folder_id", [(None, 5), (9, None), (0, 5)])
    async def test_file_metadata_requires_ids(self, executor, bucket_id, folder_id):
        with pytest.raises(ValidationError, match="required"):
            await BucketService(executor).get_file_metadata(bucket_id, folder_id)
        executor.get.assert_not_called()
        executor.request_with_paging.assert_not_called()


class TestProcessTaskParameters:
    def test_default_expand(self):
        assert process_task_parameters({}, None) == {"expand": DEFAULT_TASK_EXPAND}

    def test_user_expand_appended(self):
        result = process_task_parameters({"expand": "Actions"}, None)
        assert result["expand"] == f"{DEFAULT_TASK_EXPAND},Actions"

    def test_folder_filter(self):
        result = process_task_parameters({}, 4)
        assert result["filter"] == "organizationUnitId eq 4"

    def test_folder_filter_combined(self):
        result = process_task_parameters({"filter": "Status eq 'Pending'"}, 4)
        assert result["filter"] == "Status eq 'Pending' and organizationUnitId eq 4"

    def test_input_not_mutated(self):
        options = {"filter": "x"}
        process_task_parameters(options, 4)
        assert options == {"filter": "x"}


class TestTaskService:
    @pytest.mark.anyio
    async def test_params_and_folder(self, executor):
        await TaskService(executor).get_all(folder_id=4, event="Created")
        executor.get.assert_awaited_once_with(
            endpoints.TASKS_ACROSS_FOLDERS,
            params={
                "event": "Created",
                "$expand": DEFAULT_TASK_EXPAND,
                "$filter": "organizationUnitId eq 4",
            },
            headers={FOLDER_HEADER: "4"},
        )

    @pytest.mark.anyio
    async def test_as_task_admin(self, executor):
        await TaskService(executor).get_all(as_task_admin=True, page_size=5)
        assert executor.request_with_paging.call_args.args[1] == endpoints.TASKS_ACROSS_FOLDERS_ADMIN


class TestProcessInstanceService:
    @pytest.mark.anyio
    async def test_filters_unprefixed(self, executor):
        executor.request_with_paging.return_value = {
            "instances": [{"instanceId": "i-1"}],
            "nextPage": "p2",
        }
        result = await ProcessInstanceService(executor).get_all(
            processKey="invoice", page_size=25
        )

        assert result.items == [{"instanceId": "i-1"}]
        assert result.has_next_page is True
        executor.request_with_paging.assert_awaited_once_with(
            "GET",
            endpoints.PROCESS_INSTANCES,
            {"pageSize": 25},
            params={"processKey": "invoice"},
            headers={},
        )

    @pytest.mark.anyio
    async def test_follow_cursor(self, executor):
        executor.request_with_paging.return_value = {"instances": [], "nextPage": "p2"}
        service = ProcessInstanceService(executor)
        first = await service.get_all(page_size=25)

        executor.request_with_paging.return_value = {"instances": []}
        second = await service.get_all(cursor=first.next_cursor)

        assert second.has_next_page is False
        assert executor.request_with_paging.call_args.args[2] == {
            "pageSize": 25,
            "nextPage": "p2",
        }

    @pytest.mark.anyio
    async def test_jump_rejected(self, executor):
        with pytest.raises(ValidationError, match="token-based"):
            await ProcessInstanceService(executor).get_all(jump_to_page=2)


class TestEntityService:
    @pytest.mark.anyio
    async def test_records_offset(self, executor):
        executor.request_with_paging.return_value = {
            "value": [{"Id": "r1"}] * 20,
            "totalRecordCount": 45,
        }
        result = await EntityService(executor).get_records(
            "ent-1", jump_to_page=2, page_size=20, expansionLevel=1
        )

        assert result.current_page == 2
        assert result.total_pages == 3
        assert result.has_next_page is True
        executor.request_with_paging.assert_awaited_once_with(
            "GET",
            endpoints.entity_records("ent-1"),
            {"limit": 20, "start": 20},
            params={"expansionLevel": 1},
            headers={},
        )

    @pytest.mark.anyio
    async def test_requires_entity_id(self, executor):
        with pytest.raises(ValidationError, match="entity_id"):
            await EntityService(executor).get_records("")
        executor.get.assert_not_called()


class TestProcessService:
    @pytest.mark.anyio
    async def test_same_endpoint_with_and_without_folder(self, executor):
        service = ProcessService(executor)
        await service.get_all(filter="Name eq 'Invoices'")
        await service.get_all(folder_id=8)

        first, second = executor.get.call_args_list
        assert first.args[0] == second.args[0] == endpoints.PROCESSES
        assert first.kwargs == {"params": {"$filter": "Name eq 'Invoices'"}, "headers": {}}
        assert second.kwargs == {"params": {}, "headers": {FOLDER_HEADER: "8"}}

    @pytest.mark.anyio
    async def test_page_jump(self, executor):
        executor.request_with_paging.return_value = {"value": [], "@odata.count": 100}
        result = await ProcessService(executor).get_all(jump_to_page=5, page_size=10)

        assert result.current_page == 5
        assert result.supports_page_jump is True
        assert executor.request_with_paging.call_args.args[2] == {
            "$top": 10,
            "$skip": 40,
            "$count": True,
        }


class TestCaseInstanceService:
    @pytest.mark.anyio
    async def test_process_type_injected_unprefixed(self, executor):
        await CaseInstanceService(executor).get_all(packageId="CaseManagement.Claims")
        executor.get.assert_awaited_once_with(
            endpoints.PROCESS_INSTANCES,
            params={"packageId": "CaseManagement.Claims", "processType": "CaseManagement"},
            headers={},
        )

    @pytest.mark.anyio
    async def test_caller_cannot_override_process_type(self, executor):
        await CaseInstanceService(executor).get_all(processType="ProcessOrchestration")
        params = executor.get.call_args.kwargs["params"]
        assert params == {"processType": "CaseManagement"}

    @pytest.mark.anyio
    async def test_token_paging(self, executor):
        executor.request_with_paging.return_value = {
            "instances": [{"instanceId": "c-1"}],
            "nextPage": "p2",
        }
        service = CaseInstanceService(executor)
        first = await service.get_all(page_size=10)

        assert first.items == [{"instanceId": "c-1"}]
        assert first.supports_page_jump is False
        executor.request_with_paging.assert_awaited_once_with(
            "GET",
            endpoints.PROCESS_INSTANCES,
            {"pageSize": 10},
            params={"processType": "CaseManagement"},
            headers={},
        )

        await service.get_all(cursor=first.next_cursor)
        assert executor.request_with_paging.call_args.args[2] == {
            "pageSize": 10,
            "nextPage": "p2",
        }

    @pytest.mark.anyio
    async def test_jump_rejected(self, executor):
        with pytest.raises(ValidationError, match="token-based"):
            await CaseInstanceService(executor).get_all(jump_to_page=3)
        executor.request_with_paging.assert_not_called()


class TestTaskUsers:
    @pytest.mark.anyio
    async def test_folder_in_path_and_header(self, executor):
        await TaskService(executor).get_users(123, filter="name eq 'abc'")
        executor.get.assert_awaited_once_with(
            endpoints.task_users(123),
            params={"$filter": "name eq 'abc'"},
            headers={FOLDER_HEADER: "123"},
        )
        assert executor.get.call_args.args[0].endswith("GetTaskUsers(organizationUnitId=123)")

    @pytest.mark.anyio
    async def test_no_task_defaults(self, executor):
        await TaskService(executor).get_users(123)
        assert executor.get.call_args.kwargs["params"] == {}

    @pytest.mark.anyio
    async def test_paginated(self, executor):
        executor.request_with_paging.return_value = {
            "value": [{"Id": 1}] * 10,
            "@odata.count": 25,
        }
        result = await TaskService(executor).get_users(123, page_size=10)

        assert result.total_pages == 3
        assert result.has_next_page is True
        call = executor.request_with_paging.call_args
        assert call.args[1] == endpoints.task_users(123)
        assert call.kwargs["headers"] == {FOLDER_HEADER: "123"}

    @pytest.mark.anyio
    async def test_requires_folder(self, executor):
        with pytest.raises(ValidationError, match="folder_id"):
            await TaskService(executor).get_users(None)
        executor.get.assert_not_called()
