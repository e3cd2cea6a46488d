"""PaginationOrchestrator — the single ``get_all`` entry point for listings.

Resource services describe a listing with :class:`GetAllConfig`; the
orchestrator decides between the paginated and the one-shot flow, performs
exactly one request through the executor and shapes the result.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Protocol

import structlog

from platform_sdk.pagination.assembler import PageAssembler
from platform_sdk.pagination.constants import limited_page_size
from platform_sdk.pagination.models import (
    GetAllConfig,
    NonPaginatedResponse,
    PageInfo,
    PaginatedResponse,
    PaginationDetectionInfo,
    PaginationOptions,
    PaginationType,
)
from platform_sdk.pagination.params import RequestParameterMapper
from platform_sdk.pagination.validator import PaginationValidator, has_pagination_parameters

log = structlog.get_logger("platform_sdk.pagination")

SCOPE_OPTION = "folder_id"


class RequestExecutor(Protocol):
    """Network collaborator. Errors it raises are propagated untouched."""

    async def get(
        self,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any: ...

    async def request_with_paging(
        self,
        method: str,
        path: str,
        wire_params: Mapping[str, Any],
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any: ...


def add_prefix_to_keys(
    params: Mapping[str, Any], prefix: str, keys: Iterable[str]
) -> dict[str, Any]:
    """Return a copy of *params* with *prefix* prepended to each key in *keys*.

    ``add_prefix_to_keys({"expand": "a", "foo": 1}, "$", ["expand"])``
    gives ``{"$expand": "a", "foo": 1}``.
    """
    keys = set(keys)
    return {(f"{prefix}{key}" if key in keys else key): value for key, value in params.items()}


def _body_field(body: Any, name: str) -> Any:
    if isinstance(body, Mapping):
        return body.get(name)
    return None


class PaginationOrchestrator:
    """Façade every resource service calls to list a collection."""

    def __init__(
        self,
        executor: RequestExecutor,
        validator: PaginationValidator | None = None,
        mapper: RequestParameterMapper | None = None,
    ) -> None:
        self._executor = executor
        self._validator = validator or PaginationValidator()
        self._mapper = mapper or RequestParameterMapper()

    async def get_all(
        self,
        config: GetAllConfig,
        options: Mapping[str, Any] | None = None,
    ) -> PaginatedResponse[Any] | NonPaginatedResponse[Any]:
        """List a collection.

        Returns a :class:`PaginatedResponse` when any of ``cursor``,
        ``page_size`` or ``jump_to_page`` is set in *options*, otherwise a
        :class:`NonPaginatedResponse`. ``folder_id`` selects the scoped
        endpoint and header. Remaining keys are forwarded as query
        parameters, prefixed unless listed in ``config.exclude_from_prefix``.

        Validation errors are raised before any request is sent.
        """
        options = dict(options or {})
        paginated = has_pagination_parameters(options)

        scope_id = options.pop(SCOPE_OPTION, None)
        paging = PaginationOptions(
            page_size=options.pop("page_size", None),
            cursor=options.pop("cursor", None),
            jump_to_page=options.pop("jump_to_page", None),
        )
        extra = {key: value for key, value in options.items() if value is not None}

        query = self._prepare_query(config, extra, scope_id)
        endpoint = self._resolve_endpoint(config, scope_id)
        headers = {config.scope_header: str(scope_id)} if scope_id is not None else {}

        if paginated:
            return await self._get_page(config, paging, endpoint, query, headers)
        return await self._get_everything(config, endpoint, query, headers)

    # ── flows ──────────────────────────────────────────────────────────────

    async def _get_page(
        self,
        config: GetAllConfig,
        paging: PaginationOptions,
        endpoint: str,
        query: dict[str, Any],
        headers: dict[str, str],
    ) -> PaginatedResponse[Any]:
        pagination_type = config.pagination_type
        internal = self._validator.validate(paging, pagination_type)
        wire = self._mapper.to_wire_params(
            pagination_type, internal, config.resolved_param_names
        )

        body = await self._executor.request_with_paging(
            "GET", endpoint, wire, params=query, headers=headers
        )

        raw_items = _body_field(body, config.items_field) or []
        total_count = _body_field(body, config.total_count_field)
        token = _body_field(body, config.continuation_token_field)

        if pagination_type is PaginationType.OFFSET:
            page_size: int | None = limited_page_size(internal.page_size)
            current_page: int | None = internal.page_number or 1
        else:
            page_size = (
                limited_page_size(internal.page_size) if internal.page_size is not None else None
            )
            current_page = None

        has_more = PageAssembler.has_more_pages(
            pagination_type,
            PaginationDetectionInfo(
                current_page=current_page or 1,
                items_count=len(raw_items),
                total_count=total_count,
                page_size=page_size,
                continuation_token=token,
            ),
        )
        page_info = PageInfo(
            has_more=has_more,
            total_count=total_count,
            current_page=current_page,
            page_size=page_size,
            continuation_token=token,
        )

        log.debug(
            "pagination.page_fetched",
            endpoint=endpoint,
            pagination_type=pagination_type.value,
            page=current_page,
            items=len(raw_items),
            has_more=has_more,
        )
        return PageAssembler.create_paginated_response(
            page_info, pagination_type, self._transform(config, raw_items)
        )

    async def _get_everything(
        self,
        config: GetAllConfig,
        endpoint: str,
        query: dict[str, Any],
        headers: dict[str, str],
    ) -> NonPaginatedResponse[Any]:
        body = await self._executor.get(endpoint, params=query, headers=headers)

        raw_items = _body_field(body, config.items_field) or []
        total_count = _body_field(body, config.total_count_field)

        log.debug("pagination.list_fetched", endpoint=endpoint, items=len(raw_items))
        return NonPaginatedResponse(
            items=self._transform(config, raw_items),
            total_count=total_count,
        )

    # ── helpers ────────────────────────────────────────────────────────────

    @staticmethod
    def _prepare_query(
        config: GetAllConfig, extra: dict[str, Any], scope_id: int | None
    ) -> dict[str, Any]:
        if config.process_parameters is not None:
            extra = dict(config.process_parameters(extra, scope_id))
        keys_to_prefix = [key for key in extra if key not in config.exclude_from_prefix]
        return add_prefix_to_keys(extra, config.prefix, keys_to_prefix)

    @staticmethod
    def _resolve_endpoint(config: GetAllConfig, scope_id: int | None) -> str:
        if scope_id is not None and config.scoped_endpoint:
            return config.scoped_endpoint
        if callable(config.endpoint):
            return config.endpoint(scope_id)
        return config.endpoint

    @staticmethod
    def _transform(config: GetAllConfig, raw_items: list[Any]) -> list[Any]:
        if config.transform is None:
            return list(raw_items)
        return [config.transform(item) for item in raw_items]
