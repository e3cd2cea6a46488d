"""CLI entry point: platform-sdk.

Subcommands:
    platform-sdk list assets --page-size 10          # First page of assets
    platform-sdk list assets --cursor <next_cursor>  # Continue a listing
    platform-sdk list tasks --jump-to-page 3 --page-size 20
"""

from __future__ import annotations

import asyncio
import json
import sys
from typing import Any

import click
import httpx

from platform_sdk.client import PlatformClient
from platform_sdk.core.config import SDKConfig
from platform_sdk.core.logging import setup_logging
from platform_sdk.exceptions import SDKError
from platform_sdk.pagination import NonPaginatedResponse, PaginatedResponse

RESOURCES = (
    "assets",
    "queues",
    "buckets",
    "processes",
    "tasks",
    "task-users",
    "process-instances",
    "case-instances",
)


def _response_to_dict(response: PaginatedResponse[Any] | NonPaginatedResponse[Any]) -> dict:
    """Render a listing result as JSON-ready data, cursors as plain strings."""
    if isinstance(response, NonPaginatedResponse):
        return {"items": response.items, "total_count": response.total_count}
    return {
        "items": response.items,
        "total_count": response.total_count,
        "has_next_page": response.has_next_page,
        "next_cursor": str(response.next_cursor) if response.next_cursor else None,
        "previous_cursor": str(response.previous_cursor) if response.previous_cursor else None,
        "current_page": response.current_page,
        "total_pages": response.total_pages,
        "supports_page_jump": response.supports_page_jump,
    }


async def _list_resource(
    client: PlatformClient, resource: str, folder_id: int | None, options: dict[str, Any]
) -> PaginatedResponse[Any] | NonPaginatedResponse[Any]:
    if resource == "process-instances":
        return await client.process_instances.get_all(**options)
    if resource == "case-instances":
        return await client.case_instances.get_all(**options)
    if resource == "task-users":
        return await client.tasks.get_users(folder_id, **options)
    service = {
        "assets": client.assets,
        "queues": client.queues,
        "buckets": client.buckets,
        "processes": client.processes,
        "tasks": client.tasks,
    }[resource]
    return await service.get_all(folder_id=folder_id, **options)


async def _run_list(resource: str, folder_id: int | None, options: dict[str, Any]) -> dict:
    async with PlatformClient(SDKConfig.from_env()) as client:
        response = await _list_resource(client, resource, folder_id, options)
    return _response_to_dict(response)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(verbose: bool) -> None:
    """platform-sdk: list platform resources with cursor pagination."""
    setup_logging("DEBUG" if verbose else None)


@main.command("list")
@click.argument("resource", type=click.Choice(RESOURCES))
@click.option("--folder-id", type=int, default=None, help="Folder to scope the listing to")
@click.option("--page-size", type=int, default=None, help="Items per page (max 1000)")
@click.option("--cursor", default=None, help="Cursor from a previous page")
@click.option("--jump-to-page", type=int, default=None, help="Page number (offset resources)")
@click.option("--filter", "filter_", default=None, help="OData $filter expression")
@click.option("--orderby", default=None, help="OData $orderby expression")
def list_cmd(
    resource: str,
    folder_id: int | None,
    page_size: int | None,
    cursor: str | None,
    jump_to_page: int | None,
    filter_: str | None,
    orderby: str | None,
) -> None:
    """List RESOURCE as JSON. Any paging option switches to paginated output."""
    options: dict[str, Any] = {
        "page_size": page_size,
        "cursor": cursor,
        "jump_to_page": jump_to_page,
        "filter": filter_,
        "orderby": orderby,
    }
    options = {key: value for key, value in options.items() if value is not None}

    try:
        result = asyncio.run(_run_list(resource, folder_id, options))
    except SDKError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    except httpx.HTTPStatusError as exc:
        click.echo(f"Error: HTTP {exc.response.status_code} for {exc.request.url}", err=True)
        sys.exit(1)
    except httpx.HTTPError as exc:
        click.echo(f"Error: {type(exc).__name__}: {exc}", err=True)
        sys.exit(1)

    click.echo(json.dumps(result, indent=2, default=str))


if __name__ == "__main__":
    main()
