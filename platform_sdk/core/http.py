"""Async HTTP executor for the platform REST API."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx
import structlog

from platform_sdk.core.config import SDKConfig

log = structlog.get_logger("platform_sdk.http")


def _clean_params(params: Mapping[str, Any] | None) -> dict[str, Any]:
    """Drop ``None`` values; httpx would otherwise send them as empty strings."""
    return {key: value for key, value in (params or {}).items() if value is not None}


class ApiClient:
    """Thin async wrapper around the platform REST API.

    Implements the request executor the pagination layer consumes. Errors
    are not retried or translated: a non-2xx status raises
    ``httpx.HTTPStatusError`` and transport failures raise the matching
    ``httpx`` exception.
    """

    def __init__(
        self,
        config: SDKConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        headers = {
            "Accept": "application/json",
            "Authorization": f"Bearer {config.secret}",
        }
        self._client = httpx.AsyncClient(
            base_url=config.api_base_url,
            headers=headers,
            timeout=config.timeout,
            transport=transport,
        )

    # ── lifecycle ──────────────────────────────────────────────────────────

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    # ── public ─────────────────────────────────────────────────────────────

    async def get(
        self,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Single GET, returns parsed JSON."""
        return await self.request("GET", path, params=params, headers=headers)

    async def request_with_paging(
        self,
        method: str,
        path: str,
        wire_params: Mapping[str, Any],
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Fetch one page.

        *wire_params* are the paging query parameters already mapped to the
        backend's spelling; they are merged over *params*. The body is
        returned as-is; reading items, totals and tokens out of it is the
        caller's job.
        """
        merged = {**(params or {}), **wire_params}
        return await self.request(method, path, params=merged, headers=headers)

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send one request and return the parsed JSON body (``{}`` when empty)."""
        query = _clean_params(params)
        log.debug("http.request", method=method, path=path, params=query)

        response = await self._client.request(
            method,
            path,
            params=query,
            headers=dict(headers or {}),
        )
        log.debug(
            "http.response",
            method=method,
            path=path,
            status=response.status_code,
        )
        response.raise_for_status()

        if not response.content:
            return {}
        return response.json()
