"""Shared fixtures for platform_sdk tests (no network access needed)."""

from unittest.mock import AsyncMock

import pytest

from platform_sdk.core.config import SDKConfig


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
def sdk_config():
    return SDKConfig(
        base_url="https://cloud.example.com",
        org_name="acme",
        tenant_name="default",
        secret="test-token",
    )


@pytest.fixture
def executor():
    """Request executor double; set ``get`` / ``request_with_paging`` return values per test."""
    mock = AsyncMock()
    mock.get = AsyncMock(return_value={"value": []})
    mock.request_with_paging = AsyncMock(return_value={"value": []})
    return mock
