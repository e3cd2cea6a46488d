"""Client configuration, read from the environment (and an optional .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from platform_sdk.exceptions import ConfigurationError

_ENV_PREFIX = "PLATFORM_SDK_"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class SDKConfig:
    """Connection settings for one organization/tenant."""

    base_url: str
    org_name: str
    tenant_name: str
    secret: str
    timeout: float = DEFAULT_TIMEOUT

    @property
    def api_base_url(self) -> str:
        """``{base_url}/{org}/{tenant}/`` — all endpoint paths are relative to this."""
        return f"{self.base_url.rstrip('/')}/{self.org_name}/{self.tenant_name}/"

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> SDKConfig:
        """Build a config from ``PLATFORM_SDK_*`` variables.

        Reads from environment variables:
            PLATFORM_SDK_BASE_URL    — platform URL, e.g. https://cloud.example.com
            PLATFORM_SDK_ORG_NAME    — organization name
            PLATFORM_SDK_TENANT_NAME — tenant name
            PLATFORM_SDK_SECRET      — bearer token
            PLATFORM_SDK_TIMEOUT     — request timeout in seconds (default: 30)

        Raises :class:`ConfigurationError` if a required value is missing or
        the timeout is not a positive number.
        """
        load_dotenv(dotenv_path)

        values: dict[str, str] = {}
        missing = []
        for name in ("base_url", "org_name", "tenant_name", "secret"):
            value = os.environ.get(f"{_ENV_PREFIX}{name.upper()}", "").strip()
            if not value:
                missing.append(f"{_ENV_PREFIX}{name.upper()}")
            values[name] = value
        if missing:
            raise ConfigurationError(f"missing configuration: {', '.join(missing)}")

        raw_timeout = os.environ.get(f"{_ENV_PREFIX}TIMEOUT")
        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as exc:
                raise ConfigurationError(f"invalid {_ENV_PREFIX}TIMEOUT: {raw_timeout!r}") from exc
            if timeout <= 0:
                raise ConfigurationError(f"invalid {_ENV_PREFIX}TIMEOUT: {raw_timeout!r}")

        return cls(timeout=timeout, **values)
