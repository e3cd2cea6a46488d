"""Opaque pagination cursors: versioned JSON, URL-safe base64 encoded.

Payload example::

    {"v":1,"type":"offset","pageNumber":2,"pageSize":10}
"""

from __future__ import annotations

import base64
import binascii
import json

from pydantic import ValidationError as PydanticValidationError

from platform_sdk.exceptions import InvalidCursorError
from platform_sdk.pagination.models import CursorData

CURSOR_VERSION = 1
MAX_CURSOR_LENGTH = 4096

_VERSION_KEY = "v"


class CursorCodec:
    """Encode and decode pagination cursors."""

    @staticmethod
    def encode(data: CursorData) -> str:
        """Serialize *data* (unset fields omitted) into an opaque string."""
        payload = {_VERSION_KEY: CURSOR_VERSION}
        payload.update(data.model_dump(mode="json", by_alias=True, exclude_none=True))
        raw = json.dumps(payload, separators=(",", ":"))
        return base64.urlsafe_b64encode(raw.encode()).decode()

    @staticmethod
    def decode(value: str) -> CursorData:
        """Decode a cursor string back to :class:`CursorData`.

        Raises ``InvalidCursorError`` for empty, oversized, garbled or
        structurally invalid cursors, and for unknown cursor versions.
        """
        if not isinstance(value, str) or not value:
            raise InvalidCursorError("cursor must be a non-empty string")
        if len(value) > MAX_CURSOR_LENGTH:
            raise InvalidCursorError("cursor is too long")

        try:
            raw = base64.b64decode(value.encode(), altchars=b"-_", validate=True).decode()
            payload = json.loads(raw)
        except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise InvalidCursorError(f"invalid cursor: {value!r}") from exc

        if not isinstance(payload, dict):
            raise InvalidCursorError(f"invalid cursor: {value!r}")
        version = payload.pop(_VERSION_KEY, CURSOR_VERSION)
        if version != CURSOR_VERSION:
            raise InvalidCursorError(f"unsupported cursor version: {version!r}")
        if "type" not in payload:
            raise InvalidCursorError("invalid cursor: missing pagination type")

        try:
            return CursorData.model_validate(payload)
        except PydanticValidationError as exc:
            raise InvalidCursorError(f"invalid cursor: {value!r}") from exc

