"""Validate caller paging options and normalize them into internal parameters."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from platform_sdk.exceptions import PaginationTypeMismatchError, ValidationError
from platform_sdk.pagination.cursor import CursorCodec
from platform_sdk.pagination.models import (
    CursorData,
    InternalPaginationOptions,
    PaginationCursor,
    PaginationOptions,
    PaginationType,
)

PAGINATION_KEYS = ("cursor", "page_size", "jump_to_page")


def has_pagination_parameters(options: Mapping[str, Any] | None) -> bool:
    """True when any of ``cursor``, ``page_size`` or ``jump_to_page`` is set."""
    if not options:
        return False
    return any(options.get(key) is not None for key in PAGINATION_KEYS)


def _cursor_value(cursor: PaginationCursor | str) -> str:
    if isinstance(cursor, PaginationCursor):
        return cursor.value
    return cursor


class PaginationValidator:
    """Stateless validation of :class:`PaginationOptions`."""

    def validate(
        self,
        options: PaginationOptions,
        expected_type: PaginationType | None = None,
    ) -> InternalPaginationOptions:
        """Check *options* against *expected_type* and return request parameters.

        Raises :class:`ValidationError` for non-positive sizes or pages, for
        ``jump_to_page`` on a token-paginated resource, and for cursor plus
        ``jump_to_page``. Raises ``InvalidCursorError`` for an undecodable
        cursor and :class:`PaginationTypeMismatchError` when the cursor was
        issued for another pagination style.
        """
        if options.page_size is not None and options.page_size <= 0:
            raise ValidationError("page_size must be a positive number")
        if options.jump_to_page is not None and options.jump_to_page <= 0:
            raise ValidationError("jump_to_page must be a positive number")
        if options.cursor is not None and options.jump_to_page is not None:
            raise ValidationError("cursor and jump_to_page cannot be used together")

        if options.cursor is not None:
            cursor_data = CursorCodec.decode(_cursor_value(options.cursor))
            if expected_type is not None and cursor_data.type is not expected_type:
                raise PaginationTypeMismatchError(expected_type.value, cursor_data.type.value)

        if options.jump_to_page is not None and expected_type is PaginationType.TOKEN:
            raise ValidationError(
                "jump_to_page is not supported for token-based pagination; "
                "use cursor navigation instead"
            )

        return self.get_request_parameters(options, expected_type)

    def get_request_parameters(
        self,
        options: PaginationOptions,
        pagination_type: PaginationType | None = None,
    ) -> InternalPaginationOptions:
        """Translate caller options into page number / token / size."""
        if options.jump_to_page is not None:
            return InternalPaginationOptions(
                page_size=options.page_size,
                page_number=options.jump_to_page,
            )

        if options.cursor is None:
            # First page; only offset paging has a page number.
            return InternalPaginationOptions(
                page_size=options.page_size,
                page_number=1 if pagination_type is PaginationType.OFFSET else None,
            )

        cursor_data: CursorData = CursorCodec.decode(_cursor_value(options.cursor))
        return InternalPaginationOptions(
            page_size=cursor_data.page_size or options.page_size,
            page_number=cursor_data.page_number,
            continuation_token=cursor_data.continuation_token,
            type=cursor_data.type,
        )
