"""Build uniform paginated responses from one fetched page."""

from __future__ import annotations

import math
from typing import TypeVar

from platform_sdk.pagination.constants import PAGE_SIZE_DEFAULT
from platform_sdk.pagination.cursor import CursorCodec
from platform_sdk.pagination.models import (
    CursorData,
    PageInfo,
    PaginatedResponse,
    PaginationCursor,
    PaginationDetectionInfo,
    PaginationType,
)

T = TypeVar("T")


class PageAssembler:
    """Compute has-more, navigation cursors and the response envelope.

    All methods are pure: identical inputs give identical outputs.
    """

    @staticmethod
    def has_more_pages(pagination_type: PaginationType, info: PaginationDetectionInfo) -> bool:
        """Decide whether another page follows the current one.

        OFFSET with a known total is exact. Without a total, a page that
        is exactly full is assumed to have a successor, so a final page that
        fills ``page_size`` is reported as having more. TOKEN: more pages
        exist iff the backend returned a continuation token.
        """
        if pagination_type is PaginationType.OFFSET:
            page_size = info.page_size or PAGE_SIZE_DEFAULT
            if info.total_count is not None:
                return info.current_page * page_size < info.total_count
            return info.items_count == page_size

        return bool(info.continuation_token)

    @staticmethod
    def create_cursor(
        page_info: PageInfo, pagination_type: PaginationType
    ) -> PaginationCursor | None:
        """Return the cursor for the next page, or ``None`` when there is none.

        A token cursor is never produced without a continuation token, even
        if *page_info* claims more pages exist.
        """
        if not page_info.has_more:
            return None

        if pagination_type is PaginationType.OFFSET:
            data = CursorData(
                type=pagination_type,
                page_number=page_info.current_page + 1 if page_info.current_page else None,
                page_size=page_info.page_size,
            )
        else:
            if not page_info.continuation_token:
                return None
            data = CursorData(
                type=pagination_type,
                continuation_token=page_info.continuation_token,
                page_size=page_info.page_size,
            )
        return PaginationCursor(CursorCodec.encode(data))

    @staticmethod
    def create_paginated_response(
        page_info: PageInfo,
        pagination_type: PaginationType,
        items: list[T],
    ) -> PaginatedResponse[T]:
        next_cursor = PageAssembler.create_cursor(page_info, pagination_type)

        previous_cursor = None
        if (
            pagination_type is PaginationType.OFFSET
            and page_info.current_page is not None
            and page_info.current_page > 1
        ):
            previous_cursor = PaginationCursor(
                CursorCodec.encode(
                    CursorData(
                        type=pagination_type,
                        page_number=page_info.current_page - 1,
                        page_size=page_info.page_size,
                    )
                )
            )

        total_pages = None
        if page_info.total_count is not None and page_info.page_size:
            total_pages = math.ceil(page_info.total_count / page_info.page_size)

        return PaginatedResponse(
            items=list(items),
            total_count=page_info.total_count,
            has_next_page=page_info.has_more,
            next_cursor=next_cursor,
            previous_cursor=previous_cursor,
            current_page=page_info.current_page,
            total_pages=total_pages,
            supports_page_jump=pagination_type is PaginationType.OFFSET,
        )
