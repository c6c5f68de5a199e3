"""
Pagination dependencies.

Query parameters are read here and validated through the schema models,
so an out-of-range ``page`` is a 400 VALIDATION_ERROR while ``limit`` is
clamped.
"""

from typing import Optional

from fastapi import Query

from zelene.config.settings import settings
from zelene.shared.models.enums import PostOrder, QueryStatus
from zelene.shared.schemas.common import PaginationParams
from zelene.shared.schemas.post import PostListParams
from zelene.shared.schemas.tag import TagListParams


async def get_pagination(
    page: int = Query(1, description="Page number (1-indexed)"),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, description="Items per page, clamped to 1..100"),
    status: Optional[QueryStatus] = Query(None, description="Only items in this status"),
) -> PaginationParams:
    """Page-based pagination parameters dependency."""
    return PaginationParams(page=page, limit=limit, status=status)


async def get_post_list_params(
    limit: int = Query(settings.DEFAULT_PAGE_SIZE),
    cursor: Optional[int] = Query(None, description="Id of the last post already seen"),
    tags: Optional[list[int]] = Query(None, description="Only posts with any of these tag ids"),
    is_official: Optional[bool] = Query(None, alias="isOfficial"),
    order_by: PostOrder = Query(PostOrder.LATEST, alias="orderBy"),
) -> PostListParams:
    """Cursor parameters for post listings."""
    return PostListParams(
        limit=limit,
        cursor=cursor,
        tags=tags,
        is_official=is_official,
        order_by=order_by,
    )


async def get_tag_list_params(
    limit: int = Query(settings.DEFAULT_PAGE_SIZE),
    cursor: Optional[int] = Query(None, description="Id of the last tag already seen"),
    query: Optional[str] = Query(None, description="Substring of the tag name"),
    is_official: Optional[bool] = Query(None, alias="isOfficial"),
) -> TagListParams:
    """Cursor parameters for tag listings."""
    return TagListParams(limit=limit, cursor=cursor, query=query, is_official=is_official)
