"""
Post Schemas

Request/response models for posts.

Tags and related posts are referenced by id on input. On output a post
carries its author summary and full tag objects; the detail view adds
related posts.
"""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import Field, field_validator

from zelene.shared.models.enums import PostOrder
from zelene.shared.schemas.common import BaseSchema, clamp_limit


class PostCreate(BaseSchema):
    """
    Schema for creating a post.

    ``is_official`` is only honoured for administrators.
    """

    title: str = Field(min_length=1, max_length=255)
    excerpt: str = Field(min_length=1)
    content: str = Field(min_length=1)
    tags: list[int] = Field(default_factory=list, description="Tag ids")
    related_posts: list[int] = Field(default_factory=list, description="Related post ids")
    is_official: bool = False


class PostUpdate(BaseSchema):
    """
    Partial post update.

    Scalar fields are only written when sent. ``tags`` and
    ``related_posts`` replace the existing links when sent.
    """

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    excerpt: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = Field(default=None, min_length=1)
    tags: Optional[list[int]] = None
    related_posts: Optional[list[int]] = None


class PostListParams(BaseSchema):
    """Cursor listing parameters. limit is clamped into [1, 100]."""

    limit: int = 10
    cursor: Optional[int] = None
    tags: Optional[list[int]] = None
    is_official: Optional[bool] = None
    order_by: PostOrder = PostOrder.LATEST

    @field_validator("limit")
    @classmethod
    def clamp_page_size(cls, value: int) -> int:
        return clamp_limit(value)


# ═══════════════════════════════════════════════════════════════════════════════
# RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class PostAuthor(BaseSchema):
    """Author summary embedded in posts."""

    id: UUID
    name: Optional[str] = None
    username: Optional[str] = None
    image: Optional[str] = None


class PostTag(BaseSchema):
    """Tag as embedded in a post."""

    id: int
    name: str
    is_official: bool


def _unwrap_tags(value: Any) -> Any:
    """Accept TagsOnPosts link rows as well as tags."""
    if isinstance(value, list):
        return [getattr(item, "tag", item) for item in value]
    return value


class PostResponse(BaseSchema):
    """Post as shown in listings and returned from mutations."""

    id: int
    title: str
    excerpt: str
    content: str
    published_at: datetime
    updated_at: datetime
    view_count: int
    like_count: int
    comment_count: int
    is_official: bool
    created_by: PostAuthor
    tags: list[PostTag] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def unwrap_tags(cls, value: Any) -> Any:
        return _unwrap_tags(value)


class RelatedPostResponse(BaseSchema):
    """Related post summary with its tags."""

    id: int
    title: str
    excerpt: str
    published_at: datetime
    tags: list[PostTag] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def unwrap_tags(cls, value: Any) -> Any:
        return _unwrap_tags(value)


class PostDetailResponse(PostResponse):
    """Single post view with related posts."""

    related_posts: list[RelatedPostResponse] = Field(default_factory=list)
