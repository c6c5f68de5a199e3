"""
Tag Schemas

Request/response models for tags. Names go through TagName, which
normalizes ("#Machine Learning" → "machine-learning") before validating.
"""

from typing import Annotated, Optional

from pydantic import Field, field_validator

from zelene.shared.schemas.common import BaseSchema, clamp_limit
from zelene.shared.schemas.validation import TagName, length, normalize_search_query, transform


class TagCreate(BaseSchema):
    """Schema for creating a tag. Official tags require an administrator."""

    name: TagName
    is_official: bool = False


class TagUpdate(BaseSchema):
    """Admin tag update. Absent fields are untouched."""

    name: Optional[TagName] = None
    is_official: Optional[bool] = None


SearchQuery = Annotated[
    str,
    transform(normalize_search_query),
    length(1, too_short="Search query is required"),
]


class TagSearchParams(BaseSchema):
    """Tag autocomplete input. A leading '#' is ignored."""

    query: SearchQuery


class TagListParams(BaseSchema):
    """Cursor listing parameters for tags."""

    query: Optional[str] = None
    is_official: Optional[bool] = None
    limit: int = 10
    cursor: Optional[int] = None

    @field_validator("query")
    @classmethod
    def normalize_query(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return normalize_search_query(value) or None

    @field_validator("limit")
    @classmethod
    def clamp_page_size(cls, value: int) -> int:
        return clamp_limit(value)


class TagResponse(BaseSchema):
    """Tag with the number of posts carrying it."""

    id: int
    name: str
    is_official: bool
    post_count: int = Field(default=0)
