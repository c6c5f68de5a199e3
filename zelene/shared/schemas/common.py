"""
Common Schemas

Shared schemas used across the application for consistent API responses.

Schema Types:
=============
- BaseSchema: camelCase aliases, ORM mode, population by field name
- Pagination: Page/limit parameters, page responses, cursor pages
- Generic Responses: SuccessResponse, ErrorResponse, HealthResponse

Wire Format:
============
JSON bodies use camelCase keys. Inputs accept camelCase or snake_case:

    {"totalPages": 3, "currentPage": 1}      ← response
    {"captchaToken": "..."} or {"captcha_token": "..."}  ← request

Usage:
======
    from zelene.shared.schemas.common import BaseSchema, PaginatedResponse

    class FeedbackResponse(BaseSchema):
        id: UUID
        created_at: datetime   # serialized as "createdAt"
"""

from datetime import datetime, timezone
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from zelene.config.settings import settings
from zelene.shared.models.enums import QueryStatus


# Generic type for paginated responses
DataT = TypeVar("DataT")


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    Provides:
    - alias_generator: snake_case fields exposed as camelCase
    - populate_by_name: Accept snake_case names on input as well
    - from_attributes: Build directly from ORM models
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# PAGE PAGINATION (admin listings)
# ═══════════════════════════════════════════════════════════════════════════════


class PaginationParams(BaseSchema):
    """
    Page-based pagination parameters.

    page must be 1 or greater. limit is clamped into [1, MAX_PAGE_SIZE]
    rather than rejected, so ``limit=500`` behaves like ``limit=100`` and
    ``limit=0`` like ``limit=1``.
    """

    page: int = Field(default=1, ge=1, description="Page number (1-indexed)")
    limit: int = Field(default=settings.DEFAULT_PAGE_SIZE, description="Items per page")
    status: Optional[QueryStatus] = Field(default=None, description="Only items in this status")

    @field_validator("limit")
    @classmethod
    def clamp_page_size(cls, value: int) -> int:
        """Clamp page size into the allowed range."""
        return clamp_limit(value)

    @property
    def offset(self) -> int:
        """Calculate offset for database query."""
        return (self.page - 1) * self.limit


def clamp_limit(value: int, maximum: Optional[int] = None) -> int:
    """Clamp a requested page size into [1, maximum]."""
    upper = maximum if maximum is not None else settings.MAX_PAGE_SIZE
    return max(1, min(value, upper))


def total_pages(total: int, limit: int) -> int:
    """Number of pages needed for total items, 0 when there are none."""
    return (total + limit - 1) // limit if limit > 0 else 0


class PaginatedResponse(BaseSchema, Generic[DataT]):
    """
    Generic page response.

    Example:
        {"items": [...], "totalPages": 1, "currentPage": 1}
    """

    items: list[DataT]
    total_pages: int
    current_page: int

    @classmethod
    def create(cls, items: list[Any], *, total: int, page: int, limit: int) -> "PaginatedResponse[DataT]":
        """Build a page response, computing total_pages from the count."""
        return cls(items=items, total_pages=total_pages(total, limit), current_page=page)


# ═══════════════════════════════════════════════════════════════════════════════
# CURSOR PAGINATION (posts, tags)
# ═══════════════════════════════════════════════════════════════════════════════


class CursorPage(BaseSchema, Generic[DataT]):
    """
    Generic cursor page.

    ``nextCursor`` is the id to pass as ``cursor`` for the following page,
    or null on the last page.
    """

    items: list[DataT]
    next_cursor: Optional[int] = None


# ═══════════════════════════════════════════════════════════════════════════════
# STANDARD RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class SuccessResponse(BaseSchema):
    """Confirmation for mutations that return no entity."""

    success: bool = True


class ErrorDetail(BaseModel):
    """Error detail structure in error responses."""

    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(
        default=None,
        description="Additional error context, e.g. per-field errors",
    )


class ErrorResponse(BaseModel):
    """
    Standard error response schema.

    Example:
        {
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Validation failed",
                "details": {"errors": [{"field": "username", "message": "..."}]}
            }
        }
    """

    error: ErrorDetail


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = "healthy"
    service: str = "zelene"
    version: str = settings.APP_VERSION
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
