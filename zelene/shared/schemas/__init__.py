"""
Pydantic Schemas

Request and response models for the API.

Schema Categories:
==================
- validation: Field constraints with custom messages, tag normalization
- common: Base schema, pagination, error responses
- user: Registration, login and admin user management
- profile: Public profile and partial settings update
- queries: Contact, feedback, support and technical issue payloads
- post / tag: Blog posts and tags
- stats: Admin dashboard figures

Usage:
======
    from zelene.shared.schemas.user import RegisterRequest, UserResponse
    from zelene.shared.schemas.common import PaginatedResponse, ErrorResponse
"""

from zelene.shared.schemas.validation import (
    FieldError,
    ValidationResult,
    TagName,
    normalize_tag_name,
    normalize_search_query,
    validate,
)
from zelene.shared.schemas.common import (
    BaseSchema,
    PaginationParams,
    PaginatedResponse,
    CursorPage,
    SuccessResponse,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
)
from zelene.shared.schemas.user import (
    RegisterRequest,
    LoginRequest,
    UserResponse,
    RegisterResponse,
    AuthResponse,
    AdminCreate,
    UserCreate,
    UserUpdate,
    CreatedUserResponse,
)
from zelene.shared.schemas.profile import (
    ProfileSection,
    SocialSection,
    AccountSection,
    ProfileUpdateRequest,
    ProfileResponse,
)
from zelene.shared.schemas.queries import (
    ContactQueryCreate,
    FeedbackCreate,
    SupportRequestCreate,
    FileUpload,
    TechnicalIssueCreate,
    SubmissionResponse,
    ContactQueryResponse,
    FeedbackResponse,
    SupportRequestResponse,
    TechnicalIssueResponse,
    QueryStatusUpdate,
    QueryCounts,
    QueryLookupResponse,
)
from zelene.shared.schemas.post import (
    PostCreate,
    PostUpdate,
    PostListParams,
    PostResponse,
    PostDetailResponse,
)
from zelene.shared.schemas.tag import (
    TagCreate,
    TagUpdate,
    TagSearchParams,
    TagListParams,
    TagResponse,
)
from zelene.shared.schemas.stats import (
    DailyStatsParams,
    DayStats,
    WeekCounts,
    WeeklyStats,
)

__all__ = [
    # Validation
    "FieldError",
    "ValidationResult",
    "TagName",
    "normalize_tag_name",
    "normalize_search_query",
    "validate",
    # Common
    "BaseSchema",
    "PaginationParams",
    "PaginatedResponse",
    "CursorPage",
    "SuccessResponse",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    # User
    "RegisterRequest",
    "LoginRequest",
    "UserResponse",
    "RegisterResponse",
    "AuthResponse",
    "AdminCreate",
    "UserCreate",
    "UserUpdate",
    "CreatedUserResponse",
    # Profile
    "ProfileSection",
    "SocialSection",
    "AccountSection",
    "ProfileUpdateRequest",
    "ProfileResponse",
    # Queries
    "ContactQueryCreate",
    "FeedbackCreate",
    "SupportRequestCreate",
    "FileUpload",
    "TechnicalIssueCreate",
    "SubmissionResponse",
    "ContactQueryResponse",
    "FeedbackResponse",
    "SupportRequestResponse",
    "TechnicalIssueResponse",
    "QueryStatusUpdate",
    "QueryCounts",
    "QueryLookupResponse",
    # Posts
    "PostCreate",
    "PostUpdate",
    "PostListParams",
    "PostResponse",
    "PostDetailResponse",
    # Tags
    "TagCreate",
    "TagUpdate",
    "TagSearchParams",
    "TagListParams",
    "TagResponse",
    # Stats
    "DailyStatsParams",
    "DayStats",
    "WeekCounts",
    "WeeklyStats",
]
