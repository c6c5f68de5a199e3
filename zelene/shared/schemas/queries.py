"""
Query Schemas

Public submission payloads and admin views for the four query entities.

Submission Flow:
================
    POST /queries/contact    ContactQueryCreate    → SubmissionResponse
    POST /queries/feedback   FeedbackCreate        → SubmissionResponse
    POST /queries/support    SupportRequestCreate  → SubmissionResponse
    POST /queries/technical  TechnicalIssueCreate  → SubmissionResponse

Submissions never carry a status: every new record starts as NEW.
"""

from datetime import datetime
from typing import Annotated, Literal, Optional, Union
from uuid import UUID

from pydantic import Field

from zelene.shared.models.enums import (
    FeedbackCategory,
    InquiryType,
    IssueSeverity,
    IssueType,
    QueryStatus,
    SupportCategory,
    SupportPriority,
)
from zelene.shared.schemas.common import BaseSchema
from zelene.shared.schemas.validation import email, length


Score = Annotated[float, Field(ge=0, le=5)]


# ═══════════════════════════════════════════════════════════════════════════════
# SUBMISSIONS
# ═══════════════════════════════════════════════════════════════════════════════


class ContactQueryCreate(BaseSchema):
    """Public contact form."""

    name: Annotated[str, length(1, too_short="Name is required")]
    organization: Annotated[str, length(1, too_short="Organization is required")]
    email: Annotated[str, email("Invalid email address")]
    phone: Annotated[str, length(1, too_short="Phone number is required")]
    inquiry_type: InquiryType
    message: Annotated[str, length(10, too_short="Message must be at least 10 characters")]


class FeedbackCreate(BaseSchema):
    """Product feedback form."""

    category: FeedbackCategory
    satisfaction: Score
    usability: Score
    features: list[str] = Field(default_factory=list)
    improvements: Annotated[str, length(10, too_short="Improvement details required")]
    recommendation: bool
    comments: Optional[str] = None


class SupportRequestCreate(BaseSchema):
    """Support request form."""

    category: SupportCategory
    subject: Annotated[str, length(1, too_short="Subject is required")]
    description: Annotated[str, length(10, too_short="Description must be at least 10 characters")]
    priority: SupportPriority


class FileUpload(BaseSchema):
    """A file attached to a technical issue, sent inline as base64."""

    filename: str = Field(min_length=1)
    content_type: str = Field(min_length=1)
    size: int = Field(ge=0)
    base64_data: str


class TechnicalIssueCreate(BaseSchema):
    """Final submission of the issue report wizard."""

    device_id: Optional[str] = None
    issue_type: IssueType
    severity: IssueSeverity
    title: Annotated[str, length(1, too_short="Title is required")]
    description: Annotated[str, length(10, too_short="Description must be at least 10 characters")]
    steps_to_reproduce: Annotated[str, length(10, too_short="Steps must be at least 10 characters")]
    expected_behavior: Annotated[str, length(10, too_short="Expected behavior must be at least 10 characters")]
    attachments: list[FileUpload] = Field(default_factory=list)


class SubmissionResponse(BaseSchema):
    """Acknowledgement returned to the submitter, with the id to look up later."""

    success: bool = True
    id: UUID


# ═══════════════════════════════════════════════════════════════════════════════
# ADMIN VIEWS
# ═══════════════════════════════════════════════════════════════════════════════


class QueryResponseBase(BaseSchema):
    """Fields every query entity exposes."""

    id: UUID
    status: QueryStatus
    response: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class ContactQueryResponse(QueryResponseBase):
    name: str
    organization: str
    email: str
    phone: str
    inquiry_type: InquiryType
    message: str


class FeedbackResponse(QueryResponseBase):
    category: FeedbackCategory
    satisfaction: float
    usability: float
    features: list[str]
    improvements: str
    recommendation: bool
    comments: Optional[str] = None


class SupportRequestResponse(QueryResponseBase):
    category: SupportCategory
    subject: str
    description: str
    priority: SupportPriority


class TechnicalIssueResponse(QueryResponseBase):
    """
    Technical issue as shown to admins.

    ``attachments`` holds resolved, time-limited URLs in admin listings and
    raw storage paths elsewhere.
    """

    device_id: Optional[str] = None
    issue_type: IssueType
    severity: IssueSeverity
    title: str
    description: str
    steps_to_reproduce: str
    expected_behavior: str
    attachments: list[str]


class QueryStatusUpdate(BaseSchema):
    """Admin status change with an optional reply. An omitted reply keeps the stored one."""

    status: QueryStatus
    response: Optional[str] = None


class QueryCounts(BaseSchema):
    """Dashboard badge counts per query entity."""

    contacts: int
    feedback: int
    support_requests: int
    technical_issues: int


# ═══════════════════════════════════════════════════════════════════════════════
# LOOKUP
# ═══════════════════════════════════════════════════════════════════════════════


QueryKind = Literal["contact", "feedback", "support", "technical"]


class QueryLookupResponse(BaseSchema):
    """A query found by id, tagged with the table it came from."""

    type: QueryKind
    data: Union[
        ContactQueryResponse,
        FeedbackResponse,
        SupportRequestResponse,
        TechnicalIssueResponse,
    ]
