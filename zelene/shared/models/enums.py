"""
Enums used across the application.
"""

from enum import Enum


class UserRole(str, Enum):
    """Account role, ordered from least to most privileged."""

    MEMBER = "MEMBER"
    ADMIN = "ADMIN"
    TENANT_ADMIN = "TENANT_ADMIN"


class QueryStatus(str, Enum):
    """
    Triage state shared by all four query entities.

    Every submission starts as NEW. Only admin updates move it.
    """

    NEW = "NEW"
    IN_PROGRESS = "IN_PROGRESS"
    RESOLVED = "RESOLVED"
    CANCELLED = "CANCELLED"


class InquiryType(str, Enum):
    """Reason given on the public contact form."""

    PARTNERSHIP = "PARTNERSHIP"
    SALES = "SALES"
    MEDIA = "MEDIA"
    GENERAL = "GENERAL"


class FeedbackCategory(str, Enum):
    """Area of the product a feedback entry is about."""

    UI = "UI"
    FEATURES = "FEATURES"
    PERFORMANCE = "PERFORMANCE"
    DOCUMENTATION = "DOCUMENTATION"
    GENERAL = "GENERAL"


class SupportCategory(str, Enum):
    """Topic of a support request."""

    ACCOUNT = "ACCOUNT"
    DEVICES = "DEVICES"
    PLATFORM = "PLATFORM"
    OTHER = "OTHER"


class SupportPriority(str, Enum):
    """Submitter-chosen urgency of a support request."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class IssueType(str, Enum):
    """Subsystem a technical issue was observed in."""

    DEVICE = "DEVICE"
    PLATFORM = "PLATFORM"
    CONNECTIVITY = "CONNECTIVITY"
    SECURITY = "SECURITY"
    OTHER = "OTHER"


class IssueSeverity(str, Enum):
    """Impact of a technical issue."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class PostOrder(str, Enum):
    """
    Listing orders for posts.

    - latest: newest publish time first
    - popular: most likes, then most views
    - official: official posts first, then newest
    """

    LATEST = "latest"
    POPULAR = "popular"
    OFFICIAL = "official"
