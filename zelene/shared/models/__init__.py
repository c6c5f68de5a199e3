"""
Zelene SQLAlchemy Models

Model Hierarchy:
================
    User
       ├── profile (Profile)
       ├── social (Social)
       └── posts (Post[])
              ├── tags (TagsOnPosts[]) ──► Tag
              └── related_to (RelatedPosts[]) ──► Post

    Query entities (QueryMixin: id, status, response)
       ├── ContactQuery
       ├── Feedback
       ├── SupportRequest
       └── TechnicalIssue

Usage:
======
    from zelene.shared.models import User, Post, Tag, Feedback

    feedback = await repo.get(feedback_id)
    feedback.status  # QueryStatus.NEW
"""

from zelene.shared.models.base import Base, TimestampMixin, QueryMixin
from zelene.shared.models.enums import (
    UserRole,
    QueryStatus,
    InquiryType,
    FeedbackCategory,
    SupportCategory,
    SupportPriority,
    IssueType,
    IssueSeverity,
    PostOrder,
)
from zelene.shared.models.user import User
from zelene.shared.models.profile import Profile, Social
from zelene.shared.models.contact_query import ContactQuery
from zelene.shared.models.feedback import Feedback
from zelene.shared.models.support_request import SupportRequest
from zelene.shared.models.technical_issue import TechnicalIssue
from zelene.shared.models.post_links import TagsOnPosts, RelatedPosts
from zelene.shared.models.tag import Tag
from zelene.shared.models.post import Post

__all__ = [
    # Base classes and mixins
    "Base",
    "TimestampMixin",
    "QueryMixin",
    # Enums
    "UserRole",
    "QueryStatus",
    "InquiryType",
    "FeedbackCategory",
    "SupportCategory",
    "SupportPriority",
    "IssueType",
    "IssueSeverity",
    "PostOrder",
    # Accounts
    "User",
    "Profile",
    "Social",
    # Query entities
    "ContactQuery",
    "Feedback",
    "SupportRequest",
    "TechnicalIssue",
    # Posts
    "Post",
    "Tag",
    "TagsOnPosts",
    "RelatedPosts",
]
