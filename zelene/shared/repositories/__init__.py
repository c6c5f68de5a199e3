"""
Repositories Package

Data access layer. Each repository wraps an AsyncSession and exposes typed
queries for one entity; services never build SQL themselves.

Usage:
======
    from zelene.shared.repositories import UserRepository, FeedbackRepository

    users = UserRepository(db)
    feedback = FeedbackRepository(db)
"""

from zelene.shared.repositories.base import BaseRepository
from zelene.shared.repositories.user_repository import UserRepository
from zelene.shared.repositories.query_repository import (
    QueryRepository,
    ContactQueryRepository,
    FeedbackRepository,
    SupportRequestRepository,
    TechnicalIssueRepository,
)
from zelene.shared.repositories.post_repository import PostRepository
from zelene.shared.repositories.tag_repository import TagRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "QueryRepository",
    "ContactQueryRepository",
    "FeedbackRepository",
    "SupportRequestRepository",
    "TechnicalIssueRepository",
    "PostRepository",
    "TagRepository",
]
