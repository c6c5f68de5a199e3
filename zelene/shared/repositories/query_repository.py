"""
Query Repositories

Data access for the four public query entities. They share one shape
(QueryMixin: id, status, response, timestamps) and one set of admin
operations, so a single generic repository serves all of them and each
subclass only declares its listing order.

Listing Orders:
===============
    ContactQuery    created_at DESC
    Feedback        created_at DESC
    SupportRequest  priority rank DESC (HIGH > MEDIUM > LOW), created_at DESC
    TechnicalIssue  severity rank DESC (CRITICAL > HIGH > MEDIUM > LOW), created_at DESC

Ranks are computed with CASE expressions so ordering does not depend on how
the database sorts enum labels.

Usage Example:
==============
    repo = FeedbackRepository(db)
    items, total = await repo.paginate(page=1, limit=10, status=QueryStatus.NEW)
"""

from typing import Any, Optional, TypeVar

from sqlalchemy import case, select
from sqlalchemy.ext.asyncio import AsyncSession

from zelene.shared.repositories.base import BaseRepository
from zelene.shared.models.contact_query import ContactQuery
from zelene.shared.models.enums import IssueSeverity, QueryStatus, SupportPriority
from zelene.shared.models.feedback import Feedback
from zelene.shared.models.support_request import SupportRequest
from zelene.shared.models.technical_issue import TechnicalIssue


QueryModelType = TypeVar("QueryModelType", ContactQuery, Feedback, SupportRequest, TechnicalIssue)


class QueryRepository(BaseRepository[QueryModelType]):
    """
    Shared repository for query entities.

    Subclasses override ordering() to define their admin listing order.
    """

    def ordering(self) -> list[Any]:
        """ORDER BY clauses for admin listings. Newest first by default."""
        return [self.model.created_at.desc(), self.model.id.desc()]

    def _status_filter(self, status: Optional[QueryStatus]) -> list[Any]:
        return [self.model.status == status] if status is not None else []

    # ═══════════════════════════════════════════════════════════════════════════
    # ADMIN VIEW
    # ═══════════════════════════════════════════════════════════════════════════

    async def paginate(
        self,
        *,
        page: int,
        limit: int,
        status: Optional[QueryStatus] = None,
    ) -> tuple[list[QueryModelType], int]:
        """
        Fetch one page of records and the total matching count.

        Args:
            page: 1-indexed page number
            limit: Page size (already clamped by the caller)
            status: Optional status filter

        Returns:
            Tuple of (items on this page, total matching records)

        SQL Generated:
            SELECT * FROM feedback WHERE status = 'NEW'
            ORDER BY created_at DESC OFFSET 0 LIMIT 10;
            SELECT COUNT(*) FROM feedback WHERE status = 'NEW'
        """
        conditions = self._status_filter(status)

        query = (
            select(self.model)
            .where(*conditions)
            .order_by(*self.ordering())
            .offset((page - 1) * limit)
            .limit(limit)
        )
        result = await self.session.execute(query)
        items = list(result.scalars().all())

        total = await self.count_where(*conditions)
        return items, total

    async def count_by_status(self, status: Optional[QueryStatus] = None) -> int:
        """Count records, optionally only those in one status."""
        return await self.count_where(*self._status_filter(status))

    # ═══════════════════════════════════════════════════════════════════════════
    # ADMIN MUTATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def set_status(
        self,
        record_id: Any,
        changes: dict[str, Any],
    ) -> Optional[QueryModelType]:
        """
        Apply a status change and, when given, a response to a record.

        Only the keys present in ``changes`` are written, so a status-only
        change keeps the stored response. Reapplying the values a record
        already holds leaves it unchanged: no UPDATE is issued, so
        updated_at keeps its value.

        Returns:
            The updated record, or None if the id is unknown
        """
        instance = await self.get(record_id)
        if instance is None:
            return None

        for field, value in changes.items():
            if getattr(instance, field) != value:
                setattr(instance, field, value)

        await self._flush()
        await self.session.refresh(instance)
        return instance


class ContactQueryRepository(QueryRepository[ContactQuery]):
    """Repository for contact form submissions."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(ContactQuery, session)


class FeedbackRepository(QueryRepository[Feedback]):
    """Repository for feedback entries."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Feedback, session)


class SupportRequestRepository(QueryRepository[SupportRequest]):
    """Repository for support requests, ordered by priority."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(SupportRequest, session)

    def ordering(self) -> list[Any]:
        priority_rank = case(
            (SupportRequest.priority == SupportPriority.HIGH, 3),
            (SupportRequest.priority == SupportPriority.MEDIUM, 2),
            else_=1,
        )
        return [priority_rank.desc(), SupportRequest.created_at.desc(), SupportRequest.id.desc()]


class TechnicalIssueRepository(QueryRepository[TechnicalIssue]):
    """Repository for technical issues, ordered by severity."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(TechnicalIssue, session)

    def ordering(self) -> list[Any]:
        severity_rank = case(
            (TechnicalIssue.severity == IssueSeverity.CRITICAL, 4),
            (TechnicalIssue.severity == IssueSeverity.HIGH, 3),
            (TechnicalIssue.severity == IssueSeverity.MEDIUM, 2),
            else_=1,
        )
        return [severity_rank.desc(), TechnicalIssue.created_at.desc(), TechnicalIssue.id.desc()]

