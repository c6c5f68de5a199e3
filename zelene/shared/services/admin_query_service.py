"""
Admin Query Service

Read and update side of the admin query-management dashboard.

Listings:
=========
All four listings are page based ({items, totalPages, currentPage}) with an
optional status filter. Ordering is owned by each repository:

    contacts, feedback     created_at DESC
    support requests       priority rank DESC, created_at DESC
    technical issues       severity rank DESC, created_at DESC

Technical issue attachments are stored as paths and resolved to
time-limited URLs here, so the dashboard can link them directly.

Updates:
========
``update_*`` sets status, and the response when one is sent. Unknown ids
raise a QueryNotFoundError naming the entity; reapplying current values
succeeds without writing.
"""

from typing import Any, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from zelene.shared.core.exceptions import QueryNotFoundError
from zelene.shared.core.logging import get_logger
from zelene.shared.models.enums import QueryStatus
from zelene.shared.repositories.query_repository import (
    ContactQueryRepository,
    FeedbackRepository,
    QueryRepository,
    SupportRequestRepository,
    TechnicalIssueRepository,
)
from zelene.shared.schemas.common import PaginatedResponse, PaginationParams
from zelene.shared.schemas.queries import (
    ContactQueryResponse,
    FeedbackResponse,
    QueryCounts,
    QueryStatusUpdate,
    SupportRequestResponse,
    TechnicalIssueResponse,
)
from zelene.shared.services.storage_service import StorageService


logger = get_logger("admin.queries")


class AdminQueryService:
    """
    Service behind the admin query views and mutations.

    Attributes:
        session: Database session
        storage: Resolves attachment paths to URLs
    """

    def __init__(self, session: AsyncSession, storage: Optional[StorageService] = None) -> None:
        self.session = session
        self.storage = storage or StorageService()
        self.contacts = ContactQueryRepository(session)
        self.feedback = FeedbackRepository(session)
        self.support_requests = SupportRequestRepository(session)
        self.technical_issues = TechnicalIssueRepository(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # LISTINGS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    async def _page(repo: QueryRepository, schema: Any, params: PaginationParams) -> PaginatedResponse:
        items, total = await repo.paginate(page=params.page, limit=params.limit, status=params.status)
        return PaginatedResponse[schema].create(
            [schema.model_validate(item) for item in items],
            total=total,
            page=params.page,
            limit=params.limit,
        )

    async def get_contacts(self, params: PaginationParams) -> PaginatedResponse[ContactQueryResponse]:
        """Contact queries, newest first."""
        return await self._page(self.contacts, ContactQueryResponse, params)

    async def get_feedback(self, params: PaginationParams) -> PaginatedResponse[FeedbackResponse]:
        """Feedback, newest first."""
        return await self._page(self.feedback, FeedbackResponse, params)

    async def get_support_requests(
        self,
        params: PaginationParams,
    ) -> PaginatedResponse[SupportRequestResponse]:
        """Support requests, highest priority first."""
        return await self._page(self.support_requests, SupportRequestResponse, params)

    async def get_technical_issues(
        self,
        params: PaginationParams,
    ) -> PaginatedResponse[TechnicalIssueResponse]:
        """
        Technical issues, most severe first, with attachment URLs.

        Raises:
            ExternalServiceError: If an attachment URL cannot be signed
        """
        items, total = await self.technical_issues.paginate(
            page=params.page,
            limit=params.limit,
            status=params.status,
        )

        resolved = [await self._with_attachment_urls(item) for item in items]

        return PaginatedResponse[TechnicalIssueResponse].create(
            resolved,
            total=total,
            page=params.page,
            limit=params.limit,
        )

    async def _with_attachment_urls(self, issue: Any) -> TechnicalIssueResponse:
        """Technical issue view with stored paths replaced by signed URLs."""
        urls = [await self.storage.get_url(path) for path in issue.attachments or []]
        view = TechnicalIssueResponse.model_validate(issue)
        return view.model_copy(update={"attachments": urls})

    async def get_counts(self, status: Optional[QueryStatus] = None) -> QueryCounts:
        """Number of records per entity, optionally in one status."""
        return QueryCounts(
            contacts=await self.contacts.count_by_status(status),
            feedback=await self.feedback.count_by_status(status),
            support_requests=await self.support_requests.count_by_status(status),
            technical_issues=await self.technical_issues.count_by_status(status),
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # MUTATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def _update(
        self,
        repo: QueryRepository,
        label: str,
        record_id: UUID,
        data: QueryStatusUpdate,
    ) -> Any:
        record = await repo.set_status(record_id, data.model_dump(exclude_unset=True))
        if record is None:
            raise QueryNotFoundError(label, str(record_id))

        logger.info(
            "Query status updated",
            entity=label,
            query_id=str(record_id),
            status=data.status.value,
        )
        return record

    async def update_contact_query(self, record_id: UUID, data: QueryStatusUpdate) -> ContactQueryResponse:
        record = await self._update(self.contacts, "Contact query", record_id, data)
        return ContactQueryResponse.model_validate(record)

    async def update_feedback(self, record_id: UUID, data: QueryStatusUpdate) -> FeedbackResponse:
        record = await self._update(self.feedback, "Feedback", record_id, data)
        return FeedbackResponse.model_validate(record)

    async def update_support_request(
        self,
        record_id: UUID,
        data: QueryStatusUpdate,
    ) -> SupportRequestResponse:
        record = await self._update(self.support_requests, "Support request", record_id, data)
        return SupportRequestResponse.model_validate(record)

    async def update_technical_issue(
        self,
        record_id: UUID,
        data: QueryStatusUpdate,
    ) -> TechnicalIssueResponse:
        record = await self._update(self.technical_issues, "Technical issue", record_id, data)
        return await self._with_attachment_urls(record)
