"""
Query Service

Public submission and lookup of the four query entities.

Every submission is stored with status NEW and no response. Technical
issue attachments arrive base64-encoded; each one is uploaded through the
storage service and only the resulting paths are persisted, in the order
they were sent.

Usage:
======
    service = QueryService(db, storage)
    record = await service.submit_contact(payload)
    found = await service.lookup("5f0c...")   # QueryLookupResponse
"""

import base64
import binascii
from typing import Any, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from zelene.shared.core.exceptions import NotFoundError, ValidationError
from zelene.shared.core.logging import get_logger
from zelene.shared.models.contact_query import ContactQuery
from zelene.shared.models.enums import QueryStatus
from zelene.shared.models.feedback import Feedback
from zelene.shared.models.support_request import SupportRequest
from zelene.shared.models.technical_issue import TechnicalIssue
from zelene.shared.repositories.query_repository import (
    ContactQueryRepository,
    FeedbackRepository,
    SupportRequestRepository,
    TechnicalIssueRepository,
)
from zelene.shared.schemas.queries import (
    ContactQueryCreate,
    ContactQueryResponse,
    FeedbackCreate,
    FeedbackResponse,
    FileUpload,
    QueryLookupResponse,
    SupportRequestCreate,
    SupportRequestResponse,
    TechnicalIssueCreate,
    TechnicalIssueResponse,
)
from zelene.shared.services.storage_service import StorageService


logger = get_logger("queries")


def decode_attachment(upload: FileUpload) -> bytes:
    """
    Decode an inline attachment.

    Accepts plain base64 as well as data URLs ("data:image/png;base64,....").

    Raises:
        ValidationError: If the payload is not valid base64
    """
    encoded = upload.base64_data
    if encoded.startswith("data:") and "," in encoded:
        encoded = encoded.split(",", 1)[1]
    try:
        return base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError):
        raise ValidationError(
            "Invalid attachment",
            details={"errors": [{"field": "attachments", "message": f"{upload.filename} is not valid base64"}]},
        ) from None


class QueryService:
    """
    Service for public query submissions.

    Attributes:
        session: Database session
        storage: Attachment storage
    """

    def __init__(self, session: AsyncSession, storage: Optional[StorageService] = None) -> None:
        self.session = session
        self.storage = storage or StorageService()
        self.contacts = ContactQueryRepository(session)
        self.feedback = FeedbackRepository(session)
        self.support_requests = SupportRequestRepository(session)
        self.technical_issues = TechnicalIssueRepository(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # SUBMISSIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def submit_contact(self, data: ContactQueryCreate) -> ContactQuery:
        """Store a contact form submission."""
        record = await self.contacts.create(**data.model_dump(), status=QueryStatus.NEW)
        logger.info("Contact query submitted", query_id=str(record.id), inquiry_type=record.inquiry_type)
        return record

    async def submit_feedback(self, data: FeedbackCreate) -> Feedback:
        """Store product feedback."""
        record = await self.feedback.create(**data.model_dump(), status=QueryStatus.NEW)
        logger.info("Feedback submitted", query_id=str(record.id), category=record.category)
        return record

    async def submit_support_request(self, data: SupportRequestCreate) -> SupportRequest:
        """Store a support request."""
        record = await self.support_requests.create(**data.model_dump(), status=QueryStatus.NEW)
        logger.info("Support request submitted", query_id=str(record.id), priority=record.priority)
        return record

    async def submit_technical_issue(self, data: TechnicalIssueCreate) -> TechnicalIssue:
        """
        Store a technical issue report.

        Attachments are decoded and uploaded one after another before the
        record is written. An upload failure aborts the submission.

        Raises:
            ValidationError: If an attachment is not valid base64
            ExternalServiceError: If storage rejects an upload
        """
        payloads = [(upload, decode_attachment(upload)) for upload in data.attachments]

        paths = []
        for upload, content in payloads:
            paths.append(await self.storage.upload(content, upload.filename, upload.content_type))

        fields = data.model_dump(exclude={"attachments"})
        record = await self.technical_issues.create(**fields, attachments=paths, status=QueryStatus.NEW)
        logger.info(
            "Technical issue submitted",
            query_id=str(record.id),
            severity=record.severity,
            attachments=len(paths),
        )
        return record

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP
    # ═══════════════════════════════════════════════════════════════════════════

    async def lookup(self, query_id: str) -> QueryLookupResponse:
        """
        Find a query by id in any of the four tables.

        Tables are searched in order: contact, feedback, support, technical.

        Raises:
            NotFoundError: If no table holds the id
        """
        try:
            record_id = UUID(query_id)
        except ValueError:
            raise NotFoundError("Query", query_id) from None

        sources: list[tuple[str, Any, Any]] = [
            ("contact", self.contacts, ContactQueryResponse),
            ("feedback", self.feedback, FeedbackResponse),
            ("support", self.support_requests, SupportRequestResponse),
            ("technical", self.technical_issues, TechnicalIssueResponse),
        ]
        for kind, repo, schema in sources:
            record = await repo.get(record_id)
            if record is not None:
                return QueryLookupResponse(type=kind, data=schema.model_validate(record))

        raise NotFoundError("Query", query_id)
