"""
Query Handler

Public submission endpoints for the contact, feedback, support and
technical issue forms, plus lookup by id.

    POST /queries/contact       → {success, id}
    POST /queries/feedback      → {success, id}
    POST /queries/support       → {success, id}
    POST /queries/technical     → {success, id}
    GET  /queries/lookup/{id}   → {type, data}
"""

from fastapi import APIRouter, Depends, status

from zelene.api.dependencies.services import get_query_service
from zelene.shared.schemas.queries import (
    ContactQueryCreate,
    FeedbackCreate,
    QueryLookupResponse,
    SubmissionResponse,
    SupportRequestCreate,
    TechnicalIssueCreate,
)
from zelene.shared.services.query_service import QueryService


router = APIRouter()


@router.post("/contact", response_model=SubmissionResponse, status_code=status.HTTP_201_CREATED)
async def submit_contact(
    data: ContactQueryCreate,
    query_service: QueryService = Depends(get_query_service),
):
    """Submit the public contact form."""
    record = await query_service.submit_contact(data)
    return SubmissionResponse(id=record.id)


@router.post("/feedback", response_model=SubmissionResponse, status_code=status.HTTP_201_CREATED)
async def submit_feedback(
    data: FeedbackCreate,
    query_service: QueryService = Depends(get_query_service),
):
    """Submit product feedback."""
    record = await query_service.submit_feedback(data)
    return SubmissionResponse(id=record.id)


@router.post("/support", response_model=SubmissionResponse, status_code=status.HTTP_201_CREATED)
async def submit_support_request(
    data: SupportRequestCreate,
    query_service: QueryService = Depends(get_query_service),
):
    """Submit a support request."""
    record = await query_service.submit_support_request(data)
    return SubmissionResponse(id=record.id)


@router.post("/technical", response_model=SubmissionResponse, status_code=status.HTTP_201_CREATED)
async def submit_technical_issue(
    data: TechnicalIssueCreate,
    query_service: QueryService = Depends(get_query_service),
):
    """
    Submit a technical issue report with optional attachments.

    Raises:
        400: Invalid input or attachment encoding
        503: Attachment storage unavailable
    """
    record = await query_service.submit_technical_issue(data)
    return SubmissionResponse(id=record.id)


@router.get("/lookup/{query_id}", response_model=QueryLookupResponse)
async def lookup_query(
    query_id: str,
    query_service: QueryService = Depends(get_query_service),
):
    """
    Find a submitted query by its id.

    Raises:
        404: No query has this id
    """
    return await query_service.lookup(query_id)
