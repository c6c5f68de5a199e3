"""
Admin Query Handler

Admin-only views and mutations over the four query entities.

Routes:
=======
    GET   /admin/queries/contacts                   page of contact queries
    GET   /admin/queries/feedback                   page of feedback
    GET   /admin/queries/support-requests           page of support requests
    GET   /admin/queries/technical-issues           page of technical issues
    GET   /admin/queries/counts                     counts per entity
    PATCH /admin/queries/contacts/{id}              set status / response
    PATCH /admin/queries/feedback/{id}
    PATCH /admin/queries/support-requests/{id}
    PATCH /admin/queries/technical-issues/{id}

Listing parameters: ``page`` (>= 1), ``limit`` (clamped to 1..100, default
10), optional ``status``.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from zelene.api.dependencies import AdminUser, get_pagination
from zelene.api.dependencies.services import get_admin_query_service
from zelene.shared.models.enums import QueryStatus
from zelene.shared.schemas.common import PaginatedResponse, PaginationParams
from zelene.shared.schemas.queries import (
    ContactQueryResponse,
    FeedbackResponse,
    QueryCounts,
    QueryStatusUpdate,
    SupportRequestResponse,
    TechnicalIssueResponse,
)
from zelene.shared.services.admin_query_service import AdminQueryService


router = APIRouter()


# ═══════════════════════════════════════════════════════════════════════════════
# VIEWS
# ═══════════════════════════════════════════════════════════════════════════════


@router.get("/contacts", response_model=PaginatedResponse[ContactQueryResponse])
async def get_contacts(
    _admin: AdminUser,
    params: PaginationParams = Depends(get_pagination),
    service: AdminQueryService = Depends(get_admin_query_service),
):
    """Contact queries, newest first."""
    return await service.get_contacts(params)


@router.get("/feedback", response_model=PaginatedResponse[FeedbackResponse])
async def get_feedback(
    _admin: AdminUser,
    params: PaginationParams = Depends(get_pagination),
    service: AdminQueryService = Depends(get_admin_query_service),
):
    """Feedback, newest first."""
    return await service.get_feedback(params)


@router.get("/support-requests", response_model=PaginatedResponse[SupportRequestResponse])
async def get_support_requests(
    _admin: AdminUser,
    params: PaginationParams = Depends(get_pagination),
    service: AdminQueryService = Depends(get_admin_query_service),
):
    """Support requests, highest priority first."""
    return await service.get_support_requests(params)


@router.get("/technical-issues", response_model=PaginatedResponse[TechnicalIssueResponse])
async def get_technical_issues(
    _admin: AdminUser,
    params: PaginationParams = Depends(get_pagination),
    service: AdminQueryService = Depends(get_admin_query_service),
):
    """Technical issues, most severe first, with signed attachment URLs."""
    return await service.get_technical_issues(params)


@router.get("/counts", response_model=QueryCounts)
async def get_query_counts(
    _admin: AdminUser,
    status: Optional[QueryStatus] = Query(None),
    service: AdminQueryService = Depends(get_admin_query_service),
):
    """Number of records per entity, optionally in one status."""
    return await service.get_counts(status)


# ═══════════════════════════════════════════════════════════════════════════════
# MUTATIONS
# ═══════════════════════════════════════════════════════════════════════════════


@router.patch("/contacts/{query_id}", response_model=ContactQueryResponse)
async def update_contact_query(
    query_id: UUID,
    data: QueryStatusUpdate,
    _admin: AdminUser,
    service: AdminQueryService = Depends(get_admin_query_service),
):
    """Set status and response of a contact query."""
    return await service.update_contact_query(query_id, data)


@router.patch("/feedback/{query_id}", response_model=FeedbackResponse)
async def update_feedback(
    query_id: UUID,
    data: QueryStatusUpdate,
    _admin: AdminUser,
    service: AdminQueryService = Depends(get_admin_query_service),
):
    """Set status and response of a feedback entry."""
    return await service.update_feedback(query_id, data)


@router.patch("/support-requests/{query_id}", response_model=SupportRequestResponse)
async def update_support_request(
    query_id: UUID,
    data: QueryStatusUpdate,
    _admin: AdminUser,
    service: AdminQueryService = Depends(get_admin_query_service),
):
    """Set status and response of a support request."""
    return await service.update_support_request(query_id, data)


@router.patch("/technical-issues/{query_id}", response_model=TechnicalIssueResponse)
async def update_technical_issue(
    query_id: UUID,
    data: QueryStatusUpdate,
    _admin: AdminUser,
    service: AdminQueryService = Depends(get_admin_query_service),
):
    """Set status and response of a technical issue."""
    return await service.update_technical_issue(query_id, data)
