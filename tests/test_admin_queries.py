"""Tests for admin query listings, counts and status updates."""

import uuid

import pytest

from tests.conftest import auth_header
from zelene.shared.models import (
    Feedback,
    FeedbackCategory,
    IssueSeverity,
    IssueType,
    QueryStatus,
    SupportCategory,
    SupportPriority,
    SupportRequest,
    TechnicalIssue,
)
from zelene.shared.repositories.query_repository import FeedbackRepository


async def add_feedback(session, status: QueryStatus, count: int = 1) -> list[Feedback]:
    repo = FeedbackRepository(session)
    created = []
    for i in range(count):
        created.append(
            await repo.create(
                category=FeedbackCategory.UI,
                satisfaction=4,
                usability=3.5,
                features=["search"],
                improvements=f"Improvement number {i}",
                recommendation=True,
                status=status,
            )
        )
    await session.commit()
    return created


async def add_technical_issue(session, severity: IssueSeverity, **fields) -> TechnicalIssue:
    issue = TechnicalIssue(
        issue_type=IssueType.DEVICE,
        severity=severity,
        title=f"{severity.value} issue",
        description="Flickers on battery power.",
        steps_to_reproduce="Unplug the charger and wait.",
        expected_behavior="No flicker at all.",
        **fields,
    )
    session.add(issue)
    await session.commit()
    return issue


async def test_feedback_filtered_by_status(client, db, admin):
    await add_feedback(db, QueryStatus.NEW, 3)
    await add_feedback(db, QueryStatus.RESOLVED, 2)

    response = await client.get("/admin/queries/feedback?page=1&status=NEW", headers=auth_header(admin))

    assert response.status_code == 200
    body = response.json()
    assert len(body["items"]) == 3
    assert body["currentPage"] == 1
    assert body["totalPages"] == 1
    assert {item["status"] for item in body["items"]} == {"NEW"}


async def test_feedback_pages(client, db, admin):
    await add_feedback(db, QueryStatus.NEW, 5)

    response = await client.get("/admin/queries/feedback?page=2&limit=2", headers=auth_header(admin))

    body = response.json()
    assert len(body["items"]) == 2
    assert body["currentPage"] == 2
    assert body["totalPages"] == 3


async def test_limit_is_clamped(client, db, admin):
    await add_feedback(db, QueryStatus.NEW, 3)

    response = await client.get("/admin/queries/feedback?limit=500", headers=auth_header(admin))

    assert response.status_code == 200
    assert response.json()["totalPages"] == 1


async def test_page_below_one_is_rejected(client, admin):
    response = await client.get("/admin/queries/feedback?page=0", headers=auth_header(admin))

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_empty_listing(client, admin):
    response = await client.get("/admin/queries/contacts", headers=auth_header(admin))

    assert response.json() == {"items": [], "totalPages": 0, "currentPage": 1}


async def test_update_sets_status_and_response(client, db, admin):
    [feedback] = await add_feedback(db, QueryStatus.NEW)

    response = await client.patch(
        f"/admin/queries/feedback/{feedback.id}",
        json={"status": "RESOLVED", "response": "Shipped in 2.1"},
        headers=auth_header(admin),
    )

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "RESOLVED"
    assert body["response"] == "Shipped in 2.1"


async def test_repeated_update_is_idempotent(client, db, admin):
    [feedback] = await add_feedback(db, QueryStatus.NEW)
    update = {"status": "IN_PROGRESS"}

    first = await client.patch(f"/admin/queries/feedback/{feedback.id}", json=update, headers=auth_header(admin))
    second = await client.patch(f"/admin/queries/feedback/{feedback.id}", json=update, headers=auth_header(admin))

    assert first.json()["status"] == second.json()["status"] == "IN_PROGRESS"
    assert first.json()["updatedAt"] == second.json()["updatedAt"]


async def test_update_unknown_id(client, admin):
    response = await client.patch(
        f"/admin/queries/contacts/{uuid.uuid4()}",
        json={"status": "RESOLVED"},
        headers=auth_header(admin),
    )

    assert response.status_code == 404
    assert response.json()["error"]["message"].startswith("Contact query")


async def test_counts(client, db, tenant_admin):
    await add_feedback(db, QueryStatus.NEW, 2)
    await add_feedback(db, QueryStatus.RESOLVED, 1)

    all_counts = await client.get("/admin/queries/counts", headers=auth_header(tenant_admin))
    new_counts = await client.get("/admin/queries/counts?status=NEW", headers=auth_header(tenant_admin))

    assert all_counts.json() == {"contacts": 0, "feedback": 3, "supportRequests": 0, "technicalIssues": 0}
    assert new_counts.json()["feedback"] == 2


async def test_technical_issue_attachments_are_signed(client, db, admin):
    await add_technical_issue(db, IssueSeverity.LOW, attachments=["images/abc.png"])

    response = await client.get("/admin/queries/technical-issues", headers=auth_header(admin))

    [item] = response.json()["items"]
    assert item["attachments"] == ["https://storage.test/images/abc.png?signature=test"]


async def test_updated_technical_issue_has_signed_attachments(client, db, admin):
    issue = await add_technical_issue(db, IssueSeverity.HIGH, attachments=["pdfs/log.pdf"])

    response = await client.patch(
        f"/admin/queries/technical-issues/{issue.id}",
        json={"status": "IN_PROGRESS"},
        headers=auth_header(admin),
    )

    assert response.status_code == 200
    assert response.json()["attachments"] == ["https://storage.test/pdfs/log.pdf?signature=test"]


async def test_status_only_update_keeps_response(client, db, admin):
    [feedback] = await add_feedback(db, QueryStatus.NEW)
    url = f"/admin/queries/feedback/{feedback.id}"

    await client.patch(url, json={"status": "IN_PROGRESS", "response": "Looking into it"}, headers=auth_header(admin))
    response = await client.patch(url, json={"status": "RESOLVED"}, headers=auth_header(admin))

    assert response.json()["status"] == "RESOLVED"
    assert response.json()["response"] == "Looking into it"


async def test_explicit_null_clears_response(client, db, admin):
    [feedback] = await add_feedback(db, QueryStatus.NEW)
    url = f"/admin/queries/feedback/{feedback.id}"

    await client.patch(url, json={"status": "RESOLVED", "response": "Done"}, headers=auth_header(admin))
    response = await client.patch(url, json={"status": "RESOLVED", "response": None}, headers=auth_header(admin))

    assert response.json()["response"] is None


async def test_support_requests_by_priority(client, db, admin):
    for priority in (SupportPriority.LOW, SupportPriority.HIGH, SupportPriority.MEDIUM):
        db.add(
            SupportRequest(
                category=SupportCategory.ACCOUNT,
                subject=f"{priority.value} request",
                description="Cannot reset my password.",
                priority=priority,
            )
        )
    await db.commit()

    response = await client.get("/admin/queries/support-requests", headers=auth_header(admin))

    assert [item["priority"] for item in response.json()["items"]] == ["HIGH", "MEDIUM", "LOW"]


async def test_technical_issues_by_severity(client, db, admin):
    for severity in (IssueSeverity.LOW, IssueSeverity.CRITICAL, IssueSeverity.MEDIUM, IssueSeverity.HIGH):
        await add_technical_issue(db, severity)

    response = await client.get("/admin/queries/technical-issues", headers=auth_header(admin))

    assert [item["severity"] for item in response.json()["items"]] == ["CRITICAL", "HIGH", "MEDIUM", "LOW"]


@pytest.mark.parametrize("path", ["contacts", "feedback", "support-requests", "technical-issues", "counts"])
async def test_members_are_forbidden(client, member, path):
    response = await client.get(f"/admin/queries/{path}", headers=auth_header(member))

    assert response.status_code == 403


async def test_anonymous_is_unauthorized(client):
    response = await client.get("/admin/queries/feedback")

    assert response.status_code == 401
