"""Tests for dashboard statistics."""

from datetime import datetime, timezone

from tests.conftest import auth_header
from zelene.shared.models import (
    ContactQuery,
    InquiryType,
    IssueSeverity,
    IssueType,
    Post,
    QueryStatus,
    TechnicalIssue,
    User,
    UserRole,
)
from zelene.shared.services.stats_service import StatsService, end_of_day, start_of_week

# Wednesday
NOW = datetime(2026, 3, 11, 15, 0, tzinfo=timezone.utc)


def at(day: int, hour: int = 12) -> datetime:
    return datetime(2026, 3, day, hour, 0, tzinfo=timezone.utc)


def member(username: str, joined: datetime, role: UserRole = UserRole.MEMBER) -> User:
    return User(username=username, email=f"{username}@example.com", role=role, joined=joined)


def contact(created: datetime, status: QueryStatus = QueryStatus.NEW) -> ContactQuery:
    return ContactQuery(
        name="Ada",
        organization="Org",
        email="ada@example.com",
        phone="123",
        inquiry_type=InquiryType.GENERAL,
        message="Hello there, general question.",
        status=status,
        created_at=created,
        updated_at=created,
    )


def issue(created: datetime, status: QueryStatus = QueryStatus.NEW) -> TechnicalIssue:
    return TechnicalIssue(
        issue_type=IssueType.DEVICE,
        severity=IssueSeverity.LOW,
        title="Flicker",
        description="Screen flickers sometimes.",
        steps_to_reproduce="Turn it on and wait.",
        expected_behavior="A stable picture.",
        attachments=[],
        status=status,
        created_at=created,
        updated_at=created,
    )


def test_start_of_week_is_sunday():
    assert start_of_week(NOW) == datetime(2026, 3, 8, tzinfo=timezone.utc)
    assert start_of_week(datetime(2026, 3, 8, 0, 0, tzinfo=timezone.utc)) == datetime(2026, 3, 8, tzinfo=timezone.utc)
    assert start_of_week(datetime(2026, 3, 7, 23, 59, tzinfo=timezone.utc)) == datetime(2026, 3, 1, tzinfo=timezone.utc)


def test_end_of_day():
    assert end_of_day(NOW.date()).isoformat() == "2026-03-11T23:59:59.999999+00:00"


async def test_daily_stats_are_cumulative(db):
    author = member("author", at(1))
    db.add_all(
        [
            author,
            member("early", at(9)),
            member("late", at(11)),
            member("boss", at(9), role=UserRole.ADMIN),
            contact(at(9)),
            contact(at(10), status=QueryStatus.RESOLVED),
            issue(at(10)),
        ]
    )
    await db.flush()
    db.add(Post(title="P", excerpt="E", content="C", published_at=at(10), created_by_id=author.id))
    await db.commit()

    days = await StatsService(db).get_daily_stats(days=3, now=NOW)

    assert [day.date for day in days] == ["2026-03-09", "2026-03-10", "2026-03-11"]
    assert [day.new_members for day in days] == [2, 2, 3]
    assert [day.open_queries for day in days] == [1, 2, 2]
    assert [day.new_posts for day in days] == [0, 1, 1]
    assert [day.technical_issues for day in days] == [0, 1, 1]


async def test_weekly_stats_split_by_calendar_week(db):
    author = member("author", at(2))
    db.add_all(
        [
            author,
            member("this-week", at(9)),
            member("sunday", at(8, 0)),
            contact(at(3)),
            contact(at(10)),
            issue(at(4)),
            issue(at(11)),
            issue(at(11)),
        ]
    )
    await db.flush()
    db.add_all(
        [
            Post(title="Old", excerpt="E", content="C", published_at=at(1), created_by_id=author.id),
            Post(title="New", excerpt="E", content="C", published_at=at(10), created_by_id=author.id),
        ]
    )
    await db.commit()

    stats = await StatsService(db).get_weekly_stats(now=NOW)

    assert stats.total_users == 3
    assert stats.total_posts == 2
    assert stats.this_week.model_dump() == {"members": 2, "queries": 1, "posts": 1, "technical_issues": 2}
    assert stats.last_week.model_dump() == {"members": 1, "queries": 1, "posts": 1, "technical_issues": 1}


async def test_daily_endpoint_validates_days(client, admin):
    too_many = await client.get("/admin/stats/daily?days=31", headers=auth_header(admin))
    default = await client.get("/admin/stats/daily", headers=auth_header(admin))

    assert too_many.status_code == 400
    assert len(default.json()) == 7
    assert set(default.json()[0]) == {"date", "newMembers", "openQueries", "newPosts", "technicalIssues"}


async def test_weekly_endpoint_requires_admin(client, member):
    response = await client.get("/admin/stats/weekly", headers=auth_header(member))

    assert response.status_code == 403
