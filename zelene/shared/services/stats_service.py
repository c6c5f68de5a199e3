"""
Stats Service

Figures for the admin dashboard.

Daily Stats:
============
One entry per day for the last ``days`` days (oldest first, today last).
Each figure is cumulative as of the end of that day (23:59:59.999999 UTC):

    newMembers       MEMBER users joined on or before the day
    openQueries      NEW/IN_PROGRESS contacts, feedback, support requests
                     and technical issues created on or before the day
    newPosts         posts published on or before the day
    technicalIssues  NEW/IN_PROGRESS technical issues created on or before the day

Status is read as it is now, so an issue resolved today no longer counts
as open on earlier days either.

Weekly Stats:
=============
Calendar weeks starting Sunday 00:00 UTC. ``queries`` adds contacts,
feedback and support requests; technical issues are reported separately.
"""

from datetime import date, datetime, time, timedelta, timezone
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from zelene.shared.models.enums import QueryStatus, UserRole
from zelene.shared.models.post import Post
from zelene.shared.models.user import User
from zelene.shared.repositories.base import BaseRepository
from zelene.shared.repositories.post_repository import PostRepository
from zelene.shared.repositories.query_repository import (
    ContactQueryRepository,
    FeedbackRepository,
    SupportRequestRepository,
    TechnicalIssueRepository,
)
from zelene.shared.repositories.user_repository import UserRepository
from zelene.shared.schemas.stats import DayStats, WeekCounts, WeeklyStats


OPEN_STATUSES = (QueryStatus.NEW, QueryStatus.IN_PROGRESS)


def end_of_day(day: date) -> datetime:
    """Last instant of day in UTC."""
    return datetime.combine(day, time.max, tzinfo=timezone.utc)


def start_of_week(moment: datetime) -> datetime:
    """Sunday 00:00 UTC of the week containing moment."""
    day = moment.astimezone(timezone.utc).date()
    sunday = day - timedelta(days=(day.weekday() + 1) % 7)
    return datetime.combine(sunday, time.min, tzinfo=timezone.utc)


class StatsService:
    """Service computing dashboard statistics."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.users = UserRepository(session)
        self.posts = PostRepository(session)
        self.contacts = ContactQueryRepository(session)
        self.feedback = FeedbackRepository(session)
        self.support_requests = SupportRequestRepository(session)
        self.technical_issues = TechnicalIssueRepository(session)

    async def _open_created_before(self, repo: BaseRepository, cutoff: datetime) -> int:
        return await repo.count_where(
            repo.model.created_at <= cutoff,
            repo.model.status.in_(OPEN_STATUSES),
        )

    async def get_daily_stats(self, days: int = 7, now: Optional[datetime] = None) -> list[DayStats]:
        """
        Cumulative figures for each of the last ``days`` days.

        Args:
            days: Number of days, 1..30 (validated by the caller)
            now: Reference time (defaults to the current UTC time)
        """
        today = (now or datetime.now(timezone.utc)).astimezone(timezone.utc).date()

        stats = []
        for offset in range(days - 1, -1, -1):
            day = today - timedelta(days=offset)
            cutoff = end_of_day(day)

            open_queries = 0
            for repo in (self.contacts, self.feedback, self.support_requests, self.technical_issues):
                open_queries += await self._open_created_before(repo, cutoff)

            stats.append(
                DayStats(
                    date=day.isoformat(),
                    new_members=await self.users.count_where(
                        User.role == UserRole.MEMBER,
                        User.joined <= cutoff,
                    ),
                    open_queries=open_queries,
                    new_posts=await self.posts.count_where(Post.published_at <= cutoff),
                    technical_issues=await self._open_created_before(self.technical_issues, cutoff),
                )
            )
        return stats

    async def _week_counts(self, start: datetime, end: datetime) -> WeekCounts:
        def created_in(repo: BaseRepository) -> list:
            return [repo.model.created_at >= start, repo.model.created_at < end]

        queries = 0
        for repo in (self.contacts, self.feedback, self.support_requests):
            queries += await repo.count_where(*created_in(repo))

        return WeekCounts(
            members=await self.users.count_where(User.joined >= start, User.joined < end),
            queries=queries,
            posts=await self.posts.count_where(Post.published_at >= start, Post.published_at < end),
            technical_issues=await self.technical_issues.count_where(*created_in(self.technical_issues)),
        )

    async def get_weekly_stats(self, now: Optional[datetime] = None) -> WeeklyStats:
        """All-time totals plus this calendar week against the previous one."""
        this_week_start = start_of_week(now or datetime.now(timezone.utc))
        next_week_start = this_week_start + timedelta(days=7)
        last_week_start = this_week_start - timedelta(days=7)

        return WeeklyStats(
            total_users=await self.users.count(),
            total_posts=await self.posts.count(),
            this_week=await self._week_counts(this_week_start, next_week_start),
            last_week=await self._week_counts(last_week_start, this_week_start),
        )
