"""
Stats Schemas

Admin dashboard chart and summary payloads.
"""

from pydantic import Field

from zelene.shared.schemas.common import BaseSchema
from zelene.shared.utils.constants import DEFAULT_STATS_DAYS, MAX_STATS_DAYS, MIN_STATS_DAYS


class DailyStatsParams(BaseSchema):
    """Number of days to chart, ending today."""

    days: int = Field(default=DEFAULT_STATS_DAYS, ge=MIN_STATS_DAYS, le=MAX_STATS_DAYS)


class DayStats(BaseSchema):
    """
    Cumulative figures as of the end of one day.

    - new_members: MEMBER accounts joined on or before the day
    - open_queries: NEW or IN_PROGRESS queries created on or before the day
    - new_posts: Posts published on or before the day
    - technical_issues: Open technical issues created on or before the day
    """

    date: str
    new_members: int
    open_queries: int
    new_posts: int
    technical_issues: int


class WeekCounts(BaseSchema):
    """Items created within one week."""

    members: int
    queries: int
    posts: int
    technical_issues: int


class WeeklyStats(BaseSchema):
    """All-time totals plus this week against last week."""

    total_users: int
    total_posts: int
    this_week: WeekCounts
    last_week: WeekCounts
