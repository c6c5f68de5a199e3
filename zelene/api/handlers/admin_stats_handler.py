"""
Admin Stats Handler

Dashboard figures for administrators.

    GET /admin/stats/daily?days=7   cumulative per-day figures (1..30 days)
    GET /admin/stats/weekly         totals, this week and last week
"""

from fastapi import APIRouter, Depends, Query

from zelene.api.dependencies import AdminUser
from zelene.api.dependencies.services import get_stats_service
from zelene.shared.schemas.stats import DailyStatsParams, DayStats, WeeklyStats
from zelene.shared.services.stats_service import StatsService
from zelene.shared.utils.constants import DEFAULT_STATS_DAYS


router = APIRouter()


@router.get("/daily", response_model=list[DayStats])
async def get_daily_stats(
    _admin: AdminUser,
    days: int = Query(DEFAULT_STATS_DAYS, description="Number of days, 1..30"),
    service: StatsService = Depends(get_stats_service),
):
    """Per-day cumulative figures, oldest day first."""
    params = DailyStatsParams(days=days)
    return await service.get_daily_stats(params.days)


@router.get("/weekly", response_model=WeeklyStats)
async def get_weekly_stats(
    _admin: AdminUser,
    service: StatsService = Depends(get_stats_service),
):
    """All-time totals plus this week against last week."""
    return await service.get_weekly_stats()
