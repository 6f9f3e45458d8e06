"""
Dashboard API Endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_current_user_id
from api.models import DashboardStatsResponse
from services.dashboard_service import get_dashboard_stats

router = APIRouter()


@router.get(
    "/dashboard/stats",
    response_model=DashboardStatsResponse,
    summary="Dashboard Stats",
    description="Lead, campaign and activity figures for the authenticated user. Demo figures are returned when the database is unavailable."
)
def dashboard_stats(user_id: int = Depends(get_current_user_id)):
    try:
        stats = get_dashboard_stats(user_id)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to fetch stats: {str(e)}"
        )

    return DashboardStatsResponse.from_stats(stats)
