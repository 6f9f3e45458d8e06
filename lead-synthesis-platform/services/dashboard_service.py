"""
Dashboard statistics.

Aggregates a user's leads, campaigns and recent ICPs into the numbers shown on
the dashboard:
- total_leads: every lead the user owns
- qualified_leads: leads scoring QUALIFIED_SCORE or more
- active_campaigns: campaigns with status "active"
- conversion_rate: share of leads the user saved, in percent (one decimal)
- recent_activity: the latest ICPs, newest first

When the store is unavailable the demo figures are returned instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Tuple

from domain.errors import StoreUnavailable
from domain.icp import industries_display
from repositories.group_repository import list_campaigns
from repositories.icp_repository import list_recent_icps
from repositories.lead_repository import list_lead_scores

logger = logging.getLogger(__name__)

QUALIFIED_SCORE: int = 85
RECENT_ACTIVITY_LIMIT: int = 3


@dataclass(frozen=True, slots=True)
class ActivityItem:
    activity_type: str
    details: str
    timestamp: Optional[str] = None


@dataclass(frozen=True, slots=True)
class DashboardStats:
    """
    Dashboard figures for one user.

    demo: True when the figures are the static demo values (store unavailable)
    """
    total_leads: int
    qualified_leads: int
    active_campaigns: int
    conversion_rate: Decimal
    recent_activity: Tuple[ActivityItem, ...]
    demo: bool = False


def demo_dashboard_stats(now: Optional[datetime] = None) -> DashboardStats:
    """Static figures shown when the store cannot be reached."""

    timestamp = (now or datetime.now(timezone.utc)).isoformat()
    return DashboardStats(
        total_leads=2847,
        qualified_leads=892,
        active_campaigns=5,
        conversion_rate=Decimal("12.5"),
        recent_activity=(
            ActivityItem("ICP Created", "Technology - Asia", timestamp),
            ActivityItem("Leads Generated", "25 new leads", timestamp),
            ActivityItem("Campaign Started", "Q1 Outreach", timestamp),
        ),
        demo=True,
    )


def _score_of(row) -> int:
    try:
        return int(row.get("score") or 0)
    except (TypeError, ValueError):
        return 0


def _percent(part: int, whole: int) -> Decimal:
    if whole <= 0:
        return Decimal("0.0")
    return (Decimal(part) * 100 / Decimal(whole)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


def _icp_activity(row) -> ActivityItem:
    details = industries_display(row.get("industries")) or "Any industry"
    region = row.get("region")
    if region:
        details = f"{details} - {region}"
    created_at = row.get("created_at")
    return ActivityItem("ICP Created", details, str(created_at) if created_at is not None else None)


def get_dashboard_stats(user_id: int) -> DashboardStats:
    """
    Compute dashboard figures for a user.

    Returns demo figures (demo=True) if any store read fails.
    """

    try:
        lead_rows = list_lead_scores(user_id)
        campaigns = list_campaigns(user_id)
        icp_rows = list_recent_icps(user_id, limit=RECENT_ACTIVITY_LIMIT)
    except StoreUnavailable as e:
        logger.warning("Dashboard stats unavailable, returning demo figures", extra={"user_id": user_id, "error": str(e)})
        return demo_dashboard_stats()

    total = len(lead_rows)
    qualified = sum(1 for row in lead_rows if _score_of(row) >= QUALIFIED_SCORE)
    saved = sum(1 for row in lead_rows if row.get("saved"))

    return DashboardStats(
        total_leads=total,
        qualified_leads=qualified,
        active_campaigns=sum(1 for campaign in campaigns if campaign.status == "active"),
        conversion_rate=_percent(saved, total),
        recent_activity=tuple(_icp_activity(row) for row in icp_rows[:RECENT_ACTIVITY_LIMIT]),
    )


__all__ = [
    "QUALIFIED_SCORE",
    "ActivityItem",
    "DashboardStats",
    "demo_dashboard_stats",
    "get_dashboard_stats",
]
