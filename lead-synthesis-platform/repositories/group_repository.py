"""
Lead group and campaign repository.

Plain CRUD over the `lead_groups` and `campaigns` tables. Callers decide how to
degrade when the store is unavailable.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, List, Mapping, Optional

from domain.errors import StoreUnavailable
from domain.group import Campaign, LeadGroup
from repositories.client import execute, get_supabase

_GROUPS_TABLE: str = "lead_groups"
_CAMPAIGNS_TABLE: str = "campaigns"


def _row_to_group(row: Mapping[str, Any]) -> LeadGroup:
    return LeadGroup(
        group_id=int(row["id"]),
        name=str(row.get("name") or ""),
        description=row.get("description"),
        user_id=row.get("user_id"),
        lead_count=int(row.get("lead_count") or 0),
        avg_score=int(row.get("avg_score") or 0),
        status=str(row.get("status") or "active"),
    )


def _row_to_campaign(row: Mapping[str, Any]) -> Campaign:
    return Campaign(
        campaign_id=int(row["id"]),
        name=str(row.get("name") or ""),
        description=row.get("description"),
        user_id=row.get("user_id"),
        target_count=row.get("target_count"),
        status=str(row.get("status") or "draft"),
        emails_sent=int(row.get("emails_sent") or 0),
        open_rate=Decimal(str(row.get("open_rate") or 0)),
        click_rate=Decimal(str(row.get("click_rate") or 0)),
        replies=int(row.get("replies") or 0),
    )


def list_groups(user_id: int) -> List[LeadGroup]:
    """List a user's lead groups, newest first."""

    query = (
        get_supabase()
        .table(_GROUPS_TABLE)
        .select("*")
        .eq("user_id", user_id)
        .order("created_at", desc=True)
    )
    return [_row_to_group(row) for row in execute(query, "list lead groups")]


def create_group(user_id: int, name: str, description: Optional[str] = None) -> LeadGroup:
    """
    Create a lead group.

    Raises:
    - StoreUnavailable if the insert fails or returns no row.
    """

    query = get_supabase().table(_GROUPS_TABLE).insert(
        {"user_id": user_id, "name": name, "description": description}
    )
    rows = execute(query, "create lead group")
    if not rows:
        raise StoreUnavailable("Failed to create lead group: no row returned")
    return _row_to_group(rows[0])


def list_campaigns(user_id: int) -> List[Campaign]:
    """List a user's campaigns, newest first."""

    query = (
        get_supabase()
        .table(_CAMPAIGNS_TABLE)
        .select("*")
        .eq("user_id", user_id)
        .order("created_at", desc=True)
    )
    return [_row_to_campaign(row) for row in execute(query, "list campaigns")]


__all__ = [
    "create_group",
    "list_campaigns",
    "list_groups",
]
