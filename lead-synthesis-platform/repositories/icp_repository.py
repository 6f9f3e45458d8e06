"""
ICP repository (persistence).

Stores the ICP that originated a lead-generation request. One row per request;
rows are never updated.
"""

from __future__ import annotations

from typing import Any, List

from domain.errors import StoreUnavailable
from domain.icp import IcpRequest
from repositories.client import execute, get_supabase

_ICPS_TABLE: str = "icps"


def _icp_to_row(user_id: int, icp: IcpRequest) -> dict[str, Any]:
    return {
        "user_id": user_id,
        "industries": list(icp.industries),
        "region": icp.region,
        "countries": list(icp.countries),
        "business_type": icp.business_type,
        "company_size": icp.company_size,
        "lead_count": icp.lead_count,
    }


def insert_icp(user_id: int, icp: IcpRequest) -> int:
    """
    Insert an ICP and return its store-assigned id.

    Raises:
    - StoreUnavailable if the store is unreachable or rejects the insert.
    """

    query = get_supabase().table(_ICPS_TABLE).insert(_icp_to_row(user_id, icp))
    rows = execute(query, "insert icp")
    if not rows or rows[0].get("id") is None:
        raise StoreUnavailable("Failed to insert icp: no id returned")
    return int(rows[0]["id"])


def list_recent_icps(user_id: int, limit: int = 3) -> List[dict[str, Any]]:
    """Return the user's most recent ICP rows, newest first."""

    query = (
        get_supabase()
        .table(_ICPS_TABLE)
        .select("*")
        .eq("user_id", user_id)
        .order("created_at", desc=True)
        .limit(limit)
    )
    return execute(query, "list recent icps")


__all__ = ["insert_icp", "list_recent_icps"]
