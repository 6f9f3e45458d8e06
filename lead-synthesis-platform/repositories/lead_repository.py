"""
Lead repository (persistence).

This module provides *only* persistence operations for the Lead domain entity.
No synthesis or fallback rules belong here; the persistence adapter in
services/lead_persistence_service.py decides what to do when the store fails.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from domain.errors import StoreUnavailable
from domain.lead import Lead, LeadCandidate
from repositories.client import execute, get_supabase

# Supabase table name for Lead records.
# Keep this aligned with your database schema.
_LEADS_TABLE: str = "leads"


@dataclass(frozen=True, slots=True)
class InsertResult:
    """
    Outcome of a single lead insert.

    Exactly one of `lead` (the stored row) and `error` is set.
    """

    lead: Optional[Lead]
    error: Optional[StoreUnavailable] = None

    @property
    def success(self) -> bool:
        return self.lead is not None


def _candidate_to_row(user_id: int, icp_id: Optional[int], candidate: LeadCandidate) -> dict[str, Any]:
    """Convert a LeadCandidate to a Supabase row payload."""

    return {
        "user_id": user_id,
        "icp_id": icp_id,
        "company_name": candidate.name,
        "industry": candidate.industry,
        "location": candidate.location,
        "employees": candidate.employees,
        "description": candidate.description,
        "score": candidate.score,
        "email": candidate.email,
        "phone": candidate.phone,
        "website": candidate.website,
    }


def _row_to_lead(row: Mapping[str, Any]) -> Lead:
    """Convert a Supabase row into a domain Lead."""

    def get_text(key: str) -> str:
        value = row.get(key)
        return str(value) if value is not None else ""

    icp_id = row.get("icp_id")
    group_id = row.get("group_id")

    return Lead(
        lead_id=int(row["id"]),
        user_id=int(row["user_id"]),
        icp_id=int(icp_id) if icp_id is not None else None,
        company_name=get_text("company_name"),
        industry=get_text("industry"),
        location=get_text("location"),
        employees=get_text("employees"),
        description=get_text("description"),
        score=int(row.get("score") or 0),
        email=get_text("email"),
        phone=get_text("phone"),
        website=row.get("website") or None,
        saved=bool(row.get("saved", False)),
        group_id=int(group_id) if group_id is not None else None,
    )


def insert_lead(user_id: int, icp_id: Optional[int], candidate: LeadCandidate) -> Lead:
    """
    Insert a lead and return the stored row as a Lead.

    Raises:
    - StoreUnavailable if Supabase is unreachable or returns an error response.
    """

    query = get_supabase().table(_LEADS_TABLE).insert(_candidate_to_row(user_id, icp_id, candidate))
    rows = execute(query, "insert lead")
    if not rows:
        raise StoreUnavailable("Failed to insert lead: no row returned")

    try:
        return _row_to_lead(rows[0])
    except (KeyError, TypeError, ValueError) as e:
        raise StoreUnavailable(f"Failed to insert lead: unreadable row ({e})") from e


def try_insert_lead(user_id: int, icp_id: Optional[int], candidate: LeadCandidate) -> InsertResult:
    """
    Insert a lead, reporting store failure as a value instead of raising.

    Returns:
        InsertResult with the stored Lead, or with the StoreUnavailable error.
    """

    try:
        return InsertResult(lead=insert_lead(user_id, icp_id, candidate))
    except StoreUnavailable as e:
        return InsertResult(lead=None, error=e)


def list_leads_for_user(
    user_id: int,
    page: int = 1,
    limit: int = 50,
    saved_only: bool = False,
) -> List[Lead]:
    """
    List a user's leads, newest first.

    Args:
    - page: 1-based page number
    - limit: page size
    - saved_only: only return leads with saved = true
    """

    offset = (max(page, 1) - 1) * limit

    query = get_supabase().table(_LEADS_TABLE).select("*").eq("user_id", user_id)
    if saved_only:
        query = query.eq("saved", True)
    query = query.order("created_at", desc=True).range(offset, offset + limit - 1)

    rows = execute(query, "list leads")
    return [_row_to_lead(row) for row in rows]


def get_lead_for_user(lead_id: int, user_id: int) -> Lead | None:
    """
    Fetch a lead owned by the given user.

    Returns:
    - Lead if found
    - None if no record exists for the given id and owner
    """

    query = (
        get_supabase()
        .table(_LEADS_TABLE)
        .select("*")
        .eq("id", lead_id)
        .eq("user_id", user_id)
        .limit(1)
    )
    rows = execute(query, "fetch lead")
    if not rows:
        return None
    return _row_to_lead(rows[0])


def toggle_saved(lead_id: int, user_id: int) -> bool | None:
    """
    Flip the saved flag of a user's lead.

    Returns the new saved value, or None if the lead does not exist for the user.
    """

    lead = get_lead_for_user(lead_id, user_id)
    if lead is None:
        return None

    new_value = not lead.saved
    query = (
        get_supabase()
        .table(_LEADS_TABLE)
        .update({"saved": new_value})
        .eq("id", lead_id)
        .eq("user_id", user_id)
    )
    execute(query, "toggle saved flag")
    return new_value


def assign_group(lead_id: int, group_id: int, user_id: int) -> bool:
    """
    Assign a user's lead to a group.

    Returns True if a row was updated.
    """

    query = (
        get_supabase()
        .table(_LEADS_TABLE)
        .update({"group_id": group_id})
        .eq("id", lead_id)
        .eq("user_id", user_id)
    )
    rows = execute(query, "assign lead to group")
    return bool(rows)


def list_lead_scores(user_id: int) -> List[dict[str, Any]]:
    """
    Return the score and saved flag of every lead the user owns.

    Used for dashboard aggregates; rows are not converted to Lead objects.
    """

    query = get_supabase().table(_LEADS_TABLE).select("score, saved").eq("user_id", user_id)
    return execute(query, "list lead scores")


__all__ = [
    "InsertResult",
    "assign_group",
    "get_lead_for_user",
    "insert_lead",
    "list_lead_scores",
    "list_leads_for_user",
    "toggle_saved",
    "try_insert_lead",
]
