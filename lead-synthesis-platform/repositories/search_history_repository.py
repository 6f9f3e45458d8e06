"""
Search history repository.

Records lead searches for a user. Writes are fire-and-forget from the caller's
point of view; failures surface as StoreUnavailable.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from repositories.client import execute, get_supabase

_SEARCH_HISTORY_TABLE: str = "search_history"


def record_search(
    user_id: int,
    query_text: str,
    filters: Optional[Mapping[str, Any]],
    results_count: int,
) -> None:
    """Insert one search_history row."""

    query = get_supabase().table(_SEARCH_HISTORY_TABLE).insert(
        {
            "user_id": user_id,
            "query": query_text,
            "filters": dict(filters) if filters else None,
            "results_count": results_count,
        }
    )
    execute(query, "record search")


__all__ = ["record_search"]
