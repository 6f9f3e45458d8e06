"""
Lead search service.

Turns a free-text query plus optional filters into a search description,
records the search in the user's history (best-effort), and returns a small
batch of template leads shaped by the filters. Results are not ranked.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import List, Optional

from domain.errors import StoreUnavailable
from domain.lead import Lead
from repositories.search_history_repository import record_search
from services.mock_lead_generator import generate_mock_leads

logger = logging.getLogger(__name__)

SEARCH_RESULT_COUNT: int = 5


@dataclass(frozen=True, slots=True)
class SearchFilters:
    industry: Optional[str] = None
    region: Optional[str] = None
    size: Optional[str] = None


def build_search_description(query: str, filters: Optional[SearchFilters]) -> str:
    """Append the filters to the free-text query as plain-language clauses."""

    text = query or ""
    if filters is None:
        return text
    if filters.industry:
        text += f" in {filters.industry} industry"
    if filters.region:
        text += f" located in {filters.region}"
    if filters.size:
        text += f" with {filters.size} employees"
    return text


def search_leads(user_id: int, query: str, filters: Optional[SearchFilters] = None) -> List[Lead]:
    """
    Run a lead search for a user.

    The search is logged to search_history; a store failure is logged and
    otherwise ignored.
    """

    filters = filters or SearchFilters()
    description = build_search_description(query, filters)

    candidates = generate_mock_leads(
        filters.industry or "Technology",
        filters.region or "Asia",
        "B2B Services",
        filters.size or "51-200",
        SEARCH_RESULT_COUNT,
    )

    try:
        record_search(
            user_id,
            query,
            {key: value for key, value in asdict(filters).items() if value},
            len(candidates),
        )
    except StoreUnavailable as e:
        logger.warning("Search history not recorded", extra={"user_id": user_id, "error": str(e)})

    logger.info("Lead search", extra={"user_id": user_id, "search": description, "results": len(candidates)})

    return [
        candidate.to_lead(lead_id=candidate.lead_id, user_id=user_id, icp_id=None)
        for candidate in candidates
    ]


__all__ = ["SEARCH_RESULT_COUNT", "SearchFilters", "build_search_description", "search_leads"]
