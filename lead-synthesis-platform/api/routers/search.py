"""
Search API Endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_current_user_id
from api.models import LeadResponse, SearchRequest
from services.search_service import SearchFilters, search_leads

router = APIRouter()


@router.post(
    "/search/leads",
    response_model=List[LeadResponse],
    summary="Search Leads",
    description="Search for leads by free text and filters. Results are template leads and are not ranked."
)
def search(request: SearchRequest, user_id: int = Depends(get_current_user_id)):
    """
    Search leads.

    **Example request:**
    ```json
    {"query": "cloud consultancies", "filters": {"industry": "Technology", "region": "Europe"}}
    ```
    """
    filters = None
    if request.filters is not None:
        filters = SearchFilters(
            industry=request.filters.industry,
            region=request.filters.region,
            size=request.filters.size,
        )

    try:
        leads = search_leads(user_id, request.query, filters)
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Search failed: {str(e)}"
        )

    return [LeadResponse.from_lead(lead) for lead in leads]
