"""
Leads API Endpoints.

Endpoints for generating leads from an ICP, listing a user's leads, and
toggling the saved flag.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_current_user_id
from api.models import GenerateLeadsRequest, LeadResponse, SaveLeadResponse
from domain.errors import StoreUnavailable
from domain.icp import normalize_icp
from repositories.lead_repository import list_leads_for_user, toggle_saved
from services.lead_generation_service import generate_leads
from services.lead_synthesis_service import mock_leads_for

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/leads/generate",
    response_model=List[LeadResponse],
    summary="Generate Leads",
    description="Generate a batch of leads matching an ICP. Falls back to template data when AI generation is unavailable."
)
def generate_leads_for_icp(
    request: GenerateLeadsRequest,
    user_id: int = Depends(get_current_user_id),
):
    """
    Generate leads for the authenticated user's ICP.

    **How it works:**
    1. Normalizes the ICP (missing fields are defaulted, never rejected)
    2. Stores the ICP
    3. Asks the generative service for leads, once
    4. Falls back to template leads if the service is unconfigured, fails,
       or returns unusable output (at most 15 leads)
    5. Stores each lead; leads that cannot be stored are still returned

    **Example request:**
    ```json
    {
      "industries": ["Technology"],
      "region": "Asia",
      "businessType": "B2B Services",
      "companySize": "51-200",
      "leadCount": 3
    }
    ```

    This endpoint does not fail because of the generative service or the
    database.
    """
    raw_icp = request.model_dump()

    try:
        result = generate_leads(user_id, raw_icp)
        leads = result.leads
    except Exception:
        logger.exception(
            "Lead generation pipeline failed, returning unstored template leads",
            extra={"user_id": user_id},
        )
        icp = normalize_icp(raw_icp)
        leads = [
            candidate.to_lead(lead_id=candidate.lead_id, user_id=user_id, icp_id=None)
            for candidate in mock_leads_for(icp)
        ]

    return [LeadResponse.from_lead(lead) for lead in leads]


@router.get(
    "/leads",
    response_model=List[LeadResponse],
    summary="List Leads",
    description="List the authenticated user's leads, newest first."
)
def list_leads(
    page: int = Query(1, ge=1, description="1-based page number"),
    limit: int = Query(50, ge=1, le=500, description="Page size"),
    saved: bool = Query(False, description="Only return saved leads"),
    user_id: int = Depends(get_current_user_id),
):
    """
    List leads with pagination.

    **Example usage:**
    - First page: `GET /api/leads`
    - Saved leads only: `GET /api/leads?saved=true`
    - Second page of 20: `GET /api/leads?page=2&limit=20`

    Returns an empty list when the database is unavailable.
    """
    try:
        leads = list_leads_for_user(user_id, page=page, limit=limit, saved_only=saved)
    except StoreUnavailable as e:
        logger.warning("Lead listing unavailable", extra={"user_id": user_id, "error": str(e)})
        return []
    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to fetch leads: {str(e)}"
        )

    return [LeadResponse.from_lead(lead) for lead in leads]


@router.post(
    "/leads/{lead_id}/save",
    response_model=SaveLeadResponse,
    summary="Save / Unsave Lead",
    description="Toggle the saved flag of one of the user's leads."
)
def save_lead(lead_id: int, user_id: int = Depends(get_current_user_id)):
    try:
        saved = toggle_saved(lead_id, user_id)
    except StoreUnavailable as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to save lead: {str(e)}"
        )

    if saved is None:
        raise HTTPException(
            status_code=404,
            detail=f"Lead not found: {lead_id}"
        )

    return SaveLeadResponse(success=True, saved=saved)
