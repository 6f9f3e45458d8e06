"""
Lead Groups and Campaigns API Endpoints.

Endpoints for organizing leads into groups and listing campaigns. When the
database is unavailable, listings return demo rows and group creation returns
an unsaved group with a synthesized id.
"""

import logging
from decimal import Decimal
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_current_user_id
from api.models import (
    CampaignResponse,
    CreateGroupRequest,
    LeadGroupResponse,
    SuccessResponse,
)
from domain.errors import StoreUnavailable
from domain.group import Campaign, LeadGroup
from repositories.group_repository import create_group, list_campaigns, list_groups
from repositories.lead_repository import assign_group
from services.lead_persistence_service import synthesize_id

logger = logging.getLogger(__name__)

router = APIRouter()

DEMO_GROUPS: tuple[LeadGroup, ...] = (
    LeadGroup(group_id=1, name="Hot Prospects", lead_count=12, avg_score=92, status="active"),
    LeadGroup(group_id=2, name="Q1 Targets", lead_count=45, avg_score=85, status="active"),
    LeadGroup(group_id=3, name="Technology Sector", lead_count=78, avg_score=78, status="paused"),
)

DEMO_CAMPAIGNS: tuple[Campaign, ...] = (
    Campaign(
        campaign_id=1,
        name="Q1 Technology Outreach",
        description="Targeting 500 tech companies",
        status="active",
        emails_sent=2847,
        open_rate=Decimal("42"),
        click_rate=Decimal("12"),
        replies=28,
    ),
    Campaign(
        campaign_id=2,
        name="Manufacturing Partnership Drive",
        description="B2B manufacturing companies",
        status="draft",
        target_count=250,
    ),
)


@router.get(
    "/lead-groups",
    response_model=List[LeadGroupResponse],
    summary="List Lead Groups",
)
def get_lead_groups(user_id: int = Depends(get_current_user_id)):
    """List the user's lead groups, newest first."""
    try:
        groups = list_groups(user_id)
    except StoreUnavailable as e:
        logger.warning("Lead groups unavailable, returning demo groups", extra={"error": str(e)})
        groups = list(DEMO_GROUPS)

    return [LeadGroupResponse.from_group(group) for group in groups]


@router.post(
    "/lead-groups",
    response_model=LeadGroupResponse,
    summary="Create Lead Group",
)
def create_lead_group(request: CreateGroupRequest, user_id: int = Depends(get_current_user_id)):
    """
    Create a lead group.

    **Example request:**
    ```json
    {"name": "Hot Prospects", "description": "Score above 90"}
    ```
    """
    try:
        group = create_group(user_id, request.name, request.description)
    except StoreUnavailable as e:
        logger.warning("Lead group not stored, returning unsaved group", extra={"error": str(e)})
        group = LeadGroup(
            group_id=synthesize_id(),
            name=request.name,
            description=request.description,
            user_id=user_id,
        )

    return LeadGroupResponse.from_group(group)


@router.post(
    "/lead-groups/{group_id}/leads/{lead_id}",
    response_model=SuccessResponse,
    summary="Add Lead to Group",
)
def add_lead_to_group(group_id: int, lead_id: int, user_id: int = Depends(get_current_user_id)):
    """Assign one of the user's leads to a group."""
    try:
        updated = assign_group(lead_id, group_id, user_id)
    except StoreUnavailable as e:
        raise HTTPException(
            status_code=500,
            detail=f"Failed to add lead to group: {str(e)}"
        )

    if not updated:
        raise HTTPException(
            status_code=404,
            detail=f"Lead not found: {lead_id}"
        )

    return SuccessResponse(success=True)


@router.get(
    "/campaigns",
    response_model=List[CampaignResponse],
    summary="List Campaigns",
)
def get_campaigns(user_id: int = Depends(get_current_user_id)):
    """List the user's campaigns, newest first."""
    try:
        campaigns = list_campaigns(user_id)
    except StoreUnavailable as e:
        logger.warning("Campaigns unavailable, returning demo campaigns", extra={"error": str(e)})
        campaigns = list(DEMO_CAMPAIGNS)

    return [CampaignResponse.from_campaign(campaign) for campaign in campaigns]
