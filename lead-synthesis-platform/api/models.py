"""
API Request and Response Models.

Pydantic models for validating API requests and serializing responses.
Request models accept both snake_case and the frontend's camelCase field names.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from domain.group import Campaign, LeadGroup
from domain.lead import Lead
from services.dashboard_service import DashboardStats


# ============================================================================
# Lead Models
# ============================================================================

class GenerateLeadsRequest(BaseModel):
    """
    ICP submitted to generate leads.

    Fields accept any JSON value; domain/icp.py coerces them, so a request is
    never rejected for the shape of its ICP.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "industries": ["Technology"],
                "region": "Asia",
                "countries": ["Pakistan"],
                "businessType": "B2B Services",
                "companySize": "51-200",
                "leadCount": 10,
            }
        },
    )

    industries: Any = None
    region: Any = None
    countries: Any = None
    business_type: Any = Field(None, alias="businessType")
    company_size: Any = Field(None, alias="companySize")
    lead_count: Any = Field(None, alias="leadCount")


class LeadResponse(BaseModel):
    """Single lead in API responses."""

    id: int
    user_id: int
    icp_id: Optional[int] = None
    company_name: str
    industry: str
    location: str
    employees: str
    description: str
    score: int
    email: str
    phone: str
    website: Optional[str] = None
    saved: bool = False
    group_id: Optional[int] = None

    @classmethod
    def from_lead(cls, lead: Lead) -> "LeadResponse":
        return cls(
            id=lead.lead_id,
            user_id=lead.user_id,
            icp_id=lead.icp_id,
            company_name=lead.company_name,
            industry=lead.industry,
            location=lead.location,
            employees=lead.employees,
            description=lead.description,
            score=lead.score,
            email=lead.email,
            phone=lead.phone,
            website=lead.website,
            saved=lead.saved,
            group_id=lead.group_id,
        )


class SaveLeadResponse(BaseModel):
    success: bool
    saved: Optional[bool] = None


# ============================================================================
# Search Models
# ============================================================================

class SearchFiltersModel(BaseModel):
    industry: Optional[str] = None
    region: Optional[str] = None
    size: Optional[str] = None


class SearchRequest(BaseModel):
    """Free-text lead search with optional filters."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "query": "cloud consultancies",
                "filters": {"industry": "Technology", "region": "Europe", "size": "51-200"},
            }
        }
    )

    query: str = ""
    filters: Optional[SearchFiltersModel] = None


# ============================================================================
# Group and Campaign Models
# ============================================================================

class CreateGroupRequest(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None


class LeadGroupResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    lead_count: int = 0
    avg_score: int = 0
    status: str = "active"

    @classmethod
    def from_group(cls, group: LeadGroup) -> "LeadGroupResponse":
        return cls(
            id=group.group_id,
            name=group.name,
            description=group.description,
            lead_count=group.lead_count,
            avg_score=group.avg_score,
            status=group.status,
        )


class CampaignResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    target_count: Optional[int] = None
    status: str = "draft"
    emails_sent: int = 0
    open_rate: Decimal = Decimal("0")
    click_rate: Decimal = Decimal("0")
    replies: int = 0

    @classmethod
    def from_campaign(cls, campaign: Campaign) -> "CampaignResponse":
        return cls(
            id=campaign.campaign_id,
            name=campaign.name,
            description=campaign.description,
            target_count=campaign.target_count,
            status=campaign.status,
            emails_sent=campaign.emails_sent,
            open_rate=campaign.open_rate,
            click_rate=campaign.click_rate,
            replies=campaign.replies,
        )


class SuccessResponse(BaseModel):
    success: bool



# ============================================================================
# Dashboard Models
# ============================================================================

class ActivityResponse(BaseModel):
    type: str
    details: str
    timestamp: Optional[str] = None


class DashboardStatsResponse(BaseModel):
    """Dashboard figures; `demo` is true when the store was unavailable."""

    total_leads: int
    qualified_leads: int
    active_campaigns: int
    conversion_rate: Decimal
    recent_activity: List[ActivityResponse]
    demo: bool = False

    @classmethod
    def from_stats(cls, stats: DashboardStats) -> "DashboardStatsResponse":
        return cls(
            total_leads=stats.total_leads,
            qualified_leads=stats.qualified_leads,
            active_campaigns=stats.active_campaigns,
            conversion_rate=stats.conversion_rate,
            recent_activity=[
                ActivityResponse(type=item.activity_type, details=item.details, timestamp=item.timestamp)
                for item in stats.recent_activity
            ],
            demo=stats.demo,
        )
