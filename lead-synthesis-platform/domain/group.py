"""
Domain: lead groups and campaigns.

Both are owned by a user and are managed through plain CRUD. Campaigns are
listed only; sending campaign email is not part of this service.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True, slots=True)
class LeadGroup:
    group_id: int
    name: str
    description: Optional[str] = None
    user_id: Optional[int] = None
    lead_count: int = 0
    avg_score: int = 0
    status: str = "active"  # active, paused


@dataclass(frozen=True, slots=True)
class Campaign:
    campaign_id: int
    name: str
    description: Optional[str] = None
    user_id: Optional[int] = None
    target_count: Optional[int] = None
    status: str = "draft"  # draft, active, paused, completed
    emails_sent: int = 0
    open_rate: Decimal = Decimal("0")
    click_rate: Decimal = Decimal("0")
    replies: int = 0


__all__ = ["Campaign", "LeadGroup"]
