"""
Domain: Lead entities.

Contract excerpts implemented here:
- A LeadCandidate is a synthesized lead that has not been persisted yet. It may
  carry a provisional id (the mock generator assigns one).
- A Lead is what the API returns. Every Lead has a non-null lead_id, either
  assigned by the store or synthesized locally when the store is unavailable.
- match score is an integer in [0, 100].
- Leads are created in batches by the pipeline; only the saved flag and the
  group assignment change afterwards, and those changes happen in the store.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

MIN_SCORE: int = 0
MAX_SCORE: int = 100


def require_score(value: int) -> None:
    """Enforce that a match score is an integer in [0, 100]."""

    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"score must be an integer, got {value!r}")
    if not MIN_SCORE <= value <= MAX_SCORE:
        raise ValueError(f"score must be in [{MIN_SCORE}, {MAX_SCORE}], got {value}")


@dataclass(frozen=True, slots=True)
class LeadCandidate:
    """Unpersisted lead produced by the AI synthesizer or the mock generator."""

    name: str
    industry: str
    location: str
    employees: str
    description: str
    score: int
    email: str
    phone: str
    website: Optional[str] = None
    lead_id: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("name must be a non-empty string")
        require_score(self.score)

    def to_lead(self, lead_id: int, user_id: int, icp_id: Optional[int]) -> "Lead":
        """Materialize this candidate as an in-memory Lead with the given id."""

        return Lead(
            lead_id=lead_id,
            user_id=user_id,
            icp_id=icp_id,
            company_name=self.name,
            industry=self.industry,
            location=self.location,
            employees=self.employees,
            description=self.description,
            score=self.score,
            email=self.email,
            phone=self.phone,
            website=self.website,
        )


@dataclass(frozen=True, slots=True)
class Lead:
    """
    Lead as returned to callers.

    icp_id is nullable: the store severs the link when the ICP is deleted.
    """

    lead_id: int
    user_id: int
    icp_id: Optional[int]
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

    def __post_init__(self) -> None:
        if self.lead_id is None:
            raise ValueError("lead_id must not be None")
        require_score(self.score)


__all__ = [
    "MIN_SCORE",
    "MAX_SCORE",
    "Lead",
    "LeadCandidate",
    "require_score",
]
