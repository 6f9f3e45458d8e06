"""
Mock lead generator.

Synthesizes plausible leads from the static region templates. Used whenever
the generative service cannot produce leads, so it must never fail.

Determinism:
- Company identities are the first min(count, MAX_MOCK_LEADS) template entries
  of the region, in table order. Repeated calls with the same region and count
  return the same companies in the same order.
- Only the phone number and the match score are random. Pass a seeded
  `random.Random` to make them reproducible.
"""

from __future__ import annotations

import random
import time
from typing import List, Mapping, Optional

from domain.lead import LeadCandidate
from domain.region_templates import (
    REGION_TEMPLATES,
    RegionTemplate,
    employee_range_for,
    lookup_region,
)

# Size of the largest template pool; requests above it are capped.
MAX_MOCK_LEADS: int = 15

MIN_MOCK_SCORE: int = 75
MAX_MOCK_SCORE: int = 98


def _describe(business_type: str | None, industry: str | None) -> str:
    return (
        f"Leading {business_type or 'B2B'} company specializing in "
        f"{industry or 'technology'} solutions. "
        "Focused on digital transformation and innovation."
    )


def generate_mock_leads(
    industry: str | None,
    region: str | None,
    business_type: str | None,
    company_size: str | None,
    count: int,
    *,
    templates: Mapping[str, RegionTemplate] = REGION_TEMPLATES,
    rng: Optional[random.Random] = None,
    now_ms: Optional[int] = None,
) -> List[LeadCandidate]:
    """
    Build a batch of template-based leads.

    Args:
        industry: industry display string (defaults to "Technology")
        region: region name; unknown regions use the default region's template
        business_type: free-text business type used in the description
        company_size: size bucket, mapped to an employee range ("50-200" if unmapped)
        count: requested number of leads, capped at MAX_MOCK_LEADS
        templates: region table to draw from
        rng: source of randomness for phone numbers and scores
        now_ms: time basis for provisional ids (defaults to the current time)

    Returns:
        Exactly min(count, MAX_MOCK_LEADS) leads (none for a non-positive count),
        bounded further only by the size of the region's template pool.

    Example:
        leads = generate_mock_leads("Technology", "Asia", "B2B Services", "51-200", 3)
        # -> TechVentures Pakistan, Digital Solutions Asia, Innovation Hub PK
    """

    rng = rng or random.Random()
    base_id = now_ms if now_ms is not None else int(time.time() * 1000)

    template = lookup_region(region, templates)
    size = max(0, min(count, MAX_MOCK_LEADS))
    employees = employee_range_for(company_size)
    description = _describe(business_type, industry)

    leads: List[LeadCandidate] = []
    for index, company in enumerate(template.companies[:size]):
        prefix = rng.choice(template.phone_prefixes)
        number = rng.randint(1000000, 9999999)

        leads.append(
            LeadCandidate(
                lead_id=base_id + index,
                name=company.name,
                industry=industry or "Technology",
                location=company.location,
                employees=employees,
                description=description,
                score=rng.randint(MIN_MOCK_SCORE, MAX_MOCK_SCORE),
                email=f"contact@{company.domain}",
                phone=f"{prefix}-{number}",
                website=f"https://{company.domain}",
            )
        )

    return leads


__all__ = [
    "MAX_MOCK_LEADS",
    "MAX_MOCK_SCORE",
    "MIN_MOCK_SCORE",
    "generate_mock_leads",
]
