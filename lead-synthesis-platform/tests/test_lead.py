"""
Tests for `domain/lead.py`.

Covers contract rules:
- Every Lead has a non-null id.
- Match score is an integer in [0, 100].
- LeadCandidate.to_lead keeps all non-id fields.
- Leads are immutable.
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from domain.lead import Lead, LeadCandidate


def _candidate(**overrides) -> LeadCandidate:
    fields = dict(
        name="Paris Digital",
        industry="Technology",
        location="Paris, France",
        employees="50-200",
        description="Digital agency.",
        score=88,
        email="contact@parisdigital.fr",
        phone="+33-1234567",
        website="https://parisdigital.fr",
    )
    fields.update(overrides)
    return LeadCandidate(**fields)


def test_lead_id_must_not_be_none() -> None:
    """Verify a Lead cannot be created without an id."""

    with pytest.raises(ValueError):
        _candidate().to_lead(lead_id=None, user_id=1, icp_id=None)  # type: ignore[arg-type]


@pytest.mark.parametrize("score", [-1, 101, 87.5, "90", True])
def test_score_must_be_integer_in_range(score) -> None:
    with pytest.raises(ValueError):
        _candidate(score=score)


@pytest.mark.parametrize("score", [0, 75, 100])
def test_score_boundaries_are_accepted(score: int) -> None:
    assert _candidate(score=score).score == score


def test_candidate_requires_company_name() -> None:
    with pytest.raises(ValueError):
        _candidate(name="")


def test_to_lead_keeps_non_id_fields() -> None:
    candidate = _candidate()
    lead = candidate.to_lead(lead_id=5, user_id=9, icp_id=3)

    assert lead.lead_id == 5
    assert lead.user_id == 9
    assert lead.icp_id == 3
    assert lead.company_name == candidate.name
    assert lead.industry == candidate.industry
    assert lead.location == candidate.location
    assert lead.employees == candidate.employees
    assert lead.description == candidate.description
    assert lead.score == candidate.score
    assert lead.email == candidate.email
    assert lead.phone == candidate.phone
    assert lead.website == candidate.website
    assert lead.saved is False
    assert lead.group_id is None


def test_lead_is_immutable() -> None:
    lead = _candidate().to_lead(lead_id=5, user_id=9, icp_id=None)

    with pytest.raises(FrozenInstanceError):
        lead.saved = True  # type: ignore[misc]


def test_lead_icp_id_is_nullable() -> None:
    lead = Lead(
        lead_id=1,
        user_id=1,
        icp_id=None,
        company_name="Amsterdam Tech",
        industry="Technology",
        location="Amsterdam, Netherlands",
        employees="10-50",
        description="",
        score=80,
        email="contact@amstech.nl",
        phone="+31-7654321",
    )

    assert lead.icp_id is None
    assert lead.website is None
