"""
Tests for `services/lead_generation_service.py` (the full pipeline).

Uses FakeSupabase for the store and a stub synthesizer for the AI path.
"""

from __future__ import annotations

from domain.errors import ServiceError
from domain.lead import LeadCandidate
from services.ai_lead_service import AILeadSynthesizer
from services.lead_generation_service import default_synthesizer, generate_leads


RAW_ICP = {
    "industries": ["Technology"],
    "region": "Asia",
    "businessType": "B2B Services",
    "companySize": "51-200",
    "leadCount": 3,
}


class StubSynthesizer:
    def __init__(self, leads=None, error=None):
        self.leads = leads or []
        self.error = error

    def synthesize(self, icp, count=None):
        if self.error is not None:
            raise self.error
        return self.leads


def test_no_store_and_no_ai_still_returns_leads() -> None:
    """Both collaborators down: three Asia template leads with non-null ids."""

    result = generate_leads(42, RAW_ICP)

    assert result.source == "mock"
    assert isinstance(result.icp_id, int)
    assert [lead.company_name for lead in result.leads] == [
        "TechVentures Pakistan",
        "Digital Solutions Asia",
        "Innovation Hub PK",
    ]
    assert all(lead.lead_id is not None for lead in result.leads)
    assert all(lead.employees == "50-200" for lead in result.leads)
    assert all(lead.user_id == 42 for lead in result.leads)


def test_healthy_store_assigns_ids(fake_supabase) -> None:
    result = generate_leads(42, RAW_ICP, synthesizer=StubSynthesizer(error=ServiceError("boom")))

    assert result.icp_id == 101
    assert [lead.lead_id for lead in result.leads] == [102, 103, 104]
    assert all(lead.icp_id == 101 for lead in result.leads)
    assert len(fake_supabase.tables["leads"]) == 3


def test_partial_lead_store_failure_keeps_batch(fake_supabase) -> None:
    fake_supabase.failing_calls[("leads", "insert")] = {1}

    result = generate_leads(42, RAW_ICP)

    assert len(result.leads) == 3
    assert len(fake_supabase.tables["leads"]) == 2
    assert result.leads[1].company_name == "Digital Solutions Asia"
    assert result.leads[1].lead_id not in (102, 103)


def test_ai_output_is_persisted_as_returned(fake_supabase) -> None:
    ai_lead = LeadCandidate(
        name="Lahore Logistics AI",
        industry="Technology",
        location="Lahore, Pakistan",
        employees="90",
        description="Route optimisation software.",
        score=95,
        email="team@lla.pk",
        phone="+92-4212345678",
    )

    result = generate_leads(42, RAW_ICP, synthesizer=StubSynthesizer(leads=[ai_lead]))

    assert result.source == "ai"
    assert len(result.leads) == 1
    assert result.leads[0].company_name == "Lahore Logistics AI"
    assert result.leads[0].lead_id == 102


def test_default_synthesizer_follows_configuration(monkeypatch) -> None:
    assert default_synthesizer() is None

    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    assert isinstance(default_synthesizer(), AILeadSynthesizer)


def test_unexpected_synthesis_error_falls_back_with_stored_icp(fake_supabase) -> None:
    """An unexpected synthesis error still yields stored mock leads linked to the ICP."""

    result = generate_leads(42, RAW_ICP, synthesizer=StubSynthesizer(error=KeyError("bug")))

    assert result.source == "mock"
    assert result.icp_id == 101
    assert [lead.lead_id for lead in result.leads] == [102, 103, 104]
    assert all(lead.icp_id == 101 for lead in result.leads)
    assert len(fake_supabase.tables["leads"]) == 3
