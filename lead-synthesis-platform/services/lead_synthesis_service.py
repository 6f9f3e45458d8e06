"""
Lead synthesis orchestrator.

Decides between the AI synthesizer and the mock generator for one request:
- AttemptAI: exactly one call to the synthesizer. If it returns leads, they are
  used as-is (count not checked against the request).
- Fallback: any LeadSynthesisError (unconfigured, call failure, malformed
  reply) switches to the mock generator, which cannot fail.

There is no retry. Errors from the generative service never leave this module.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Protocol

from domain.errors import LeadSynthesisError
from domain.icp import IcpRequest
from domain.lead import LeadCandidate
from services.mock_lead_generator import generate_mock_leads

logger = logging.getLogger(__name__)

SOURCE_AI: str = "ai"
SOURCE_MOCK: str = "mock"


class LeadSynthesizer(Protocol):
    def synthesize(self, icp: IcpRequest, count: Optional[int] = None) -> List[LeadCandidate]:
        ...


MockGenerator = Callable[..., List[LeadCandidate]]


@dataclass(frozen=True, slots=True)
class SynthesisOutcome:
    """
    Leads produced for one request.

    source: "ai" if the generative service produced the leads, "mock" otherwise
    fallback_reason: failure kind that triggered the fallback (None on the AI path)
    """
    leads: List[LeadCandidate]
    source: str
    fallback_reason: Optional[str] = None


def mock_leads_for(icp: IcpRequest, mock_generator: MockGenerator = generate_mock_leads) -> List[LeadCandidate]:
    """Run the mock generator with the ICP's fields."""

    return mock_generator(
        icp.industries_text,
        icp.region,
        icp.business_type,
        icp.company_size,
        icp.lead_count,
    )


def synthesize_leads(
    icp: IcpRequest,
    synthesizer: Optional[LeadSynthesizer] = None,
    *,
    mock_generator: MockGenerator = generate_mock_leads,
) -> SynthesisOutcome:
    """
    Produce leads for an ICP, falling back to mock data on any AI failure.

    Args:
        icp: canonical ICP
        synthesizer: AI synthesizer; None means the service is not configured
        mock_generator: fallback generator (injectable for tests)

    Returns:
        SynthesisOutcome; never raises for generative-service failures.
    """

    if synthesizer is None:
        logger.info("Generative service not configured, using mock leads")
        return SynthesisOutcome(
            leads=mock_leads_for(icp, mock_generator),
            source=SOURCE_MOCK,
            fallback_reason="ServiceUnavailable",
        )

    try:
        leads = synthesizer.synthesize(icp, icp.lead_count)
    except LeadSynthesisError as e:
        reason = type(e).__name__
        logger.warning(
            "AI lead generation failed, using mock leads",
            extra={"failure_kind": reason, "error": str(e)},
        )
        return SynthesisOutcome(
            leads=mock_leads_for(icp, mock_generator),
            source=SOURCE_MOCK,
            fallback_reason=reason,
        )

    return SynthesisOutcome(leads=list(leads), source=SOURCE_AI)


__all__ = [
    "SOURCE_AI",
    "SOURCE_MOCK",
    "LeadSynthesizer",
    "SynthesisOutcome",
    "mock_leads_for",
    "synthesize_leads",
]
