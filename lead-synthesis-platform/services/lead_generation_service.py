"""
Lead generation pipeline.

Handles:
- ICP normalization
- ICP persistence (best-effort)
- Lead synthesis with AI-to-mock fallback
- Per-lead persistence with in-memory substitution

The pipeline never fails because of the generative service or the store.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from config.settings import get_settings
from domain.icp import IcpRequest, normalize_icp
from domain.lead import Lead
from services.ai_lead_service import AILeadSynthesizer
from services.lead_persistence_service import persist_icp, persist_leads
from services.lead_synthesis_service import (
    SOURCE_MOCK,
    LeadSynthesizer,
    SynthesisOutcome,
    mock_leads_for,
    synthesize_leads,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """
    Result of a generate-leads request.

    icp_id: store id of the ICP, or a synthesized id when the store failed
    leads: generated leads in order, each with a non-null id
    source: "ai" or "mock"
    """
    icp: IcpRequest
    icp_id: int
    leads: List[Lead]
    source: str


def default_synthesizer() -> Optional[LeadSynthesizer]:
    """Return an AI synthesizer when OPENAI_API_KEY is configured, else None."""

    if not get_settings().ai_configured:
        return None
    return AILeadSynthesizer()


def generate_leads(
    user_id: int,
    raw_icp: Optional[Mapping[str, Any]],
    *,
    synthesizer: Optional[LeadSynthesizer] = None,
) -> GenerationResult:
    """
    Generate and store leads for an authenticated user's ICP.

    Args:
        user_id: id of the already-authenticated user
        raw_icp: ICP fields as submitted (snake_case or camelCase keys)
        synthesizer: AI synthesizer to use; defaults to the configured one

    Returns:
        GenerationResult with min(lead_count, 15) leads on the mock path, or
        whatever the AI returned on the AI path.

    Example:
        result = generate_leads(42, {"industries": ["Technology"], "region": "Asia", "leadCount": 3})
        for lead in result.leads:
            print(lead.lead_id, lead.company_name, lead.score)
    """

    icp = normalize_icp(raw_icp)
    icp_id = persist_icp(user_id, icp)

    if synthesizer is None:
        synthesizer = default_synthesizer()

    try:
        outcome = synthesize_leads(icp, synthesizer)
    except Exception:
        # The ICP is already stored; keep its id on the fallback leads.
        logger.exception(
            "Lead synthesis raised unexpectedly, using mock leads",
            extra={"user_id": user_id, "icp_id": icp_id},
        )
        outcome = SynthesisOutcome(
            leads=mock_leads_for(icp),
            source=SOURCE_MOCK,
            fallback_reason="UnexpectedError",
        )

    leads = persist_leads(user_id, icp_id, outcome.leads)

    logger.info(
        "Generated leads",
        extra={
            "user_id": user_id,
            "icp_id": icp_id,
            "source": outcome.source,
            "requested": icp.lead_count,
            "returned": len(leads),
        },
    )

    return GenerationResult(icp=icp, icp_id=icp_id, leads=leads, source=outcome.source)


__all__ = ["GenerationResult", "default_synthesizer", "generate_leads"]
