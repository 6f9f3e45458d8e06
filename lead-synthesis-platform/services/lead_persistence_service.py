"""
Lead persistence adapter.

Stores the originating ICP and each synthesized lead, one insert at a time.
The store is best-effort:
- ICP insert failure: a time-based id is synthesized and the pipeline goes on.
- Lead insert failure: the in-memory lead is returned in place of the stored
  row, keeping its non-id fields unchanged.

There is no all-or-nothing guarantee across a batch; each lead is stored (or
not) independently.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional, Sequence

from domain.errors import StoreUnavailable
from domain.icp import IcpRequest
from domain.lead import Lead, LeadCandidate
from repositories.icp_repository import insert_icp
from repositories.lead_repository import InsertResult, try_insert_lead

logger = logging.getLogger(__name__)

IcpInserter = Callable[[int, IcpRequest], int]
LeadInserter = Callable[[int, Optional[int], LeadCandidate], InsertResult]


def synthesize_id(offset: int = 0, now_ms: Optional[int] = None) -> int:
    """Placeholder id from the current time in milliseconds plus an offset."""

    base = now_ms if now_ms is not None else int(time.time() * 1000)
    return base + offset


def persist_icp(user_id: int, icp: IcpRequest, *, insert: IcpInserter = insert_icp) -> int:
    """
    Store the ICP and return its id.

    Returns a synthesized id when the store is unavailable.
    """

    try:
        return insert(user_id, icp)
    except StoreUnavailable as e:
        icp_id = synthesize_id()
        logger.warning(
            "ICP insert failed, using synthesized id",
            extra={"user_id": user_id, "icp_id": icp_id, "error": str(e)},
        )
        return icp_id


def persist_leads(
    user_id: int,
    icp_id: Optional[int],
    candidates: Sequence[LeadCandidate],
    *,
    insert: LeadInserter = try_insert_lead,
    now_ms: Optional[int] = None,
) -> List[Lead]:
    """
    Store each candidate and return the resulting leads in input order.

    For every candidate the stored row is used when the insert succeeded;
    otherwise the candidate itself becomes the lead, keeping its provisional id
    if it has one and receiving a synthesized id if it does not.

    Returns:
        A list with exactly one Lead per candidate, every one with a non-null id.
    """

    base_id = now_ms if now_ms is not None else int(time.time() * 1000)
    leads: List[Lead] = []
    failures = 0

    for index, candidate in enumerate(candidates):
        result = insert(user_id, icp_id, candidate)

        if result.lead is not None:
            leads.append(result.lead)
            continue

        failures += 1
        lead_id = candidate.lead_id if candidate.lead_id is not None else synthesize_id(index, base_id)
        leads.append(candidate.to_lead(lead_id=lead_id, user_id=user_id, icp_id=icp_id))

    if failures:
        logger.warning(
            "Lead inserts failed, returning in-memory leads",
            extra={"user_id": user_id, "icp_id": icp_id, "failed": failures, "total": len(leads)},
        )

    return leads


__all__ = ["persist_icp", "persist_leads", "synthesize_id"]
