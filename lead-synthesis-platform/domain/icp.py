"""
Domain: Ideal Customer Profile (ICP) and its normalizer.

An ICP is the targeting criteria a user submits to generate leads. Raw input
arrives from the API in either snake_case or the frontend's camelCase keys and
may be incomplete. `normalize_icp` coerces it into a canonical, immutable
IcpRequest. Nothing is ever rejected here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

DEFAULT_LEAD_COUNT: int = 10


@dataclass(frozen=True, slots=True)
class IcpRequest:
    """
    Canonical ICP used by the synthesis pipeline.

    industries_text is the display string handed to prompt building and mock
    generation; industries keeps the original list for persistence.
    company_size is free text and is not validated.
    """

    industries: Tuple[str, ...]
    industries_text: str
    region: str
    countries: Tuple[str, ...]
    business_type: str
    company_size: str
    lead_count: int


def _pick(raw: Mapping[str, Any], *keys: str) -> Any:
    # First present, non-None value among the accepted spellings.
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return None


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _as_tuple(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        text = value.strip()
        return (text,) if text else ()
    if isinstance(value, (list, tuple)):
        return tuple(str(item).strip() for item in value if item is not None and str(item).strip())
    return (str(value),)


def _as_lead_count(value: Any) -> int:
    try:
        count = int(value)
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_LEAD_COUNT
    return count if count > 0 else DEFAULT_LEAD_COUNT


def industries_display(industries: Any) -> str:
    """Render industries as a single display string (lists are joined with ", ")."""

    if isinstance(industries, (list, tuple)):
        return ", ".join(str(item) for item in industries)
    return _as_text(industries)


def normalize_icp(raw: Optional[Mapping[str, Any]]) -> IcpRequest:
    """
    Coerce raw user-submitted ICP fields into an IcpRequest.

    Rules:
    - industries: list joined with ", " for display; single string used as-is.
    - lead_count: defaults to 10 when missing, non-numeric, or non-positive.
    - countries: defaults to an empty tuple.
    - company_size: passed through unvalidated.
    """

    raw = raw or {}
    industries_raw = _pick(raw, "industries", "industry")

    return IcpRequest(
        industries=_as_tuple(industries_raw),
        industries_text=industries_display(industries_raw),
        region=_as_text(_pick(raw, "region")),
        countries=_as_tuple(_pick(raw, "countries")),
        business_type=_as_text(_pick(raw, "business_type", "businessType")),
        company_size=_as_text(_pick(raw, "company_size", "companySize")),
        lead_count=_as_lead_count(_pick(raw, "lead_count", "leadCount")),
    )


__all__ = [
    "DEFAULT_LEAD_COUNT",
    "IcpRequest",
    "industries_display",
    "normalize_icp",
]
