"""
AI lead synthesizer.

Builds a lead-generation prompt from a canonical ICP, sends it to the OpenAI
chat completions API, and parses the reply into LeadCandidate objects.

Failure kinds (all subclasses of LeadSynthesisError):
- ServiceUnavailable: no API key configured (or the placeholder key)
- ServiceError: the API call failed (network, quota, provider error)
- MalformedResponse: the reply is not a JSON array of usable lead objects

Individual array items that do not fit the lead schema are dropped; the
response as a whole is malformed only if no item survives.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, List, Mapping, Optional

from openai import OpenAI, OpenAIError

from config.settings import PLACEHOLDER_OPENAI_KEY, get_settings
from domain.errors import MalformedResponse, ServiceError, ServiceUnavailable
from domain.icp import IcpRequest
from domain.lead import MAX_SCORE, MIN_SCORE, LeadCandidate

logger = logging.getLogger(__name__)

SYSTEM_PROMPT: str = (
    "You are an expert B2B lead generation assistant. Generate realistic, "
    "high-quality leads based on the ICP provided. Make company names and "
    "details realistic and diverse."
)

LEAD_FIELDS = ("name", "location", "employees", "industry", "description", "score", "email", "phone")

DEFAULT_TEMPERATURE: float = 0.8
DEFAULT_MAX_TOKENS: int = 2000

_CODE_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)


def build_lead_prompt(icp: IcpRequest, count: Optional[int] = None) -> str:
    """Build the user prompt asking for `count` leads (defaults to icp.lead_count)."""

    count = count if count is not None else icp.lead_count
    countries_text = f"specifically in {', '.join(icp.countries)}" if icp.countries else ""
    region_line = f"{icp.region} {countries_text}".strip()

    return (
        f"Generate exactly {count} realistic B2B leads matching this ICP:\n"
        f"- Industries: {icp.industries_text}\n"
        f"- Region: {region_line}\n"
        f"- Business Type: {icp.business_type}\n"
        f"- Company Size: {icp.company_size} employees\n"
        "\n"
        "For each lead, provide realistic data:\n"
        "1. Company Name (realistic business names)\n"
        "2. Specific Location (City, Country)\n"
        f"3. Employee Count (within {icp.company_size} range)\n"
        "4. Brief Description (1-2 sentences about what they do)\n"
        "5. Match Score (75-99 based on ICP fit)\n"
        "6. Industry category\n"
        "7. Realistic email domain\n"
        "8. Phone format for the region\n"
        "\n"
        f"Format as JSON array with fields: {', '.join(LEAD_FIELDS)}"
    )


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _as_score(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        score = value
    elif isinstance(value, float) and value.is_integer():
        score = int(value)
    elif isinstance(value, str) and value.strip().isdecimal():
        try:
            score = int(value.strip())
        except ValueError:
            return None
    else:
        return None
    return score if MIN_SCORE <= score <= MAX_SCORE else None


def _website_from_email(email: str) -> Optional[str]:
    if "@" not in email:
        return None
    domain = email.rsplit("@", 1)[1].strip()
    return f"https://{domain}" if domain else None


def coerce_lead(item: Any, default_industry: str) -> Optional[LeadCandidate]:
    """
    Coerce one parsed JSON item into a LeadCandidate.

    Returns None when the item is not an object, has no company name, or has a
    score that is not an integer in [0, 100].
    """

    if not isinstance(item, Mapping):
        return None

    name = _as_text(item.get("name") or item.get("company_name"))
    score = _as_score(item.get("score"))
    if not name or score is None:
        return None

    email = _as_text(item.get("email"))
    website = _as_text(item.get("website")) or _website_from_email(email)

    return LeadCandidate(
        name=name,
        industry=_as_text(item.get("industry")) or default_industry,
        location=_as_text(item.get("location")),
        employees=_as_text(item.get("employees")),
        description=_as_text(item.get("description")),
        score=score,
        email=email,
        phone=_as_text(item.get("phone")),
        website=website,
    )


def parse_leads_response(content: Optional[str], default_industry: str = "") -> List[LeadCandidate]:
    """
    Parse model output into lead candidates.

    Raises:
        MalformedResponse: content is empty, not JSON, not an array, or holds
            no usable lead objects.
    """

    if not content or not content.strip():
        raise MalformedResponse("Empty response from generative service")

    text = _CODE_FENCE.sub("", content.strip())
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedResponse(f"Response is not valid JSON: {e}") from e

    if not isinstance(payload, list):
        raise MalformedResponse(f"Expected a JSON array, got {type(payload).__name__}")

    leads: List[LeadCandidate] = []
    for index, item in enumerate(payload):
        lead = coerce_lead(item, default_industry)
        if lead is None:
            logger.warning(
                "Dropping malformed lead from AI response",
                extra={"index": index, "item": str(item)[:200]},
            )
            continue
        leads.append(lead)

    if not leads:
        raise MalformedResponse(f"No usable leads in response ({len(payload)} items)")

    return leads


class AILeadSynthesizer:
    """
    OpenAI-backed lead synthesizer.

    The OpenAI client is created lazily on first use; pass `client` to inject a
    fake in tests.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        client: Optional[Any] = None,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        timeout_seconds: Optional[float] = None,
    ) -> None:
        settings = get_settings()
        self.api_key = api_key if api_key is not None else settings.openai_api_key
        self.model = model or settings.openai_model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout_seconds = timeout_seconds or settings.openai_timeout_seconds
        self._client = client

    @property
    def configured(self) -> bool:
        if self._client is not None:
            return True
        return bool(self.api_key) and self.api_key != PLACEHOLDER_OPENAI_KEY

    def _get_client(self) -> Any:
        if not self.configured:
            raise ServiceUnavailable("OPENAI_API_KEY is not configured")
        if self._client is None:
            self._client = OpenAI(api_key=self.api_key, timeout=self.timeout_seconds)
        return self._client

    def synthesize(self, icp: IcpRequest, count: Optional[int] = None) -> List[LeadCandidate]:
        """
        Ask the model for leads matching the ICP.

        Raises:
            ServiceUnavailable, ServiceError, MalformedResponse
        """

        client = self._get_client()
        prompt = build_lead_prompt(icp, count)

        try:
            completion = client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except OpenAIError as e:
            raise ServiceError(f"Generative service call failed: {e}") from e
        except Exception as e:
            # Transport errors not wrapped by the SDK (or raised by an injected client)
            raise ServiceError(f"Generative service call failed: {e!r}") from e

        try:
            content = completion.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            raise MalformedResponse(f"Unexpected completion shape: {e}") from e

        leads = parse_leads_response(content, default_industry=icp.industries_text)
        logger.info(
            "AI synthesized leads",
            extra={"model": self.model, "requested": count or icp.lead_count, "returned": len(leads)},
        )
        return leads


__all__ = [
    "AILeadSynthesizer",
    "SYSTEM_PROMPT",
    "build_lead_prompt",
    "coerce_lead",
    "parse_leads_response",
]
