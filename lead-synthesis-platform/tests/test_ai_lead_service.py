"""
Tests for `services/ai_lead_service.py`.

The OpenAI client is replaced by a MagicMock; no test reaches the network.

Covers:
- Unconfigured or placeholder API key -> ServiceUnavailable
- Provider / transport errors -> ServiceError
- Unparseable or empty replies -> MalformedResponse
- Items without a name or a valid score are dropped
"""

from __future__ import annotations

import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import openai
import pytest

from config.settings import PLACEHOLDER_OPENAI_KEY
from domain.errors import MalformedResponse, ServiceError, ServiceUnavailable
from domain.icp import normalize_icp
from services.ai_lead_service import (
    SYSTEM_PROMPT,
    AILeadSynthesizer,
    build_lead_prompt,
    parse_leads_response,
)


ICP = normalize_icp(
    {
        "industries": ["Technology", "Manufacturing"],
        "region": "Europe",
        "countries": ["Germany", "France"],
        "businessType": "B2B Services",
        "companySize": "51-200",
        "leadCount": 2,
    }
)

LEADS_JSON = json.dumps(
    [
        {
            "name": "Rhein Robotics GmbH",
            "location": "Cologne, Germany",
            "employees": "120",
            "industry": "Manufacturing",
            "description": "Industrial automation integrator.",
            "score": 91,
            "email": "sales@rheinrobotics.de",
            "phone": "+49-2211234567",
        },
        {
            "name": "Lumiere Data",
            "location": "Lyon, France",
            "employees": "80",
            "industry": "Technology",
            "description": "Analytics consultancy.",
            "score": 84,
            "email": "hello@lumieredata.fr",
            "phone": "+33-472000000",
        },
    ]
)


def _client_returning(content) -> MagicMock:
    client = MagicMock()
    client.chat.completions.create.return_value = SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
    )
    return client


def test_synthesize_returns_parsed_leads() -> None:
    client = _client_returning(LEADS_JSON)
    synthesizer = AILeadSynthesizer(api_key="sk-test", model="gpt-4", client=client)

    leads = synthesizer.synthesize(ICP)

    assert [lead.name for lead in leads] == ["Rhein Robotics GmbH", "Lumiere Data"]
    assert leads[0].score == 91
    assert leads[0].website == "https://rheinrobotics.de"
    assert all(lead.lead_id is None for lead in leads)


def test_synthesize_sends_prompt_and_sampling_parameters() -> None:
    client = _client_returning(LEADS_JSON)
    synthesizer = AILeadSynthesizer(api_key="sk-test", model="gpt-4", client=client)

    synthesizer.synthesize(ICP)

    kwargs = client.chat.completions.create.call_args.kwargs
    assert kwargs["model"] == "gpt-4"
    assert kwargs["temperature"] == 0.8
    assert kwargs["max_tokens"] == 2000
    assert kwargs["messages"][0] == {"role": "system", "content": SYSTEM_PROMPT}
    assert kwargs["messages"][1]["content"] == build_lead_prompt(ICP)


def test_prompt_describes_the_icp() -> None:
    prompt = build_lead_prompt(ICP)

    assert prompt.startswith("Generate exactly 2 realistic B2B leads")
    assert "- Industries: Technology, Manufacturing" in prompt
    assert "- Region: Europe specifically in Germany, France" in prompt
    assert "- Company Size: 51-200 employees" in prompt
    assert prompt.endswith(
        "Format as JSON array with fields: name, location, employees, industry, "
        "description, score, email, phone"
    )


def test_prompt_without_countries_names_only_region() -> None:
    prompt = build_lead_prompt(normalize_icp({"region": "Asia"}), count=4)

    assert "Generate exactly 4 realistic" in prompt
    assert "- Region: Asia\n" in prompt


@pytest.mark.parametrize("api_key", ["", PLACEHOLDER_OPENAI_KEY])
def test_missing_or_placeholder_key_is_unavailable(api_key: str) -> None:
    synthesizer = AILeadSynthesizer(api_key=api_key)

    assert synthesizer.configured is False
    with pytest.raises(ServiceUnavailable):
        synthesizer.synthesize(ICP)


def test_key_defaults_to_environment(monkeypatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "sk-from-env")

    assert AILeadSynthesizer().configured is True


def test_provider_error_becomes_service_error() -> None:
    client = MagicMock()
    client.chat.completions.create.side_effect = openai.OpenAIError("quota exceeded")

    with pytest.raises(ServiceError):
        AILeadSynthesizer(api_key="sk-test", client=client).synthesize(ICP)


def test_transport_error_becomes_service_error() -> None:
    client = MagicMock()
    client.chat.completions.create.side_effect = TimeoutError("read timed out")

    with pytest.raises(ServiceError):
        AILeadSynthesizer(api_key="sk-test", client=client).synthesize(ICP)


def test_completion_without_choices_is_malformed() -> None:
    client = MagicMock()
    client.chat.completions.create.return_value = SimpleNamespace(choices=[])

    with pytest.raises(MalformedResponse):
        AILeadSynthesizer(api_key="sk-test", client=client).synthesize(ICP)


@pytest.mark.parametrize(
    "content",
    [
        None,
        "",
        "Here are some leads you might like!",
        '{"name": "Solo Corp", "score": 80}',
        "[]",
        '[{"location": "Nowhere"}, "not an object", 7]',
    ],
)
def test_unusable_replies_are_malformed(content) -> None:
    with pytest.raises(MalformedResponse):
        parse_leads_response(content)


def test_items_with_bad_scores_or_no_name_are_dropped() -> None:
    content = json.dumps(
        [
            {"name": "Good Co", "score": 80},
            {"name": "Too High", "score": 140},
            {"name": "Fractional", "score": 80.5},
            {"name": "Wordy", "score": "high"},
            {"name": "", "score": 90},
            {"name": "Superscript", "score": "²"},
            {"name": "Numeric String", "score": "77"},
        ]
    )

    leads = parse_leads_response(content, default_industry="Technology")

    assert [lead.name for lead in leads] == ["Good Co", "Numeric String"]
    assert leads[1].score == 77
    assert all(lead.industry == "Technology" for lead in leads)


def test_code_fenced_reply_is_accepted() -> None:
    content = "```json\n" + LEADS_JSON + "\n```"

    leads = parse_leads_response(content)

    assert len(leads) == 2
