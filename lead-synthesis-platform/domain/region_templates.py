"""
Domain: static region templates and company-size buckets for mock leads.

The region table maps a region name to an ordered list of template companies
and a set of phone prefixes. It is immutable configuration built at import
time; callers that need a different table (tests, demos) pass their own
mapping instead of patching this one.

Lookup for an unknown region never fails: it resolves to DEFAULT_REGION.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

DEFAULT_REGION: str = "Asia"
DEFAULT_EMPLOYEE_RANGE: str = "50-200"


@dataclass(frozen=True, slots=True)
class CompanyTemplate:
    name: str
    location: str
    domain: str


@dataclass(frozen=True, slots=True)
class RegionTemplate:
    """Ordered template companies plus the phone prefixes used for the region."""

    companies: Tuple[CompanyTemplate, ...]
    phone_prefixes: Tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.phone_prefixes:
            raise ValueError("phone_prefixes must not be empty")


def _region(companies: Tuple[Tuple[str, str, str], ...], prefixes: Tuple[str, ...]) -> RegionTemplate:
    return RegionTemplate(
        companies=tuple(CompanyTemplate(*entry) for entry in companies),
        phone_prefixes=prefixes,
    )


REGION_TEMPLATES: Mapping[str, RegionTemplate] = MappingProxyType({
    "Asia": _region(
        (
            ("TechVentures Pakistan", "Karachi, Pakistan", "techventures.pk"),
            ("Digital Solutions Asia", "Lahore, Pakistan", "digitalsolutions.asia"),
            ("Innovation Hub PK", "Islamabad, Pakistan", "innovationhub.pk"),
            ("Smart Systems Ltd", "Sialkot, Pakistan", "smartsystems.com"),
            ("Future Tech Industries", "Faisalabad, Pakistan", "futuretech.pk"),
            ("Global Connect Solutions", "Dubai, UAE", "globalconnect.ae"),
            ("Asia Pacific Ventures", "Singapore", "apventures.sg"),
            ("NextGen Innovations", "Bengaluru, India", "nextgen.in"),
            ("Cloud Dynamics Corp", "Mumbai, India", "clouddynamics.in"),
            ("Enterprise Solutions ME", "Riyadh, Saudi Arabia", "enterprise.sa"),
            ("Tech Bridge Solutions", "Dhaka, Bangladesh", "techbridge.bd"),
            ("Digital Transformation Co", "Colombo, Sri Lanka", "digitrans.lk"),
            ("Smart Factory Systems", "Bangkok, Thailand", "smartfactory.th"),
            ("Innovation Labs Asia", "Kuala Lumpur, Malaysia", "innovlabs.my"),
            ("Future Systems PK", "Multan, Pakistan", "futuresystems.pk"),
        ),
        ("+92", "+971", "+91", "+65", "+966", "+880", "+94", "+66", "+60"),
    ),
    "North America": _region(
        (
            ("Silicon Valley Tech", "San Francisco, USA", "svtech.com"),
            ("Digital Ventures Inc", "New York, USA", "digitalventures.com"),
            ("Innovation Partners", "Austin, USA", "innovpartners.com"),
            ("Tech Solutions Canada", "Toronto, Canada", "techsolutions.ca"),
            ("Enterprise Systems US", "Chicago, USA", "enterprisesys.com"),
        ),
        ("+1",),
    ),
    "Europe": _region(
        (
            ("TechHub London", "London, UK", "techhub.co.uk"),
            ("Berlin Innovations", "Berlin, Germany", "berlininno.de"),
            ("Paris Digital", "Paris, France", "parisdigital.fr"),
            ("Amsterdam Tech", "Amsterdam, Netherlands", "amstech.nl"),
            ("Nordic Solutions", "Stockholm, Sweden", "nordicsol.se"),
        ),
        ("+44", "+49", "+33", "+31", "+46"),
    ),
})

# Human-entered size bucket -> normalized employee range.
SIZE_RANGES: Mapping[str, str] = MappingProxyType({
    "1-50": "10-50",
    "51-200": "50-200",
    "201-500": "200-500",
    "500+": "500-1000",
})


def lookup_region(
    region: str | None,
    templates: Mapping[str, RegionTemplate] = REGION_TEMPLATES,
    default_region: str = DEFAULT_REGION,
) -> RegionTemplate:
    """
    Resolve a region name to its template.

    Unknown (or empty) regions resolve to the default region's template.
    Raises KeyError only if the table itself lacks the default region, which is
    a configuration error rather than an input error.
    """

    if region and region in templates:
        return templates[region]
    return templates[default_region]


def employee_range_for(company_size: str | None, size_ranges: Mapping[str, str] = SIZE_RANGES) -> str:
    """Map a size bucket to an employee range; unmapped buckets get "50-200"."""

    if company_size is None:
        return DEFAULT_EMPLOYEE_RANGE
    return size_ranges.get(company_size, DEFAULT_EMPLOYEE_RANGE)


__all__ = [
    "CompanyTemplate",
    "DEFAULT_EMPLOYEE_RANGE",
    "DEFAULT_REGION",
    "REGION_TEMPLATES",
    "RegionTemplate",
    "SIZE_RANGES",
    "employee_range_for",
    "lookup_region",
]
