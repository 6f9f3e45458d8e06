"""
Domain: failure taxonomy for the lead synthesis pipeline.

None of these errors reach an API caller from the generate-leads operation.
The synthesis orchestrator absorbs every LeadSynthesisError by falling back to
mock generation, and the persistence adapter absorbs StoreUnavailable by
substituting in-memory leads.
"""

from __future__ import annotations


class LeadSynthesisError(Exception):
    """Base class for failures of the generative lead service."""
    pass


class ServiceUnavailable(LeadSynthesisError):
    """Raised when the generative service is not configured (no credential)."""
    pass


class ServiceError(LeadSynthesisError):
    """Raised when the call to the generative service itself fails."""
    pass


class MalformedResponse(LeadSynthesisError):
    """Raised when the generative service returns content that is not a usable lead array."""
    pass


class StoreUnavailable(Exception):
    """Raised when the relational store is unconfigured or a store call fails."""
    pass


__all__ = [
    "LeadSynthesisError",
    "ServiceUnavailable",
    "ServiceError",
    "MalformedResponse",
    "StoreUnavailable",
]
