"""
Supabase client initialization.

This module contains *only* the database connection setup. Other repository
modules call `get_supabase()` to obtain the shared client.

The store is a best-effort collaborator: when SUPABASE_URL / SUPABASE_KEY are
missing or the client cannot be created, `get_supabase()` raises
StoreUnavailable instead of failing at import time, so the API can run in demo
mode without a database.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from supabase import Client, create_client  # type: ignore[import-not-found]

from config.settings import get_settings
from domain.errors import StoreUnavailable

logger = logging.getLogger(__name__)

_client: Optional[Client] = None


def get_supabase() -> Client:
    """
    Return the process-wide Supabase client, creating it on first use.

    Raises:
        StoreUnavailable: if credentials are missing or client creation fails.
    """

    global _client
    if _client is not None:
        return _client

    settings = get_settings()
    if not settings.store_configured:
        raise StoreUnavailable(
            "Store not configured: set SUPABASE_URL and SUPABASE_KEY"
        )

    try:
        _client = create_client(settings.supabase_url, settings.supabase_key)
    except Exception as e:
        raise StoreUnavailable(f"Failed to create Supabase client: {e}") from e

    logger.info("Supabase client initialized")
    return _client


def reset_supabase() -> None:
    """Drop the cached client (used when credentials change, e.g. in tests)."""

    global _client
    _client = None


def execute(query: Any, action: str) -> list[dict[str, Any]]:
    """
    Execute a built Supabase query and return its rows.

    Any transport, API, or response-level error is reported as StoreUnavailable
    so callers have a single failure type to handle.
    """

    try:
        response = query.execute()
    except Exception as e:
        raise StoreUnavailable(f"Failed to {action}: {e}") from e

    error = getattr(response, "error", None)
    if error:
        raise StoreUnavailable(f"Failed to {action}: {error}")

    return getattr(response, "data", None) or []


__all__ = ["execute", "get_supabase", "reset_supabase"]
