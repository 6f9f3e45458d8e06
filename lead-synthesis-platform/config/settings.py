"""
Runtime settings loaded from the environment.

Values come from a `.env` file in the lead-synthesis-platform directory (if
present) and then from real environment variables. Settings are read at call
time so tests can adjust the environment without reloading modules.

Missing store or AI credentials are not errors: the corresponding collaborator
simply runs in degraded mode (in-memory ids, mock leads).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

# Look for .env in the lead-synthesis-platform directory
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

# Value shipped in example .env files; treated the same as "not configured".
PLACEHOLDER_OPENAI_KEY: str = "your_openai_api_key_here"

DEFAULT_JWT_SECRET: str = "lead-synthesis-platform-dev-secret-change-me"


@dataclass(frozen=True, slots=True)
class Settings:
    supabase_url: Optional[str]
    supabase_key: Optional[str]
    openai_api_key: Optional[str]
    openai_model: str
    openai_timeout_seconds: float
    jwt_secret: str
    jwt_algorithm: str
    log_level: str
    cors_origins: Tuple[str, ...]

    @property
    def store_configured(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)

    @property
    def ai_configured(self) -> bool:
        return bool(self.openai_api_key) and self.openai_api_key != PLACEHOLDER_OPENAI_KEY

    def get_log_level(self) -> int:
        return getattr(logging, self.log_level.upper(), logging.INFO)


def _get_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        logging.getLogger(__name__).warning(
            "Environment variable %s is not a number, using default %s", name, default
        )
        return default


def get_settings() -> Settings:
    """Build a Settings snapshot from the current environment."""

    origins = os.getenv("CORS_ORIGINS", "*")

    return Settings(
        supabase_url=os.getenv("SUPABASE_URL") or None,
        supabase_key=os.getenv("SUPABASE_KEY") or None,
        openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        openai_model=os.getenv("OPENAI_MODEL", "gpt-4"),
        openai_timeout_seconds=_get_float("OPENAI_TIMEOUT_SECONDS", 60.0),
        jwt_secret=os.getenv("JWT_SECRET") or DEFAULT_JWT_SECRET,
        jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        cors_origins=tuple(origin.strip() for origin in origins.split(",") if origin.strip()),
    )


__all__ = ["PLACEHOLDER_OPENAI_KEY", "Settings", "get_settings"]
