"""
Bearer token helpers.

Tokens are HS256 JWTs carrying the user id (`id`) and email. Accounts and
token issuance belong to the identity service; this module verifies tokens
for the API and can issue them for tooling and tests.
"""

from __future__ import annotations

from typing import Any, Optional

import jwt

from config.settings import get_settings


class AuthenticationError(Exception):
    """Raised when a bearer token is invalid or carries no user id."""
    pass


def issue_access_token(user_id: int, email: Optional[str] = None, secret: Optional[str] = None) -> str:
    """Sign a token binding the given user id."""

    settings = get_settings()
    payload: dict[str, Any] = {"id": user_id}
    if email:
        payload["email"] = email
    return jwt.encode(payload, secret or settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_access_token(token: str, secret: Optional[str] = None) -> int:
    """
    Verify a bearer token and return the user id it binds.

    Raises:
        AuthenticationError: bad signature, malformed token, or missing user id.
    """

    settings = get_settings()
    try:
        payload = jwt.decode(token, secret or settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except jwt.PyJWTError as e:
        raise AuthenticationError(f"Invalid token: {e}") from e

    user_id = payload.get("id")
    try:
        return int(user_id)
    except (TypeError, ValueError) as e:
        raise AuthenticationError("Token does not carry a user id") from e


__all__ = ["AuthenticationError", "issue_access_token", "verify_access_token"]
