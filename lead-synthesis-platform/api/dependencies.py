"""
Shared FastAPI dependencies.

`get_current_user_id` binds a request to a user id from its bearer token:
- missing token  -> 401 "Access token required"
- invalid token  -> 403 "Invalid token"
"""

from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from services.auth_service import AuthenticationError, verify_access_token

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> int:
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=401, detail="Access token required")

    try:
        return verify_access_token(credentials.credentials)
    except AuthenticationError:
        raise HTTPException(status_code=403, detail="Invalid token")
