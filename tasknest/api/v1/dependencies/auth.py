"""Caller identity from the bearer token."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from tasknest.core.identifiers import require_identifiers
from tasknest.domain.exceptions import AuthenticationException
from tasknest.infrastructure.security.jwt import verify_token

_http_bearer = HTTPBearer(auto_error=False)


async def get_current_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> str:
    """Return the caller id (sub claim). 401 when absent or invalid; 400 when malformed."""
    if credentials is None:
        raise AuthenticationException("Not authenticated")
    subject = verify_token(credentials.credentials)
    require_identifiers(owner_id=subject)
    return subject
