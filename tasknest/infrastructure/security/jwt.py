"""Bearer token issue and verification.

The token's sub claim is the caller identity consumed by every task
operation. Secret and algorithm come from tasknest.core.config.
"""

from datetime import UTC, datetime, timedelta
from typing import Any, cast

from jose import JWTError, jwt

from tasknest.core.config import get_settings
from tasknest.domain.exceptions import AuthenticationException


def create_access_token(
    subject: str,
    expires_delta: timedelta | None = None,
    extra_claims: dict[str, Any] | None = None,
) -> str:
    """Issue a signed access token for subject.

    Args:
        subject: Identity stored in the sub claim.
        expires_delta: Optional TTL; else settings.access_token_expire_minutes.
        extra_claims: Optional additional claims.

    Returns:
        Encoded JWT string.
    """
    settings = get_settings()
    ttl = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    claims: dict[str, Any] = dict(extra_claims or {})
    claims["sub"] = subject
    claims["exp"] = datetime.now(UTC) + ttl
    encoded = jwt.encode(
        claims,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded)


def verify_token(token: str) -> str:
    """Decode token and return its sub claim.

    Raises:
        AuthenticationException: If the token is malformed, expired, signed
            with another key, or carries no sub.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise AuthenticationException("Invalid or expired token") from e
    subject = payload.get("sub")
    if not subject or not isinstance(subject, str):
        raise AuthenticationException("Token missing required claim: sub")
    return subject
