"""Security: bearer token handling."""

from tasknest.infrastructure.security.jwt import create_access_token, verify_token

__all__ = ["create_access_token", "verify_token"]
