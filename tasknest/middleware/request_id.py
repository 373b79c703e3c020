"""Request ID middleware.

Forwards a client X-Request-ID or generates one, exposes it on
scope["state"]["request_id"] and echoes it on the response. Raw ASGI so
streaming responses are untouched.
"""

import uuid
from typing import Callable

from tasknest.core.identifiers import is_valid_identifier


def _get_header(scope: dict, name: str) -> str | None:
    """Return first header value for name (case-insensitive). Headers are (bytes, bytes)."""
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("utf-8", errors="replace")
    return None


def resolve_request_id(raw: str | None) -> str:
    """Keep a client id only if it is a safe token; otherwise mint a UUID.

    Client values end up in log lines, so anything outside [A-Za-z0-9_-]
    or longer than 64 chars is replaced.
    """
    candidate = raw.strip() if raw else ""
    if is_valid_identifier(candidate):
        return candidate
    return str(uuid.uuid4())


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Add or forward the request id header on each HTTP exchange."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = resolve_request_id(_get_header(scope, header_name))
        scope.setdefault("state", {})["request_id"] = request_id
        encoded = (header_name.lower().encode(), request_id.encode())

        async def send_with_id(message: dict) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [*message.get("headers", []), encoded]
            await send(message)

        await app(scope, receive, send_with_id)

    return asgi_app
