"""Request ID middleware.

Forwards the client's request id (or generates one), binds it to the
request context so every log line of the request carries it, and echoes
it on the response. 500 responses built by the generic exception handler
bypass this middleware; that handler sets the header itself from
``request.state.request_id``.
"""

import re
import uuid
from typing import Callable

from users_service.shared.context import reset_request_id, set_request_id

# Accepted client ids: alphanumeric, hyphen, underscore, at most 64 chars.
_REQUEST_ID_RE = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


def resolve_request_id(raw: bytes | None) -> str:
    """Return the client id when it is safe to log, otherwise a fresh UUID."""
    if raw:
        candidate = raw.decode("latin-1").strip()
        if _REQUEST_ID_RE.fullmatch(candidate):
            return candidate
    return str(uuid.uuid4())


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Raw ASGI middleware binding the request id to scope state and log context."""
    header_key = header_name.lower().encode()

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        headers = dict(scope.get("headers", []))
        request_id = resolve_request_id(headers.get(header_key))
        scope.setdefault("state", {})["request_id"] = request_id

        async def send_with_request_id(message: dict) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [
                    *message.get("headers", []),
                    (header_key, request_id.encode()),
                ]
            await send(message)

        token = set_request_id(request_id)
        try:
            await app(scope, receive, send_with_request_id)
        finally:
            reset_request_id(token)

    return asgi_app
