"""Request context using contextvars.

Holds the request id of the request being served so log records emitted
anywhere below the HTTP layer (e.g. a suppressed lookup failure) can be
tied back to the response that carried the same X-Request-ID.
"""

from contextvars import ContextVar, Token

_current_request_id: ContextVar[str | None] = ContextVar("current_request_id", default=None)


def set_request_id(request_id: str | None) -> Token:
    """Set the request id for the current task; return a token for reset_request_id."""
    return _current_request_id.set(request_id)


def reset_request_id(token: Token) -> None:
    _current_request_id.reset(token)


def get_request_id() -> str | None:
    """Return the current request id, or None outside a request."""
    return _current_request_id.get()
