"""Request context management using contextvars.

Holds request-scoped values (request id, authenticated staff user) so log
records and spans can carry them without threading them through every call.

Usage:
    set_request_id("3f1c...")
    set_current_user("user123")
    request_id = get_request_id()
"""

from contextvars import ContextVar
from dataclasses import dataclass

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)
_current_user_id: ContextVar[str | None] = ContextVar("current_user_id", default=None)


@dataclass(frozen=True)
class RequestContext:
    """Immutable snapshot of the current request context."""

    request_id: str | None
    user_id: str | None


def set_request_id(request_id: str | None) -> None:
    """Bind the request id for the current task (set by RequestIDMiddleware)."""
    _request_id.set(request_id)


def get_request_id() -> str | None:
    """Return the current request id, or None outside a request."""
    return _request_id.get()


def set_current_user(user_id: str | None) -> None:
    """Bind the authenticated staff user id for the current task."""
    _current_user_id.set(user_id)


def get_current_user_id() -> str | None:
    """Return the current staff user id, or None if not authenticated."""
    return _current_user_id.get()


def clear_context() -> None:
    _request_id.set(None)
    _current_user_id.set(None)


def get_request_context() -> RequestContext:
    """Return a snapshot of the current request context."""
    return RequestContext(request_id=_request_id.get(), user_id=_current_user_id.get())
