"""Request context propagation using contextvars."""

from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar

# Context variable for the current inbound request id
_current_request_id: ContextVar[str | None] = ContextVar("current_request_id", default=None)


def get_request_id() -> str | None:
    """Get the request id bound to the current context, if any."""
    return _current_request_id.get()


def set_request_id(request_id: str | None) -> None:
    """
    Bind a request id to the current context.

    This should be called by middleware when a request enters the app.
    """
    _current_request_id.set(request_id)


@contextmanager
def request_context(request_id: str) -> Generator[str, None, None]:
    """
    Context manager binding a request id for the duration of a block.

    Usage:
        with request_context("req-123"):
            logger.info("Handling webhook")  # carries request_id
    """
    token = _current_request_id.set(request_id)
    try:
        yield request_id
    finally:
        _current_request_id.reset(token)
