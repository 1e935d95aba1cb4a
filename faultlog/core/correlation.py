"""Correlation id context shared by every fault raised in one logical operation.

- Stores the id in a ContextVar so concurrent asyncio tasks stay isolated
- correlation_scope() installs an id for the duration of a block
- get_correlation_id() is read by FaultError at construction time
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from uuid import uuid4

correlation_id_context: ContextVar[str | None] = ContextVar(
    "correlation_id", default=None
)


def get_correlation_id() -> str | None:
    """Return the current correlation ID.

    Returns:
        str | None: The active correlation ID, or None outside any scope.
    """
    return correlation_id_context.get()


def set_correlation_id(correlation_id: str | None) -> Token[str | None]:
    """Install a correlation ID in the current context.

    Args:
        correlation_id: ID to install, or None to clear.

    Returns:
        Token: Pass to ``correlation_id_context.reset()`` to restore the
            previous value.
    """
    return correlation_id_context.set(correlation_id)


def new_correlation_id() -> str:
    """Generate a fresh correlation ID."""
    return str(uuid4())


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Run a block under one correlation ID.

    Args:
        correlation_id: ID supplied by the caller (e.g. an inbound request
            header). A new one is generated when omitted.

    Yields:
        str: The correlation ID active inside the block.

    Example:
        with correlation_scope(request.headers.get("X-Correlation-Id")):
            await handle(request)
    """
    active = correlation_id or new_correlation_id()
    token = correlation_id_context.set(active)
    try:
        yield active
    finally:
        correlation_id_context.reset(token)
