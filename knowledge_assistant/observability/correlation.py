"""
Request correlation IDs.

The current ID lives in a ContextVar, so each request task sees its own
value and log records emitted anywhere below the middleware can pick it up.

Dependencies: contextvars
System role: Request tracing across service boundaries
"""

import uuid
from contextvars import ContextVar

NO_CORRELATION_ID = ""

correlation_id_ctx: ContextVar[str] = ContextVar("correlation_id", default=NO_CORRELATION_ID)


def set_correlation_id(correlation_id: str | None = None) -> str:
    """
    Bind a correlation ID to the current context.

    Args:
        correlation_id: Inbound ID to reuse; a UUID4 is generated when missing

    Returns:
        str: The bound ID
    """
    bound = correlation_id or uuid.uuid4().hex
    correlation_id_ctx.set(bound)
    return bound


def get_correlation_id() -> str:
    """Correlation ID of the current context ('' outside a request)."""
    return correlation_id_ctx.get()


def clear_correlation_id() -> None:
    correlation_id_ctx.set(NO_CORRELATION_ID)
