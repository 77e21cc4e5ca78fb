"""
Exception hierarchy for the knowledge assistant.

Every domain error carries the HTTP status the API layer should answer
with, so routers never translate exceptions themselves. Contextual
fields (offending input, missing setting, failed store operation) are
folded into ``details`` for logging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


def _merge_context(details: dict[str, Any] | None, **context: Any) -> dict[str, Any]:
    merged = dict(details or {})
    merged.update({key: value for key, value in context.items() if value})
    return merged


class KnowledgeAssistantError(Exception):
    """
    Root of all knowledge assistant errors.

    Attributes:
        message: Text returned to the caller as ``{"error": message}``
        details: Debugging context (never returned to the caller)
        status_code: HTTP status for the error payload
    """

    status_code: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        return f"{self.message} | Details: {self.details}"


class ValidationError(KnowledgeAssistantError):
    """Rejected input, raised before any side effect."""

    status_code = 400

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, _merge_context(details, field=field))


class ConfigurationError(KnowledgeAssistantError):
    """Required server configuration (the model API key) is absent."""

    status_code = 500

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, _merge_context(details, setting=setting))


class UpstreamServiceError(KnowledgeAssistantError):
    """
    The remote model service failed or reported an error.

    ``status_code`` is the remote HTTP status for non-success replies and
    500 for transport failures or an error field in a success body.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.status_code = status_code
        super().__init__(message, details)


class StorageError(KnowledgeAssistantError):
    """The durable knowledge store is unreachable or rejected an operation."""

    status_code = 503

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, _merge_context(details, operation=operation))


class DuplicateKeyError(StorageError):
    """An insert collided with an existing entity key."""

    status_code = 409
