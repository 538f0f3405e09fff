"""Custom exceptions shared by the resource layer, the HTTP adapter and the CLI."""

from __future__ import annotations

from typing import Any


class ZendeskError(Exception):
    """Base class for every failure this package raises."""

    kind = "zendesk_error"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.kind,
            "message": str(self),
            "status_code": self.status_code,
        }


class ValidationError(ZendeskError):
    """Raised before dispatch when a request breaks the caller contract."""

    kind = "validation_error"

    def __init__(self, message: str = "Invalid request") -> None:
        super().__init__(message, status_code=422)


class TransportError(ZendeskError):
    """Network failure, timeout or non-success HTTP status."""

    kind = "transport_error"

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        *,
        body: str | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code)
        self.body = body


class NotFoundError(TransportError):
    kind = "not_found"

    def __init__(self, message: str = "Resource not found", *, body: str | None = None) -> None:
        super().__init__(message, status_code=404, body=body)


class DeserializationError(ZendeskError):
    """The response body is not JSON or does not match the expected envelope."""

    kind = "deserialization_error"
