"""
tenant_gateway.errors

Error taxonomy shared by the service and provider layers.

Responsibilities:
- Carry an HTTP status, a client-facing message and optional diagnostic details.
- Keep framework types (FastAPI/Starlette) out of the service layer.
"""

from __future__ import annotations

from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)


class GatewayError(Exception):
    status_code: int = HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, *, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_body(self) -> dict[str, str]:
        body = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(GatewayError):
    """Caller supplied malformed or incomplete input."""

    status_code = HTTP_400_BAD_REQUEST


class NotRegistered(GatewayError):
    """No tenant exists for the requested email."""

    status_code = HTTP_404_NOT_FOUND


class ProviderError(GatewayError):
    """Any failure surfaced by the external provider (network or logical)."""

    status_code = HTTP_500_INTERNAL_SERVER_ERROR


# --- Module Notes -----------------------------------------------------------
# The API layer renders every GatewayError through a single exception handler
# (see `tenant_gateway.api.app`).
