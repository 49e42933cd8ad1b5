"""
tenant_gateway.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Encapsulate app.state access to the gateway service.
"""

from __future__ import annotations

from fastapi import Request

from tenant_gateway.services.tenant_auth_service import TenantAuthGateway


def gateway_dep(request: Request) -> TenantAuthGateway:
    # Built in `tenant_gateway.api.app` (eagerly for injected providers, else at startup).
    return request.app.state.gateway  # type: ignore[attr-defined]
