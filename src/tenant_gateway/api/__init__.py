"""
tenant_gateway.api

API package for the Tenant Auth Gateway.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring and request models.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer should remain thin: request parsing + delegation to TenantAuthGateway.
